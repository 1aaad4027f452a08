from pydantic import BaseModel, Field


class VoterRegistration(BaseModel):
    address: str = Field(..., min_length=1)
    voter_id: str = Field(..., examples=["SCII/00724/2017"])


class ProposalIn(BaseModel):
    name: str
    image: str = ""


class ProposalOut(BaseModel):
    message: str
    index: int


class WinnerOut(BaseModel):
    name: str


class AccountCreate(BaseModel):
    address: str = Field(..., min_length=1)
    password: str = Field(..., min_length=6)


class AccountOut(BaseModel):
    address: str


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
