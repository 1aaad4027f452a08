from pydantic import BaseModel, Field
from typing import Dict, List

from ballot_ledger.config import ZERO_ADDRESS


class Candidate(BaseModel):
    name: str = Field(..., examples=["Solidity"])
    image: str = ""  # optional, may be empty
    vote_count: int = Field(default=0, ge=0)


class VoterRecord(BaseModel):
    delegate: str = ZERO_ADDRESS
    voted: bool = False


class Results(BaseModel):
    candidates: List[Candidate]
    total_votes: int = Field(..., ge=0)


class ElectionInfo(BaseModel):
    title: str = Field(..., examples=["Referendum"])
    owner: str


class LedgerSnapshot(BaseModel):
    """Whole-ledger state as written by the storage backends."""
    title: str
    owner: str
    total_votes: int = 0
    candidates: List[Candidate] = []
    voters: Dict[str, VoterRecord] = {}
