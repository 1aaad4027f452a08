from pydantic import BaseModel, Field, StrictInt


class Vote(BaseModel):
    voter_id: str = Field(..., examples=["SCII/00721/2017"])
    # strict so JSON booleans are not coerced to 0/1;
    # range is checked by the ledger so out-of-range values map to InvalidCandidate
    candidate_index: StrictInt
