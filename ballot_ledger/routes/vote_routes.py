from fastapi import APIRouter, Depends

from ballot_ledger.dependencies import get_ledger
from ballot_ledger.ledger import ElectionLedger
from ballot_ledger.models.election_model import VoterRecord
from ballot_ledger.models.vote_model import Vote
from ballot_ledger.schemas import VoterRegistration
from ballot_ledger.security import get_current_address

vote_router = APIRouter(prefix="/vote", tags=["Vote"])


@vote_router.post("/voters", response_model=VoterRecord)
def register_voter(
    registration: VoterRegistration,
    caller: str = Depends(get_current_address),
    ledger: ElectionLedger = Depends(get_ledger),
):
    """
    Binds a voter ID to an address. Owner only.
    Re-registering an ID rebinds its address; its voted flag is kept.
    """
    return ledger.register_voter(caller, registration.address, registration.voter_id)


# voter IDs may contain slashes, e.g. SCII/00724/2017
@vote_router.get("/voters/{voter_id:path}", response_model=VoterRecord)
def get_voter(voter_id: str, ledger: ElectionLedger = Depends(get_ledger)):
    return ledger.get_voter(voter_id)


@vote_router.post("/cast")
def cast_vote(
    vote: Vote,
    caller: str = Depends(get_current_address),
    ledger: ElectionLedger = Depends(get_ledger),
):
    """
    Casts a vote for the candidate at ``candidate_index``.
    The caller must be the address bound to ``voter_id``.
    """
    ledger.vote(caller, vote.voter_id, vote.candidate_index)
    return {
        "message": "Vote cast successfully!",
        "voter_id": vote.voter_id,
        "candidate_index": vote.candidate_index,
    }
