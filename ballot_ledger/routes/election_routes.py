from fastapi import APIRouter, Depends

from ballot_ledger.dependencies import get_ledger
from ballot_ledger.ledger import ElectionLedger
from ballot_ledger.models.election_model import ElectionInfo, Results
from ballot_ledger.schemas import ProposalIn, ProposalOut, WinnerOut
from ballot_ledger.security import get_current_address

router = APIRouter(prefix="/election", tags=["Election"])


@router.get("", response_model=ElectionInfo)
def get_election(ledger: ElectionLedger = Depends(get_ledger)):
    return ElectionInfo(title=ledger.title, owner=ledger.owner)


@router.post("/proposals", response_model=ProposalOut)
def register_proposal(
    proposal: ProposalIn,
    caller: str = Depends(get_current_address),
    ledger: ElectionLedger = Depends(get_ledger),
):
    """
    Registers a candidate. Owner only.
    The returned index is the stable reference used when casting votes.
    """
    index = ledger.register_proposal(caller, proposal.name, proposal.image)
    return ProposalOut(message="Proposal registered successfully!", index=index)


@router.get("/results", response_model=Results)
def get_results(ledger: ElectionLedger = Depends(get_ledger)):
    return ledger.get_results()


@router.get("/winner", response_model=WinnerOut)
def get_winner(ledger: ElectionLedger = Depends(get_ledger)):
    return WinnerOut(name=ledger.get_winner_name())
