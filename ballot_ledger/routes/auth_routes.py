from fastapi import APIRouter, Depends, Form, HTTPException

from ballot_ledger.crud import AccountRegistry
from ballot_ledger.dependencies import get_accounts, get_ledger
from ballot_ledger.ledger import ElectionLedger
from ballot_ledger.schemas import AccountCreate, AccountOut, Token
from ballot_ledger.security import create_access_token, get_current_address

auth_router = APIRouter(prefix="/auth", tags=["Auth"])


@auth_router.post("/login", response_model=Token)
def login(
    address: str = Form(...),
    password: str = Form(...),
    accounts: AccountRegistry = Depends(get_accounts),
):
    account, error = accounts.authenticate(address, password)
    if error:
        raise HTTPException(status_code=401, detail=error)
    return Token(access_token=create_access_token({"sub": account}))


@auth_router.post("/accounts", response_model=AccountOut, status_code=201)
def create_account(
    account: AccountCreate,
    caller: str = Depends(get_current_address),
    accounts: AccountRegistry = Depends(get_accounts),
    ledger: ElectionLedger = Depends(get_ledger),
):
    """Creates a login account for a voter address. Owner only."""
    if caller != ledger.owner:
        raise HTTPException(status_code=403, detail="Only the election owner may create accounts.")
    if accounts.has_account(account.address):
        raise HTTPException(status_code=400, detail="Could not create account. Address may already exist.")
    created = accounts.create_account(account.address, account.password)
    if not created:
        raise HTTPException(status_code=400, detail="Could not create account. Address may already exist.")
    return AccountOut(address=created)
