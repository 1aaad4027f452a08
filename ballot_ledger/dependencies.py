from fastapi import Request

from ballot_ledger.crud import AccountRegistry
from ballot_ledger.ledger import ElectionLedger


def get_ledger(request: Request) -> ElectionLedger:
    return request.app.state.ledger


def get_accounts(request: Request) -> AccountRegistry:
    return request.app.state.accounts
