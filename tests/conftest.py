"""
Shared fixtures for ledger and API tests.
"""
import os

# Must be set before ballot_ledger.config is imported
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LEDGER_STORAGE"] = "memory"

import pytest
from fastapi.testclient import TestClient

from ballot_ledger.crud import AccountRegistry
from ballot_ledger.ledger import ElectionLedger
from ballot_ledger.main import create_app
from ballot_ledger.security import create_access_token

OWNER = "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266"
VOTER1 = "0x70997970C51812dc3A010C7d01b50e0d17dc79C8"
VOTER2 = "0x3C44CdDdB6a900fa2b585dd299e03d12FA4293BC"
VOTER3 = "0x90F79bf6EB2c4f870365E785982E1f101E93b906"
VOTER4 = "0x15d34AAf54267DB7D7c367839AAf71A00a2C6A65"

VOTER_ID1 = "SCII/00721/2017"
VOTER_ID2 = "SCII/00722/2017"
VOTER_ID3 = "SCII/00723/2017"


@pytest.fixture
def ledger():
    """Fresh in-memory election titled 'Referendum' owned by OWNER."""
    return ElectionLedger("Referendum", OWNER)


@pytest.fixture
def seeded_ledger(ledger):
    """Ledger with Solidity/Rust/Web2 registered and three voters bound."""
    for name in ("Solidity", "Rust", "Web2"):
        ledger.register_proposal(OWNER, name, "")
    ledger.register_voter(OWNER, VOTER1, VOTER_ID1)
    ledger.register_voter(OWNER, VOTER2, VOTER_ID2)
    ledger.register_voter(OWNER, VOTER3, VOTER_ID3)
    return ledger


@pytest.fixture
def accounts():
    return AccountRegistry()


@pytest.fixture
def client(ledger, accounts):
    """FastAPI TestClient bound to the ``ledger`` fixture."""
    return TestClient(create_app(ledger=ledger, accounts=accounts))


@pytest.fixture
def auth_headers():
    def _headers(address):
        return {"Authorization": f"Bearer {create_access_token({'sub': address})}"}
    return _headers
