import logging
import threading
from typing import Dict, Optional, Tuple

from ballot_ledger.security import hash_password, verify_password

logger = logging.getLogger(__name__)


class AccountRegistry:
    """Login accounts for addresses; the host uses them to authenticate callers."""

    def __init__(self):
        self._accounts: Dict[str, str] = {}
        self._lock = threading.Lock()

    # Create a new account with hashed password; None if the address already has one
    def create_account(self, address: str, password: str) -> Optional[str]:
        hashed = hash_password(password)
        with self._lock:
            if address in self._accounts:
                logger.warning(f"Account for {address} already exists.")
                return None
            self._accounts[address] = hashed
        logger.info(f"Account created for {address}")
        return address

    def has_account(self, address: str) -> bool:
        with self._lock:
            return address in self._accounts

    # Login: returns (address, None) on success, (None, reason) otherwise
    def authenticate(self, address: str, password: str) -> Tuple[Optional[str], Optional[str]]:
        with self._lock:
            hashed = self._accounts.get(address)
        if hashed is None or not verify_password(password, hashed):
            return None, "Invalid address or password"
        return address, None
