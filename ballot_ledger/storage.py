# ballot_ledger/storage.py
import json
import logging
import os
from typing import Any, Dict, Optional

from cryptography.fernet import Fernet, InvalidToken

logger = logging.getLogger(__name__)


def load_or_create_key(key_file: str) -> bytes:
    """
    Read the Fernet key from ``key_file``, generating it on first use.
    In production: use secure key management (Vault/KMS) instead of a local file.
    """
    if os.path.dirname(key_file):
        os.makedirs(os.path.dirname(key_file), exist_ok=True)
    if not os.path.exists(key_file):
        key = Fernet.generate_key()
        with open(key_file, "wb") as kf:
            kf.write(key)
        logger.info(f"Generated new ledger encryption key at {key_file}")
        return key
    with open(key_file, "rb") as kf:
        return kf.read().strip()


class JsonLedgerStore:
    """Keeps the ledger snapshot in a single JSON file, optionally Fernet-encrypted."""

    backend = "json"

    def __init__(self, path: str, key_file: Optional[str] = None):
        self.path = path
        self.fernet = Fernet(load_or_create_key(key_file)) if key_file else None
        if os.path.dirname(path):
            os.makedirs(os.path.dirname(path), exist_ok=True)

    def load(self) -> Optional[Dict[str, Any]]:
        """Return the stored snapshot, or None when nothing has been written yet."""
        if not os.path.exists(self.path):
            return None
        with open(self.path, "rb") as f:
            raw = f.read()
        if not raw.strip():
            return None
        if self.fernet is not None:
            try:
                raw = self.fernet.decrypt(raw)
            except InvalidToken:
                logger.error(f"Could not decrypt ledger snapshot {self.path}; wrong key?")
                raise
        snapshot = json.loads(raw.decode("utf-8"))
        logger.info(f"Loaded ledger snapshot from {self.path}")
        return snapshot

    def save(self, snapshot: Dict[str, Any]) -> None:
        data = json.dumps(snapshot, indent=2).encode("utf-8")
        if self.fernet is not None:
            data = self.fernet.encrypt(data)
        tmp_path = f"{self.path}.tmp"
        try:
            with open(tmp_path, "wb") as f:
                f.write(data)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.error(f"Error writing ledger snapshot {self.path}: {e}")
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
