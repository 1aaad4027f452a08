# ballot_ledger/config.py
# Central place for settings and constants
import os
from dotenv import load_dotenv

load_dotenv()

# --- Election ---
ELECTION_TITLE = os.getenv("ELECTION_TITLE", "Referendum")
# Owner identity is fixed once the ledger exists; a persisted snapshot wins over this value
OWNER_ADDRESS = os.getenv("OWNER_ADDRESS", "0xf39Fd6e51aad88F6F4ce6aB8827279cffFb92266")
# In production, use secure, environment-variable-based secrets
OWNER_PASSWORD = os.getenv("OWNER_PASSWORD", "owner_password_for_dev_only")

# Unset delegate returned for never-registered voter IDs
ZERO_ADDRESS = "0x" + "0" * 40

# --- Security & JWT Config ---
SECRET_KEY = os.getenv("SECRET_KEY", "a_very_secret_key_for_dev_only")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))
BCRYPT_ROUNDS = int(os.getenv("BCRYPT_ROUNDS", "12"))

# --- Storage ---
# memory | json | mongo
LEDGER_STORAGE = os.getenv("LEDGER_STORAGE", "memory").strip().lower()
LEDGER_DB_PATH = os.getenv("LEDGER_DB_PATH", "data/ledger.json")
# Optional Fernet key file; when set the JSON snapshot is encrypted at rest
LEDGER_KEY_FILE = os.getenv("LEDGER_KEY_FILE") or None

MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017")
MONGO_DB = os.getenv("MONGO_DB", "voting_system")
LEDGER_COLLECTION = os.getenv("LEDGER_COLLECTION", "ledger")

# --- HTTP ---
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://localhost:5173").split(",")
    if o.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
