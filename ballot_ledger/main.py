# main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response

from ballot_ledger.config import (
    CORS_ORIGINS,
    ELECTION_TITLE,
    LEDGER_DB_PATH,
    LEDGER_KEY_FILE,
    LEDGER_STORAGE,
    LOG_LEVEL,
    OWNER_ADDRESS,
    OWNER_PASSWORD,
)
from ballot_ledger.crud import AccountRegistry
from ballot_ledger.errors import (
    AddressMismatch,
    AlreadyVoted,
    InvalidCandidate,
    LedgerError,
    NoCandidates,
    UnknownVoter,
    Unauthorized,
)
from ballot_ledger.ledger import ElectionLedger
from ballot_ledger.routes.auth_routes import auth_router
from ballot_ledger.routes.election_routes import router as election_router
from ballot_ledger.routes.vote_routes import vote_router

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

LEDGER_ERROR_STATUS = {
    Unauthorized: 403,
    AddressMismatch: 403,
    UnknownVoter: 404,
    NoCandidates: 404,
    AlreadyVoted: 409,
    InvalidCandidate: 400,
}


def build_store(backend: str = LEDGER_STORAGE):
    if backend == "memory":
        return None
    if backend == "json":
        from ballot_ledger.storage import JsonLedgerStore
        return JsonLedgerStore(LEDGER_DB_PATH, key_file=LEDGER_KEY_FILE)
    if backend == "mongo":
        from ballot_ledger.storage_mongo import MongoStorage
        return MongoStorage()
    raise ValueError(f"Unsupported LEDGER_STORAGE '{backend}'; expected memory, json or mongo")


def build_ledger(store=None, title: str = ELECTION_TITLE, owner: str = OWNER_ADDRESS) -> ElectionLedger:
    snapshot = store.load() if store is not None else None
    if snapshot is None:
        logger.info(f"Creating election '{title}' owned by {owner}")
        return ElectionLedger(title, owner, store=store)

    ledger = ElectionLedger.from_snapshot(snapshot, store=store)
    # title and owner are immutable; the stored values win
    if ledger.title != title or ledger.owner != owner:
        logger.warning(
            f"Configured election ('{title}', {owner}) differs from stored "
            f"('{ledger.title}', {ledger.owner}); using stored values"
        )
    return ledger


def create_app(ledger: Optional[ElectionLedger] = None, accounts: Optional[AccountRegistry] = None) -> FastAPI:
    if ledger is None:
        ledger = build_ledger(build_store())
    if accounts is None:
        accounts = AccountRegistry()
        accounts.create_account(ledger.owner, OWNER_PASSWORD)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        app.state.ledger.close()
        logger.info("Ledger storage closed")

    app = FastAPI(title="Ballot Ledger API", lifespan=lifespan)
    app.state.ledger = ledger
    app.state.accounts = accounts

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(LedgerError)
    async def ledger_error_handler(request: Request, exc: LedgerError):
        status_code = LEDGER_ERROR_STATUS.get(type(exc), 400)
        return JSONResponse(
            status_code=status_code,
            content={"error": type(exc).__name__, "detail": exc.message},
        )

    app.include_router(auth_router)
    app.include_router(election_router)
    app.include_router(vote_router)

    @app.get("/", tags=["Root"])
    def read_root():
        return {"message": "Welcome to the Ballot Ledger API"}

    @app.get("/health", tags=["Root"])
    def health_check():
        return {"status": "healthy", "storage": app.state.ledger.storage_backend}

    @app.get("/favicon.ico", include_in_schema=False)
    async def favicon():
        return Response(status_code=204)

    return app


app = create_app()
