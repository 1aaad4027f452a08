# ballot_ledger/ledger.py
"""
Single-election voting ledger.

The owner registers candidates (proposals) and voters; each registered voter casts
exactly one vote by presenting their voter ID from the address it is bound to.
Every operation, reads included, runs under one lock, so writes apply in a total
order and reads never see a partial write.
"""
import logging
import threading
from typing import Any, Dict, List, Optional

from ballot_ledger.errors import (
    AddressMismatch,
    AlreadyVoted,
    InvalidCandidate,
    NoCandidates,
    UnknownVoter,
    Unauthorized,
)
from ballot_ledger.models.election_model import Candidate, LedgerSnapshot, Results, VoterRecord

logger = logging.getLogger(__name__)


class ElectionLedger:
    def __init__(self, title: str, owner: str, store=None):
        """
        Args:
            title: Election title, immutable once set
            owner: Address allowed to register voters and proposals
            store: Optional backend with a ``save(snapshot: dict)`` method, called
                after every successful mutation while the lock is held
        """
        self._title = title
        self._owner = owner
        self._candidates: List[Candidate] = []
        self._voters: Dict[str, VoterRecord] = {}
        self._total_votes = 0
        self._store = store
        self._lock = threading.Lock()

    @classmethod
    def from_snapshot(cls, snapshot: Dict[str, Any], store=None) -> "ElectionLedger":
        state = LedgerSnapshot.model_validate(snapshot)
        counted = sum(c.vote_count for c in state.candidates)
        if counted != state.total_votes:
            raise ValueError(
                f"snapshot tally mismatch: candidates sum to {counted}, total_votes is {state.total_votes}"
            )
        ledger = cls(state.title, state.owner, store=store)
        ledger._candidates = list(state.candidates)
        ledger._voters = dict(state.voters)
        ledger._total_votes = state.total_votes
        return ledger

    @property
    def title(self) -> str:
        return self._title

    @property
    def owner(self) -> str:
        return self._owner

    @property
    def storage_backend(self) -> str:
        return getattr(self._store, "backend", "memory")

    def close(self) -> None:
        """Release the storage backend, if it holds a connection."""
        close = getattr(self._store, "close", None)
        if close is not None:
            close()

    def _require_owner(self, caller: str, operation: str) -> None:
        if caller != self._owner:
            logger.warning(f"Unauthorized {operation} attempt by {caller}")
            raise Unauthorized()

    def _persist(self) -> None:
        if self._store is not None:
            self._store.save(self._snapshot_unlocked())

    def _snapshot_unlocked(self) -> Dict[str, Any]:
        return LedgerSnapshot(
            title=self._title,
            owner=self._owner,
            total_votes=self._total_votes,
            candidates=self._candidates,
            voters=self._voters,
        ).model_dump()

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            return self._snapshot_unlocked()

    # --- Mutations ---

    def register_voter(self, caller: str, address: str, voter_id: str) -> VoterRecord:
        """
        Bind ``voter_id`` to ``address``. Re-registering an existing ID rebinds the
        address and keeps its voted flag, so a voter cannot vote twice via rebinding.
        """
        with self._lock:
            self._require_owner(caller, "register_voter")
            previous = self._voters.get(voter_id)
            voted = previous.voted if previous is not None else False
            self._voters[voter_id] = VoterRecord(delegate=address, voted=voted)
            try:
                self._persist()
            except Exception:
                if previous is None:
                    del self._voters[voter_id]
                else:
                    self._voters[voter_id] = previous
                raise
            action = "rebound" if previous is not None else "registered"
            logger.info(f"Voter {voter_id} {action} to {address}")
            return self._voters[voter_id].model_copy()

    def register_proposal(self, caller: str, name: str, image: str = "") -> int:
        """Append a candidate and return its index."""
        with self._lock:
            self._require_owner(caller, "register_proposal")
            self._candidates.append(Candidate(name=name, image=image or "", vote_count=0))
            index = len(self._candidates) - 1
            try:
                self._persist()
            except Exception:
                self._candidates.pop()
                raise
            logger.info(f"Proposal {name!r} registered at index {index}")
            return index

    def vote(self, caller: str, voter_id: str, candidate_index: int) -> None:
        with self._lock:
            record = self._voters.get(voter_id)
            if record is None:
                logger.warning(f"Vote rejected: unknown voter ID {voter_id}")
                raise UnknownVoter()
            if record.delegate != caller:
                logger.warning(f"Vote rejected: {caller} is not bound to voter ID {voter_id}")
                raise AddressMismatch()
            if record.voted:
                logger.warning(f"Vote rejected: voter ID {voter_id} already voted")
                raise AlreadyVoted()
            if not 0 <= candidate_index < len(self._candidates):
                logger.warning(f"Vote rejected: candidate index {candidate_index} out of range")
                raise InvalidCandidate()

            candidate = self._candidates[candidate_index]
            candidate.vote_count += 1
            self._total_votes += 1
            record.voted = True
            try:
                self._persist()
            except Exception:
                candidate.vote_count -= 1
                self._total_votes -= 1
                record.voted = False
                raise
            logger.info(f"Vote cast by {voter_id} for candidate {candidate_index} ({candidate.name})")

    # --- Reads ---

    def get_voter(self, voter_id: str) -> VoterRecord:
        with self._lock:
            record = self._voters.get(voter_id)
            return record.model_copy() if record is not None else VoterRecord()

    def get_results(self) -> Results:
        with self._lock:
            return Results(
                candidates=[c.model_copy() for c in self._candidates],
                total_votes=self._total_votes,
            )

    def get_winner_name(self) -> str:
        with self._lock:
            if not self._candidates:
                raise NoCandidates()
            winner: Optional[Candidate] = None
            for candidate in self._candidates:
                # strictly greater keeps the lowest index among ties
                if winner is None or candidate.vote_count > winner.vote_count:
                    winner = candidate
            return winner.name
