"""Rejections raised by the election ledger.

Every rejection leaves the ledger untouched. The HTTP layer maps each class to a
status code, so callers can tell the causes apart.
"""
from typing import Optional


class LedgerError(Exception):
    default_message = "Ledger operation rejected."

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class Unauthorized(LedgerError):
    default_message = "Only the election owner may perform this operation."


class UnknownVoter(LedgerError):
    default_message = "Voter ID is not registered."


class AddressMismatch(LedgerError):
    default_message = "Caller address does not match the address registered for this voter ID."


class AlreadyVoted(LedgerError):
    default_message = "You have already voted."


class InvalidCandidate(LedgerError):
    default_message = "Candidate index is out of range."


class NoCandidates(LedgerError):
    default_message = "No candidates have been registered."
