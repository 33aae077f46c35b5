"""Error taxonomy for the reconciliation core."""

from __future__ import annotations


class ReconciliationError(RuntimeError):
    """Base class for failures raised by the reconciliation core."""


class PreconditionError(ReconciliationError):
    """Raised when inputs required to start a run are absent or malformed."""


class AccountNotFoundError(PreconditionError):
    """Raised when the candy machine account does not exist on the ledger."""

    def __init__(self, address: str) -> None:
        super().__init__(f"Account not found: {address}")
        self.address = address


class MalformedAccountError(PreconditionError):
    """Raised when account data is too short or otherwise cannot be decoded."""


class CacheFileError(PreconditionError):
    """Raised when a cache file cannot be read or fails validation."""


class CacheMismatchError(ReconciliationError):
    """Raised when the current and candidate caches do not describe the same items."""

    def __init__(self, index: int, *, snapshot: str) -> None:
        super().__init__(f"Item {index} missing from {snapshot} cache")
        self.index = index
        self.snapshot = snapshot


class SubmissionError(ReconciliationError):
    """Raised by submitters when a batch could not be written to the ledger."""
