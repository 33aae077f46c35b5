"""Domain port definitions for adapters."""

from __future__ import annotations

from .ledger import LedgerReader
from .submission import Submitter

__all__ = ["LedgerReader", "Submitter"]
