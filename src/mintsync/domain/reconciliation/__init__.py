"""Reconciliation core: bitmap decoding, cache diffing, matching and batching."""

from __future__ import annotations

from .batching import PACING_DELAY_SECONDS, BatchRunResult, BatchScheduler, prepare_update
from .bitmap import (
    CONFIG_ARRAY_START_V2,
    CONFIG_LINE_SIZE_V2,
    BitmapLayout,
    bitmap_length,
    decode_pending_indices,
)
from .diff import diff_snapshots
from .engine import ReconciliationEngine, ReconciliationRequest, ReconciliationResult
from .match import match_records

__all__ = [
    "CONFIG_ARRAY_START_V2",
    "CONFIG_LINE_SIZE_V2",
    "PACING_DELAY_SECONDS",
    "BatchRunResult",
    "BatchScheduler",
    "BitmapLayout",
    "ReconciliationEngine",
    "ReconciliationRequest",
    "ReconciliationResult",
    "bitmap_length",
    "decode_pending_indices",
    "diff_snapshots",
    "match_records",
    "prepare_update",
]
