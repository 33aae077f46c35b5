"""Orchestrator for one reconciliation run.

The engine composes the stages over the ledger and submitter ports without
prescribing concrete adapters:

1) fetch the candy machine account and decode the claimed-items bitmap
2) diff the current cache against the candidate cache
3) fetch the creator's metadata records and match them against the diff
4) submit the matched records in paced batches
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from .batching import PACING_DELAY_SECONDS, BatchScheduler, Sleep
from .bitmap import BitmapLayout, decode_pending_indices
from .diff import diff_snapshots
from .match import match_records

if TYPE_CHECKING:
    from mintsync.domain.cache import CacheSnapshot
    from mintsync.domain.ports import LedgerReader, Submitter
    from mintsync.domain.types import LinkDiff, PendingSet

log = getLogger(__name__)


@dataclass(slots=True, kw_only=True)
class ReconciliationRequest:
    candy_machine: str
    creator_address: str
    current: CacheSnapshot
    candidate: CacheSnapshot


@dataclass(slots=True, kw_only=True)
class ReconciliationResult:
    """Summary of one run. ``processed`` counts records submitted successfully."""

    item_count: int
    pending: PendingSet
    link_diff: LinkDiff
    matched: int
    processed: int
    batches: list[int] = field(default_factory=list[int])


@dataclass(slots=True)
class ReconciliationEngine:
    ledger: LedgerReader
    submitter: Submitter
    batch_size: int
    layout: BitmapLayout = field(default_factory=BitmapLayout)
    pacing_seconds: float = PACING_DELAY_SECONDS
    update_authority: str | None = None
    sleep: Sleep = asyncio.sleep

    async def reconcile(self, request: ReconciliationRequest) -> ReconciliationResult:
        scheduler = BatchScheduler(
            submitter=self.submitter,
            batch_size=self.batch_size,
            pacing_seconds=self.pacing_seconds,
            update_authority=self.update_authority,
            sleep=self.sleep,
        )
        item_count = request.current.item_count

        blob = await self.ledger.get_account_info(request.candy_machine)
        pending = decode_pending_indices(
            blob,
            item_count,
            layout=self.layout,
            address=request.candy_machine,
        )
        log.info("Candy machine has %s of %s items unminted", len(pending), item_count)

        records = await self.ledger.get_accounts_by_creator(request.creator_address)

        diff = diff_snapshots(item_count, request.current, request.candidate, pending)
        worklist = match_records(records, diff.link_diff)
        matched = len(worklist)
        log.info("Found %s uris to update", matched)

        batch_result = await scheduler.run(worklist, diff.link_diff)

        return ReconciliationResult(
            item_count=item_count,
            pending=pending,
            link_diff=diff.link_diff,
            matched=matched,
            processed=batch_result.total,
            batches=batch_result.batches,
        )
