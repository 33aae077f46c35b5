"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
import time
from logging import getLogger
from typing import TYPE_CHECKING

from mintsync.adapters.solana import SolanaRpcReader, derive_candy_machine_creator
from mintsync.adapters.submitters import DryRunSubmitter
from mintsync.config.solana import get_solana_config
from mintsync.config.sync import get_sync_config
from mintsync.domain.reconciliation import (
    ReconciliationEngine,
    ReconciliationRequest,
    ReconciliationResult,
)

if TYPE_CHECKING:
    from collections.abc import Callable

    from mintsync.domain.cache import CacheSnapshot
    from mintsync.domain.ports import LedgerReader, Submitter


log = getLogger(__name__)


def update_metadata_from_cache(
    *,
    candy_machine: str,
    current: CacheSnapshot,
    candidate: CacheSnapshot,
    batch_size: int | None = None,
    creator_address: str | None = None,
    ledger: LedgerReader | None = None,
    submitter: Submitter | None = None,
    pacing_seconds: float | None = None,
) -> ReconciliationResult:
    """Run one reconciliation of ``current`` towards ``candidate`` for ``candy_machine``.

    ``current`` is refreshed in place for items that have not been minted yet.
    """

    sync_config = get_sync_config()
    effective_ledger = ledger or SolanaRpcReader()
    effective_submitter = submitter or DryRunSubmitter()
    effective_creator = creator_address or derive_candy_machine_creator(
        candy_machine, get_solana_config().candy_machine_program_id
    )
    engine = ReconciliationEngine(
        ledger=effective_ledger,
        submitter=effective_submitter,
        batch_size=batch_size or sync_config.batch_size,
        pacing_seconds=(
            sync_config.pacing_seconds if pacing_seconds is None else pacing_seconds
        ),
    )
    log.info(
        "Starting metadata update: candy_machine=%s, creator=%s, items=%s, batch_size=%s",
        candy_machine,
        effective_creator,
        current.item_count,
        engine.batch_size,
    )

    result = asyncio.run(
        engine.reconcile(
            ReconciliationRequest(
                candy_machine=candy_machine,
                creator_address=effective_creator,
                current=current,
                candidate=candidate,
            )
        )
    )

    log.info(
        f"Finished metadata update: matched={result.matched}, processed={result.processed}, "
        f"pending={len(result.pending)}, batches={len(result.batches)}"
    )
    return result


def run_daemon(
    run_once: Callable[[], object],
    *,
    interval_seconds: float | None = None,
    iterations: int | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Call ``run_once`` forever, sleeping ``interval_seconds`` after every attempt.

    A failing run is logged and retried in full on the next iteration.
    ``iterations`` bounds the loop.
    """

    interval = (
        get_sync_config().daemon_interval_seconds if interval_seconds is None else interval_seconds
    )
    completed = 0
    while iterations is None or completed < iterations:
        try:
            run_once()
        except Exception:  # noqa: BLE001
            log.exception("Reconciliation run failed; retrying in %ss", interval)
        completed += 1
        sleep(interval)
