"""Submit metadata updates in fixed-size, paced batches."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field, replace
from logging import getLogger
from typing import TYPE_CHECKING

from solders.pubkey import Pubkey

from mintsync.domain.types import Creator, MetadataUpdate

if TYPE_CHECKING:
    from collections.abc import Mapping

    from mintsync.domain.ports import Submitter
    from mintsync.domain.types import OnChainRecord

log = getLogger(__name__)

PACING_DELAY_SECONDS = 0.5

Sleep = Callable[[float], Awaitable[None]]


def to_base58(address: str | bytes) -> str:
    if isinstance(address, bytes):
        return str(Pubkey.from_bytes(address))
    return str(Pubkey.from_string(address))


def prepare_update(
    record: OnChainRecord,
    link_diff: Mapping[str, str],
    *,
    update_authority: str | None = None,
) -> MetadataUpdate:
    """Build the update for ``record``: new uri, base58 creators, sale flag unset."""

    data = record.metadata.data
    creators = data.creators
    if creators is not None:
        creators = tuple(
            Creator(
                address=to_base58(creator.address),
                verified=creator.verified,
                share=creator.share,
            )
            for creator in creators
        )
    new_data = replace(data, uri=link_diff[data.uri], creators=creators)
    return MetadataUpdate(
        address=record.address,
        data=new_data,
        update_authority=update_authority,
        primary_sale_happened=None,
    )


@dataclass(slots=True)
class BatchRunResult:
    total: int = 0
    batches: list[int] = field(default_factory=list[int])


@dataclass(slots=True)
class BatchScheduler:
    """Drive one submitter call per batch, strictly one batch at a time.

    Every batch, including the first, waits ``pacing_seconds`` before it is
    submitted. Submitter failures propagate and abort the remaining worklist.
    """

    submitter: Submitter
    batch_size: int
    pacing_seconds: float = PACING_DELAY_SECONDS
    update_authority: str | None = None
    sleep: Sleep = asyncio.sleep

    def __post_init__(self) -> None:
        if (
            isinstance(self.batch_size, bool)
            or not isinstance(self.batch_size, int)
            or self.batch_size <= 0
        ):
            raise ValueError(f"Batch size must be a positive integer, got {self.batch_size!r}")
        if self.pacing_seconds < 0:
            raise ValueError("Pacing delay must be non-negative")

    async def run(
        self,
        worklist: list[OnChainRecord],
        link_diff: Mapping[str, str],
    ) -> BatchRunResult:
        """Consume ``worklist`` in place from the front until it is empty."""

        result = BatchRunResult()
        while worklist:
            log.debug("Signing metadata")
            batch = worklist[: self.batch_size]
            del worklist[: self.batch_size]
            updates = [
                prepare_update(record, link_diff, update_authority=self.update_authority)
                for record in batch
            ]
            await self.sleep(self.pacing_seconds)
            await self.submitter.submit(updates, link_diff=link_diff)
            result.total += len(batch)
            result.batches.append(len(batch))
            log.debug("Processed %s records", result.total)

        log.info("Finished updating metadata for %s records", result.total)
        return result
