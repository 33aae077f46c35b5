"""Submitter adapters that do not sign or send transactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mintsync.domain.ports import Submitter
    from mintsync.domain.types import MetadataUpdate

log = getLogger(__name__)


@dataclass(slots=True)
class DryRunSubmitter:
    """Log prepared updates instead of sending them."""

    batches: list[list[MetadataUpdate]] = field(default_factory=list["list[MetadataUpdate]"])

    async def submit(
        self,
        updates: Sequence[MetadataUpdate],
        *,
        link_diff: Mapping[str, str],  # noqa: ARG002
    ) -> None:
        self.batches.append(list(updates))
        for update in updates:
            log.info("[dry-run] %s -> %s", update.address, update.data.uri)


if TYPE_CHECKING:
    _submitter_check: Submitter = DryRunSubmitter()
