"""Ports for writing metadata updates to the remote ledger."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from mintsync.domain.types import MetadataUpdate


@runtime_checkable
class Submitter(Protocol):
    """Sends one ledger transaction per call, applying its own retry policy.

    Implementations own the signing key. Failures are raised, never returned.
    """

    async def submit(
        self,
        updates: Sequence[MetadataUpdate],
        *,
        link_diff: Mapping[str, str],
    ) -> None: ...


__all__ = ["Submitter"]
