"""Select the fetched on-chain records whose uri has a pending update."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from mintsync.domain.types import OnChainRecord


def match_records(
    records: Iterable[OnChainRecord],
    link_diff: Mapping[str, str],
) -> list[OnChainRecord]:
    """Return the records whose uri is a key of ``link_diff``, in input order."""

    if not link_diff:
        return []
    return [record for record in records if record.uri in link_diff]
