"""Compare two cache generations to find links that need an on-chain update."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from mintsync.domain.errors import CacheMismatchError
from mintsync.domain.types import DiffResult

if TYPE_CHECKING:
    from collections.abc import Collection

    from mintsync.domain.cache import CacheSnapshot

log = getLogger(__name__)


def diff_snapshots(
    item_count: int,
    current: CacheSnapshot,
    candidate: CacheSnapshot,
    pending: Collection[int],
) -> DiffResult:
    """Diff ``current`` against ``candidate`` for indices ``0..item_count-1``.

    Both snapshots must describe the same items.
    Pending items only have their link refreshed in ``current`` (mutated in
    place); they have no metadata account yet. Claimed items whose link changed
    are recorded in ``link_diff`` keyed by their current link.
    """

    if current.item_count != candidate.item_count:
        shorter = "current" if current.item_count < candidate.item_count else "candidate"
        raise CacheMismatchError(
            min(current.item_count, candidate.item_count), snapshot=shorter
        )

    pending_set = frozenset(pending)
    result = DiffResult()
    for index in range(item_count):
        record = current.item(index, snapshot="current")
        candidate_link = candidate.item(index, snapshot="candidate").link

        if index in pending_set:
            record.link = candidate_link
            result.refreshed.append(index)
            continue

        if record.link == candidate_link:
            continue
        previous = result.link_diff.get(record.link)
        if previous is not None and previous != candidate_link:
            log.debug(
                "Index %s overrides update for link %s (%s -> %s)",
                index,
                record.link,
                previous,
                candidate_link,
            )
        result.link_diff[record.link] = candidate_link
        result.changed.append(index)

    return result
