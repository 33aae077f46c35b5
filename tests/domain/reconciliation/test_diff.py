from __future__ import annotations

import pytest

from mintsync.domain.errors import CacheMismatchError
from mintsync.domain.reconciliation import diff_snapshots
from tests.helpers.ledger import make_snapshot


def test_identical_snapshots_produce_empty_diff() -> None:
    current = make_snapshot(["a", "b", "c", "d"])
    candidate = make_snapshot(["a", "b", "c", "d"])

    result = diff_snapshots(4, current, candidate, pending=(1, 3))

    assert result.link_diff == {}
    assert result.changed == []
    assert result.refreshed == [1, 3]
    assert [current.item(i).link for i in range(4)] == ["a", "b", "c", "d"]


def test_claimed_changes_are_keyed_by_old_link() -> None:
    current = make_snapshot(["a", "b", "c", "d"])
    candidate = make_snapshot(["a", "B", "c", "D"])

    result = diff_snapshots(4, current, candidate, pending=())

    assert result.link_diff == {"b": "B", "d": "D"}
    assert result.changed == [1, 3]
    # Claimed records are left untouched in the current cache.
    assert current.item(1).link == "b"


def test_pending_items_are_refreshed_in_place_without_diff() -> None:
    current = make_snapshot(["a", "x", "c"])
    candidate = make_snapshot(["a", "y", "C"])

    result = diff_snapshots(3, current, candidate, pending=(1,))

    assert result.link_diff == {"c": "C"}
    assert current.item(1).link == "y"
    assert candidate.item(1).link == "y"


def test_pending_membership_uses_each_index() -> None:
    current = make_snapshot(["a", "b", "c", "d"])
    candidate = make_snapshot(["A", "B", "C", "D"])

    result = diff_snapshots(4, current, candidate, pending=(0, 2))

    assert result.link_diff == {"b": "B", "d": "D"}
    assert [current.item(i).link for i in range(4)] == ["A", "b", "C", "d"]


def test_duplicate_old_link_keeps_later_index() -> None:
    current = make_snapshot(["same", "same"])
    candidate = make_snapshot(["first", "second"])

    result = diff_snapshots(2, current, candidate, pending=())

    assert result.link_diff == {"same": "second"}
    assert result.changed == [0, 1]


def test_missing_candidate_item_raises() -> None:
    current = make_snapshot(["a", "b", "c"])
    candidate = make_snapshot(["a", "b"])

    with pytest.raises(CacheMismatchError) as exc:
        diff_snapshots(3, current, candidate, pending=())

    assert exc.value.index == 2
    assert exc.value.snapshot == "candidate"


def test_extra_candidate_item_raises_before_refreshing() -> None:
    current = make_snapshot(["a", "b"])
    candidate = make_snapshot(["x", "y", "c"])

    with pytest.raises(CacheMismatchError) as exc:
        diff_snapshots(2, current, candidate, pending=(0, 1))

    assert exc.value.index == 2
    assert exc.value.snapshot == "current"
    assert [current.item(i).link for i in range(2)] == ["a", "b"]


def test_item_count_beyond_current_raises() -> None:
    current = make_snapshot(["a"])
    candidate = make_snapshot(["a", "b"])

    with pytest.raises(CacheMismatchError, match="current"):
        diff_snapshots(2, current, candidate, pending=())
