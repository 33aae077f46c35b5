from __future__ import annotations

from mintsync.domain.reconciliation import match_records
from tests.helpers.ledger import make_record


def test_empty_diff_matches_nothing() -> None:
    records = [make_record("a", seed=1), make_record("b", seed=2)]

    assert match_records(records, {}) == []


def test_matches_exact_uri_in_fetch_order() -> None:
    records = [
        make_record("c", seed=1),
        make_record("a", seed=2),
        make_record("z", seed=3),
        make_record("a ", seed=4),
        make_record("b", seed=5),
    ]
    link_diff = {"a": "A", "b": "B", "c": "C"}

    matched = match_records(records, link_diff)

    assert [record.uri for record in matched] == ["c", "a", "b"]
    assert matched == [records[0], records[1], records[4]]


def test_records_without_diff_entry_are_dropped() -> None:
    records = [make_record("x", seed=1)]

    assert match_records(records, {"a": "A"}) == []
