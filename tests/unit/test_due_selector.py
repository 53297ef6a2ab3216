"""
Unit tests for the due-set selector.

Focused on ordering, tie-breaks and limits; no store is involved.
"""

import pytest

from wordreview.core import InvalidArgumentError
from wordreview.study.due_selector import (
    filter_difficult,
    filter_unreviewed,
    order_by_priority,
    select_due,
)


class TestSelectDue:
    def test_empty_input(self, now):
        assert select_due([], now) == []

    def test_orders_by_rate_with_stable_ties(self, make_record, now):
        records = [
            make_record("r3", rate=3, count=1, days_ago=40),
            make_record("r0a", rate=0, count=1, days_ago=40),
            make_record("r5", rate=5, count=1, days_ago=40),
            make_record("r0b", rate=0, count=1, days_ago=40),
        ]
        ids = [r.id for r in select_due(records, now)]
        assert ids == ["r0a", "r0b", "r3", "r5"]

    def test_identical_keys_keep_input_order(self, make_record, now):
        records = [make_record(i, rate=1, count=2, days_ago=10) for i in range(6)]
        assert [r.id for r in select_due(records, now)] == list(range(6))

    def test_never_reviewed_sorts_before_oldest_review(self, make_record, now):
        records = [
            make_record("old", rate=0, count=1, days_ago=30),
            make_record("older", rate=0, count=1, days_ago=60),
            make_record("fresh"),
        ]
        assert [r.id for r in select_due(records, now)] == ["fresh", "older", "old"]

    def test_scenario(self, make_record, now):
        a = make_record("A", rate=0, count=0)
        b = make_record("B", rate=5, count=10, days_ago=1)
        c = make_record("C", rate=2, count=3, days_ago=10)
        assert select_due([a, b, c], now) == [a, c]

    def test_limit_truncates_after_ordering(self, make_record, now):
        records = [
            make_record("r2", rate=2, count=1, days_ago=10),
            make_record("r1", rate=1, count=1, days_ago=10),
            make_record("r0", rate=0, count=1, days_ago=10),
        ]
        assert [r.id for r in select_due(records, now, limit=2)] == ["r0", "r1"]

    def test_limit_zero_returns_empty(self, make_record, now):
        assert select_due([make_record("a")], now, limit=0) == []

    def test_negative_limit_rejected(self, make_record, now):
        with pytest.raises(InvalidArgumentError):
            select_due([make_record("a")], now, limit=-1)

    def test_accepts_generators(self, make_record, now):
        records = (make_record(i) for i in range(3))
        assert len(select_due(records, now)) == 3


class TestOrderByPriority:
    def test_includes_records_that_are_not_due(self, make_record):
        records = [make_record("b", rate=4, count=2, days_ago=1), make_record("a", rate=1, count=1, days_ago=1)]
        assert [r.id for r in order_by_priority(records)] == ["a", "b"]


class TestFilters:
    def test_filter_unreviewed(self, make_record):
        records = [make_record("new"), make_record("seen", count=2, days_ago=1)]
        assert [r.id for r in filter_unreviewed(records)] == ["new"]

    def test_filter_difficult_skips_unreviewed(self, make_record):
        records = [
            make_record("new", rate=0),
            make_record("weak", rate=1, count=4, days_ago=1),
            make_record("edge", rate=2, count=4, days_ago=1),
            make_record("strong", rate=4, count=4, days_ago=1),
        ]
        assert [r.id for r in filter_difficult(records)] == ["weak", "edge"]
        assert [r.id for r in filter_difficult(records, max_rate=1)] == ["weak"]
