"""
Unit tests for the progress updater.

Tests:
- Rate moves up/down by one and stays within 0-5
- review_count grows by exactly one per update
- Inputs are never mutated
- Explicit ratings and resets
"""

import itertools
from datetime import timedelta

import pytest

from wordreview.core import ReviewRecord
from wordreview.study.progress import ReviewOutcome, apply_outcome, apply_rating, reset_progress

CORRECT = ReviewOutcome(correct=True)
WRONG = ReviewOutcome(correct=False)


class TestApplyOutcome:
    def test_correct_answer_increases_rate(self, make_record, now):
        updated = apply_outcome(make_record("a", rate=2, count=3), CORRECT, now)
        assert updated.mastery_rate == 3

    def test_wrong_answer_decreases_rate(self, make_record, now):
        updated = apply_outcome(make_record("a", rate=2, count=3), WRONG, now)
        assert updated.mastery_rate == 1

    def test_rate_capped_at_five(self, make_record, now):
        assert apply_outcome(make_record("a", rate=5, count=9), CORRECT, now).mastery_rate == 5

    def test_rate_floored_at_zero(self, make_record, now):
        assert apply_outcome(make_record("a", rate=0, count=1), WRONG, now).mastery_rate == 0

    def test_stamps_review_time(self, make_record, now):
        updated = apply_outcome(make_record("a"), CORRECT, now)
        assert updated.last_reviewed_at == now
        assert updated.id == "a"

    def test_input_not_mutated(self, make_record, now):
        original = make_record("a", rate=2, count=3, days_ago=5)
        apply_outcome(original, CORRECT, now)
        assert original.mastery_rate == 2
        assert original.review_count == 3
        assert original.last_reviewed_at == now - timedelta(days=5)

    @pytest.mark.parametrize("start_rate", range(6))
    def test_rate_stays_in_range_for_any_outcome_sequence(self, start_rate, now):
        for sequence in itertools.product([True, False], repeat=6):
            record = ReviewRecord(id="x", mastery_rate=start_rate)
            for correct in sequence:
                record = apply_outcome(record, ReviewOutcome(correct), now)
                assert 0 <= record.mastery_rate <= 5

    def test_review_count_increments_by_one_each_time(self, now):
        record = ReviewRecord.new("x")
        for step, correct in enumerate([True, False, False, True, True], start=1):
            record = apply_outcome(record, ReviewOutcome(correct), now)
            assert record.review_count == step


class TestReviewOutcome:
    def test_ambiguous_answer_counts_as_wrong(self):
        assert ReviewOutcome.from_answer(None).correct is False
        assert ReviewOutcome.from_answer(True).correct is True


class TestApplyRating:
    @pytest.mark.parametrize("rate, expected", [(3, 3), (7, 5), (-2, 0)])
    def test_rating_is_clamped(self, make_record, now, rate, expected):
        updated = apply_rating(make_record("a", rate=1, count=2), rate, now)
        assert updated.mastery_rate == expected
        assert updated.review_count == 3
        assert updated.last_reviewed_at == now


class TestResetProgress:
    def test_reset_returns_fresh_record(self, make_record):
        reset = reset_progress(make_record("a", rate=4, count=12, days_ago=2))
        assert reset == ReviewRecord.new("a")
