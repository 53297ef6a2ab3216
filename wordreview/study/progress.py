"""
Progress Updater.

Maps (record, outcome) to the record's next state:
- Correct answer: mastery +1 (capped at 5)
- Wrong answer: mastery -1 (floored at 0)
- Every answer: review_count +1, last_reviewed_at = now

The caller supplies `now`; nothing here reads a clock. Inputs are never
mutated, so callers can diff old and new records for logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from wordreview.core.review_record import (
    MAX_MASTERY,
    MIN_MASTERY,
    ReviewRecord,
    clamp_rate,
    ensure_aware,
)


@dataclass(frozen=True)
class ReviewOutcome:
    """Result of a single review. Partial credit counts as incorrect."""
    correct: bool

    @classmethod
    def from_answer(cls, correct: bool | None) -> ReviewOutcome:
        """Build an outcome, treating skipped/ambiguous answers (None) as wrong."""
        return cls(correct=bool(correct))


def apply_outcome(record: ReviewRecord, outcome: ReviewOutcome, now: datetime) -> ReviewRecord:
    """
    Apply a review outcome and return the updated record.

    Args:
        record: Current record
        outcome: Whether the word was recalled correctly
        now: Review timestamp

    Returns:
        New ReviewRecord
    """
    if outcome.correct:
        new_rate = min(record.mastery_rate + 1, MAX_MASTERY)
    else:
        new_rate = max(record.mastery_rate - 1, MIN_MASTERY)

    return record.model_copy(
        update={
            "mastery_rate": new_rate,
            "review_count": record.review_count + 1,
            "last_reviewed_at": ensure_aware(now),
        }
    )


def apply_rating(record: ReviewRecord, rate: int, now: datetime) -> ReviewRecord:
    """
    Record a review with an explicit mastery rate.

    Used when the learner grades themselves instead of answering a prompt.
    The rate is clamped to 0-5.
    """
    return record.model_copy(
        update={
            "mastery_rate": clamp_rate(rate),
            "review_count": record.review_count + 1,
            "last_reviewed_at": ensure_aware(now),
        }
    )


def reset_progress(record: ReviewRecord) -> ReviewRecord:
    """Return the record to its never-reviewed state, keeping its id."""
    return ReviewRecord.new(record.id)
