"""
Review interval and eligibility rules.

Intervals grow exponentially with the mastery rate:

    interval(rate) = 2^rate days

so a freshly failed word (rate 0) comes back after one day and a mastered
word (rate 5) after 32 days. Intervals are rolling 24 hour periods measured
against exact elapsed time; there is no rounding to calendar midnight.
"""

from __future__ import annotations

from datetime import datetime, timedelta

from wordreview.core.review_record import ReviewRecord, clamp_rate, ensure_aware

SECONDS_PER_DAY = 86400.0


def review_interval(rate: int) -> timedelta:
    """
    Backoff interval for a mastery rate.

    Args:
        rate: Mastery rate (clamped to 0-5)

    Returns:
        timedelta of 2^rate days
    """
    return timedelta(days=2 ** clamp_rate(rate))


def days_since_review(record: ReviewRecord, now: datetime) -> float | None:
    """
    Fractional days elapsed since the record was last reviewed.

    Returns:
        Days as float, or None if the record was never reviewed
    """
    if record.last_reviewed_at is None:
        return None
    delta = ensure_aware(now) - record.last_reviewed_at
    return delta.total_seconds() / SECONDS_PER_DAY


def next_due_at(record: ReviewRecord) -> datetime | None:
    """
    Instant at which the record becomes due.

    Returns:
        Due timestamp, or None when the record is due because it has
        never been reviewed
    """
    if record.review_count == 0 or record.last_reviewed_at is None:
        return None
    return record.last_reviewed_at + review_interval(record.mastery_rate)


def is_due(record: ReviewRecord, now: datetime) -> bool:
    """
    Check whether a record is eligible for review at `now`.

    A record is due when it was never reviewed, or when at least
    review_interval(mastery_rate) has elapsed since its last review.
    """
    due_at = next_due_at(record)
    if due_at is None:
        return True
    return ensure_aware(now) >= due_at
