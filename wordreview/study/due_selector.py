"""
Due-Set Selector.

Picks the words that are due for review and orders them so the weakest
come first:

1. Keep records that are due at `now` (see wordreview.core.schedule)
2. Sort by mastery_rate ascending
3. Break ties by last_reviewed_at ascending, never-reviewed first
4. Truncate to `limit` if given

Python's sort is stable, so records that tie on both keys keep their
input order.
"""
from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from loguru import logger

from wordreview.core.errors import InvalidArgumentError
from wordreview.core.review_record import ReviewRecord
from wordreview.core.schedule import is_due


def _priority_key(record: ReviewRecord) -> tuple:
    last = record.last_reviewed_at
    # (False, ...) sorts before (True, ...) so never-reviewed records lead
    return (
        record.mastery_rate,
        last is not None,
        last.timestamp() if last is not None else 0.0,
    )


def order_by_priority(records: Iterable[ReviewRecord]) -> list[ReviewRecord]:
    """Sort records weakest-first without filtering."""
    return sorted(records, key=_priority_key)


def select_due(
    records: Iterable[ReviewRecord],
    now: datetime,
    limit: int | None = None,
) -> list[ReviewRecord]:
    """
    Select records due for review, in priority order.

    Args:
        records: Candidate records for one scope
        now: Reference time for eligibility
        limit: Max records to return (None for all)

    Returns:
        Ordered list of due records

    Raises:
        InvalidArgumentError: If limit is negative
    """
    if limit is not None and limit < 0:
        raise InvalidArgumentError(f"limit must be non-negative, got {limit}")

    due = [record for record in records if is_due(record, now)]
    ordered = order_by_priority(due)

    if limit is not None:
        ordered = ordered[:limit]

    logger.debug(f"Selected {len(ordered)} due records ({len(due)} eligible, limit={limit})")
    return ordered


def filter_unreviewed(records: Iterable[ReviewRecord]) -> list[ReviewRecord]:
    """Records that have never been reviewed."""
    return [r for r in records if r.review_count == 0 or r.last_reviewed_at is None]


def filter_difficult(records: Iterable[ReviewRecord], max_rate: int = 2) -> list[ReviewRecord]:
    """Reviewed records whose mastery is still at or below max_rate."""
    return [r for r in records if r.mastery_rate <= max_rate and r.review_count > 0]
