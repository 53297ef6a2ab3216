"""
Aggregate Statistics for dashboards.

Rollups over a snapshot of review records:
- summarize: totals, studied/unstudied split, average mastery, due count
- mastery_distribution: how many words sit at each rate
- calculate_streak / review_streak: consecutive active days
- weekly_progress: per-day averages over a run of DailyProgress entries
- learning_progress: daily goal tracking

Average mastery is taken over studied words only (review_count > 0) and is
0 when nothing has been studied, unlike a plain mean over all words.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime, timedelta

from wordreview.core.review_record import MAX_MASTERY, MIN_MASTERY, ReviewRecord, ensure_aware
from wordreview.core.schedule import is_due


@dataclass
class Summary:
    """Dashboard rollup for a collection of records."""
    total: int = 0
    studied: int = 0
    unstudied: int = 0
    average_mastery: float = 0.0
    due_count: int = 0

    @property
    def studied_percentage(self) -> float:
        """Share of words reviewed at least once (0-100)."""
        if self.total == 0:
            return 0.0
        return self.studied / self.total * 100

    def to_dict(self) -> dict[str, float]:
        """Convert to dictionary."""
        return {
            "total": self.total,
            "studied": self.studied,
            "unstudied": self.unstudied,
            "average_mastery": self.average_mastery,
            "due_count": self.due_count,
        }


@dataclass
class DailyProgress:
    """Activity recorded for one calendar day."""
    date: date
    words_studied: int = 0
    tests_completed: int = 0
    time_spent: int = 0  # minutes
    accuracy: float = 0.0  # percentage

    @property
    def is_active(self) -> bool:
        return self.words_studied > 0 or self.tests_completed > 0


@dataclass
class LearningProgress:
    """Daily goal and streak figures for the home screen."""
    daily_goal: int
    words_studied_today: int = 0
    current_streak: int = 0
    total_words_learned: int = 0
    average_accuracy: float = 0.0  # percentage
    distribution: dict[int, int] = field(default_factory=dict)

    @property
    def goal_progress(self) -> float:
        """Progress toward the daily goal as a percentage, capped at 100."""
        if self.daily_goal <= 0:
            return 100.0
        return min(self.words_studied_today / self.daily_goal * 100, 100.0)


@dataclass
class WeeklyProgress:
    """Per-day averages over a run of days."""
    words_per_day: int = 0
    tests_per_day: int = 0
    time_per_day: int = 0  # minutes
    average_accuracy: float = 0.0  # percentage


def summarize(records: Iterable[ReviewRecord] | None, now: datetime) -> Summary:
    """
    Summarize a collection of records.

    Args:
        records: Records to summarize. None is treated as empty.
        now: Reference time for the due count

    Returns:
        Summary
    """
    if records is None:
        return Summary()

    total = studied = due = 0
    studied_rate_sum = 0

    for record in records:
        total += 1
        if record.review_count > 0:
            studied += 1
            studied_rate_sum += record.mastery_rate
        if is_due(record, now):
            due += 1

    average = round(studied_rate_sum / studied, 2) if studied else 0.0

    return Summary(
        total=total,
        studied=studied,
        unstudied=total - studied,
        average_mastery=average,
        due_count=due,
    )


def mastery_distribution(records: Iterable[ReviewRecord] | None) -> dict[int, int]:
    """Count records per mastery rate; every rate 0-5 is present."""
    distribution = {rate: 0 for rate in range(MIN_MASTERY, MAX_MASTERY + 1)}
    for record in records or ():
        distribution[record.mastery_rate] += 1
    return distribution


def calculate_streak(daily_progress: Iterable[DailyProgress], today: date) -> int:
    """
    Count consecutive active days.

    The streak may start today or yesterday (today not studied yet does not
    break it). Inactive days and gaps end the streak.

    Args:
        daily_progress: Per-day activity, any order
        today: Reference calendar day

    Returns:
        Streak length in days
    """
    by_day: dict[date, bool] = {}
    for progress in daily_progress:
        by_day[progress.date] = by_day.get(progress.date, False) or progress.is_active

    return _count_streak({day for day, active in by_day.items() if active}, today)


def review_streak(records: Iterable[ReviewRecord] | None, today: date) -> int:
    """
    Streak derived from the calendar days (UTC) of last reviews.

    Only the most recent review of each word is known, so this is a lower
    bound on the learner's true streak.
    """
    days = {
        record.last_reviewed_at.astimezone(UTC).date()
        for record in records or ()
        if record.last_reviewed_at is not None
    }
    return _count_streak(days, today)


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


def weekly_progress(daily_progress: Iterable[DailyProgress]) -> WeeklyProgress:
    """
    Average activity per day.

    Counts and minutes are rounded half-up to whole numbers, accuracy to two
    decimals. An empty input gives all zeros.

    Args:
        daily_progress: Per-day activity, typically the last seven days

    Returns:
        WeeklyProgress
    """
    days = list(daily_progress)
    if not days:
        return WeeklyProgress()

    count = len(days)
    return WeeklyProgress(
        words_per_day=int(_round_half_up(sum(d.words_studied for d in days) / count)),
        tests_per_day=int(_round_half_up(sum(d.tests_completed for d in days) / count)),
        time_per_day=int(_round_half_up(sum(d.time_spent for d in days) / count)),
        average_accuracy=_round_half_up(sum(d.accuracy for d in days) / count, 2),
    )


def _count_streak(active_days: set[date], today: date) -> int:
    if today in active_days:
        cursor = today
    elif today - timedelta(days=1) in active_days:
        cursor = today - timedelta(days=1)
    else:
        return 0

    streak = 0
    while cursor in active_days:
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def learning_progress(
    records: Iterable[ReviewRecord] | None,
    now: datetime,
    daily_goal: int = 20,
) -> LearningProgress:
    """
    Build daily goal progress from a snapshot.

    Args:
        records: Records in scope
        now: Reference time; "today" is its UTC calendar day
        daily_goal: Target words per day

    Returns:
        LearningProgress
    """
    snapshot = list(records or ())
    today = ensure_aware(now).astimezone(UTC).date()
    summary = summarize(snapshot, now)

    studied_today = sum(
        1
        for r in snapshot
        if r.last_reviewed_at is not None and r.last_reviewed_at.astimezone(UTC).date() == today
    )

    return LearningProgress(
        daily_goal=daily_goal,
        words_studied_today=studied_today,
        current_streak=review_streak(snapshot, today),
        total_words_learned=summary.studied,
        average_accuracy=summary.average_mastery / MAX_MASTERY * 100,
        distribution=mastery_distribution(snapshot),
    )
