"""
Study Module for vocabulary practice.

Provides the scheduling engine and the session service built on it:
- Progress updates from review outcomes
- Due-set selection (exponential backoff, weakest first)
- Weighted random sampling without replacement
- Dashboard statistics and streaks
"""

from wordreview.study.due_selector import (
    filter_difficult,
    filter_unreviewed,
    order_by_priority,
    select_due,
)
from wordreview.study.progress import (
    ReviewOutcome,
    apply_outcome,
    apply_rating,
    reset_progress,
)
from wordreview.study.sampler import (
    RandomSource,
    make_rng,
    random_items,
    review_weight,
    sample,
    shuffle,
)
from wordreview.study.statistics import (
    DailyProgress,
    LearningProgress,
    Summary,
    WeeklyProgress,
    calculate_streak,
    learning_progress,
    mastery_distribution,
    review_streak,
    summarize,
    weekly_progress,
)
from wordreview.study.study_service import (
    Dashboard,
    InMemoryReviewStore,
    ReviewStore,
    SessionType,
    StudyService,
    StudySession,
)

__all__ = [
    "ReviewOutcome",
    "apply_outcome",
    "apply_rating",
    "reset_progress",
    "select_due",
    "order_by_priority",
    "filter_unreviewed",
    "filter_difficult",
    "RandomSource",
    "make_rng",
    "review_weight",
    "sample",
    "shuffle",
    "random_items",
    "Summary",
    "DailyProgress",
    "LearningProgress",
    "WeeklyProgress",
    "summarize",
    "mastery_distribution",
    "calculate_streak",
    "review_streak",
    "learning_progress",
    "weekly_progress",
    "ReviewStore",
    "InMemoryReviewStore",
    "SessionType",
    "StudySession",
    "Dashboard",
    "StudyService",
]
