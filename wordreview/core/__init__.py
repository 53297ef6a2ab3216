"""
Core Module - Shared domain model and rules.

Components:
- review_record: ReviewRecord, the per-word scheduling state
- schedule: Exponential review intervals and eligibility
- errors: Error taxonomy shared by the engine and the study service

Design Principle:
Everything under wordreview/study/ imports these definitions instead of
re-deriving intervals or clamping rules locally.
"""

from wordreview.core.errors import (
    InvalidArgumentError,
    RecordNotFoundError,
    WordReviewError,
)
from wordreview.core.review_record import (
    MAX_MASTERY,
    MIN_MASTERY,
    ReviewRecord,
    clamp_rate,
)
from wordreview.core.schedule import (
    days_since_review,
    is_due,
    next_due_at,
    review_interval,
)

__all__ = [
    # Model
    "ReviewRecord",
    "MIN_MASTERY",
    "MAX_MASTERY",
    "clamp_rate",
    # Schedule
    "review_interval",
    "is_due",
    "next_due_at",
    "days_since_review",
    # Errors
    "WordReviewError",
    "InvalidArgumentError",
    "RecordNotFoundError",
]
