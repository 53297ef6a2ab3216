"""
wordreview - review scheduling and sampling for vocabulary practice.

Pure functions over caller-supplied ReviewRecord snapshots:
which words are due, in what order, and how to draw weighted practice sets.
"""

from wordreview.core import (
    InvalidArgumentError,
    ReviewRecord,
    WordReviewError,
    is_due,
    review_interval,
)
from wordreview.study import (
    ReviewOutcome,
    StudyService,
    apply_outcome,
    sample,
    select_due,
    summarize,
)

__version__ = "1.0.0"

__all__ = [
    "ReviewRecord",
    "ReviewOutcome",
    "WordReviewError",
    "InvalidArgumentError",
    "review_interval",
    "is_due",
    "apply_outcome",
    "select_due",
    "sample",
    "summarize",
    "StudyService",
]
