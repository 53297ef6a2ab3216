"""
Review Record Model.

The per-word learning state consumed by every part of the engine.

Design:
- ReviewRecord is immutable; "updates" return a new instance
- mastery_rate is clamped into [MIN_MASTERY, MAX_MASTERY] on construction
- last_reviewed_at is always timezone-aware (naive values are read as UTC)
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

MIN_MASTERY = 0
MAX_MASTERY = 5


def clamp_rate(rate: int) -> int:
    """Clamp a mastery rate into [MIN_MASTERY, MAX_MASTERY]."""
    return max(MIN_MASTERY, min(MAX_MASTERY, int(rate)))


def ensure_aware(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class ReviewRecord(BaseModel):
    """
    Scheduling state for one learnable item.

    The engine never stores these itself; callers load them from whatever
    backend they use and persist the values the engine hands back.
    """

    model_config = ConfigDict(frozen=True)

    id: str | int
    mastery_rate: int = 0  # 0 = needs most practice, 5 = mastered
    review_count: int = Field(default=0, ge=0)
    last_reviewed_at: datetime | None = None  # None = never reviewed

    @field_validator("mastery_rate")
    @classmethod
    def _clamp_mastery(cls, value: int) -> int:
        return clamp_rate(value)

    @field_validator("last_reviewed_at")
    @classmethod
    def _aware_timestamp(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return None
        return ensure_aware(value)

    @classmethod
    def new(cls, item_id: str | int) -> ReviewRecord:
        """Create the initial record for an item entering the collection."""
        return cls(id=item_id)

    @property
    def is_studied(self) -> bool:
        """True once the item has been reviewed at least once."""
        return self.review_count > 0
