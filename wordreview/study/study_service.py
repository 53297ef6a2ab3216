"""
Study Service for vocabulary practice.

Provides high-level operations over a caller-supplied store:
- Build practice sessions (review, new, difficult, random, mixed)
- Record answers and persist the updated records
- Dashboard rollups for a scope

The store is a capability (load/save); any backend can implement it.
InMemoryReviewStore is the in-process implementation used for tests and
for callers that keep their collection in memory.
"""

from __future__ import annotations

import math
import uuid
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Protocol

from loguru import logger

from wordreview.config import Settings, get_settings
from wordreview.core.errors import InvalidArgumentError, RecordNotFoundError
from wordreview.core.review_record import ReviewRecord
from wordreview.study.due_selector import filter_difficult, order_by_priority, select_due
from wordreview.study.progress import ReviewOutcome, apply_outcome
from wordreview.study.sampler import RandomSource, make_rng, sample
from wordreview.study.statistics import LearningProgress, Summary, learning_progress, summarize

RecordId = str | int


class ReviewStore(Protocol):
    """Persistence capability the study service depends on."""

    def load(self, scope: str | None = None) -> list[ReviewRecord]:
        """Load all records for a scope (None for the whole collection)."""
        ...

    def save(self, record: ReviewRecord) -> None:
        """Persist an updated record."""
        ...


class InMemoryReviewStore:
    """
    Caller-owned in-memory store.

    Records are keyed by id; scopes (a dictionary, a word set) map a name to
    the ids they contain. Not thread-safe.
    """

    def __init__(
        self,
        records: Iterable[ReviewRecord] = (),
        scopes: dict[str, Iterable[RecordId]] | None = None,
    ):
        self._records: dict[RecordId, ReviewRecord] = {r.id: r for r in records}
        self._scopes: dict[str, list[RecordId]] = {
            name: list(ids) for name, ids in (scopes or {}).items()
        }

    def add(self, record: ReviewRecord, scope: str | None = None) -> None:
        """Insert a record, optionally registering it under a scope."""
        self._records[record.id] = record
        if scope is not None:
            ids = self._scopes.setdefault(scope, [])
            if record.id not in ids:
                ids.append(record.id)

    def get(self, record_id: RecordId) -> ReviewRecord:
        try:
            return self._records[record_id]
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def load(self, scope: str | None = None) -> list[ReviewRecord]:
        if scope is None:
            return list(self._records.values())
        return [self._records[i] for i in self._scopes.get(scope, []) if i in self._records]

    def save(self, record: ReviewRecord) -> None:
        if record.id not in self._records:
            raise RecordNotFoundError(record.id)
        self._records[record.id] = record

    def __len__(self) -> int:
        return len(self._records)


class SessionType(str, Enum):
    """How a practice session picks its words."""

    REVIEW = "review"  # due words, weakest first
    NEW = "new"  # words with few or no reviews
    DIFFICULT = "difficult"  # reviewed words still at low mastery
    RANDOM = "random"  # weighted random sample
    MIXED = "mixed"  # half new words, half due words


@dataclass
class StudySession:
    """Words picked for one practice session."""

    session_id: str
    session_type: SessionType
    scope: str | None
    records: list[ReviewRecord] = field(default_factory=list)

    @property
    def total_words(self) -> int:
        return len(self.records)


@dataclass
class Dashboard:
    """Summary and daily progress for a scope."""

    summary: Summary
    progress: LearningProgress


class StudyService:
    """
    High-level service for practice sessions.

    Coordinates between the store, the due-set selector, the weighted
    sampler and the progress updater.
    """

    def __init__(
        self,
        store: ReviewStore,
        settings: Settings | None = None,
        rng: RandomSource | None = None,
    ):
        """
        Initialize study service.

        Args:
            store: Record store for load/save
            settings: Settings or None for environment defaults
            rng: Random source or None to build one from settings.random_seed
        """
        self.store = store
        self.settings = settings or get_settings()
        self.rng = rng or make_rng(self.settings.random_seed)

    def create_session(
        self,
        session_type: SessionType | str,
        now: datetime,
        scope: str | None = None,
        word_count: int | None = None,
    ) -> StudySession:
        """
        Build a practice session.

        Args:
            session_type: Which selection strategy to use (enum or its value)
            now: Reference time for due checks
            scope: Scope to load (None for all words)
            word_count: Words wanted (None for the configured default)

        Returns:
            StudySession

        Raises:
            ValueError: If session_type is not a known SessionType value
            InvalidArgumentError: If word_count is negative
        """
        session_type = SessionType(session_type)
        if word_count is not None and word_count < 0:
            raise InvalidArgumentError(f"word_count must be non-negative, got {word_count}")

        records = self.store.load(scope)

        if session_type is SessionType.REVIEW:
            count = self.settings.default_review_limit if word_count is None else word_count
            picked = select_due(records, now, limit=count)
        else:
            count = self.settings.default_session_size if word_count is None else word_count
            if session_type is SessionType.NEW:
                picked = order_by_priority(self._new_words(records))[:count]
            elif session_type is SessionType.DIFFICULT:
                difficult = filter_difficult(records, max_rate=self.settings.difficult_max_rate)
                picked = sample(difficult, count, self.rng)
            elif session_type is SessionType.RANDOM:
                picked = sample(records, count, self.rng)
            elif session_type is SessionType.MIXED:
                picked = self._mixed(records, now, count)

        session = StudySession(
            session_id=str(uuid.uuid4()),
            session_type=session_type,
            scope=scope,
            records=picked,
        )
        logger.info(
            f"Created {session_type.value} session {session.session_id}: "
            f"{session.total_words} of {len(records)} words (scope={scope})"
        )
        return session

    def _new_words(self, records: list[ReviewRecord]) -> list[ReviewRecord]:
        return [r for r in records if r.review_count <= self.settings.new_word_max_reviews]

    def _mixed(self, records: list[ReviewRecord], now: datetime, count: int) -> list[ReviewRecord]:
        """Half new words, half due words, without duplicates."""
        half = math.ceil(count / 2)
        new_words = self._new_words(records)
        new_picked = sample(new_words, min(half, len(new_words)), self.rng)

        taken = {r.id for r in new_picked}
        due = [r for r in select_due(records, now) if r.id not in taken]

        return (new_picked + due)[:count]

    def record_answer(self, record: ReviewRecord, correct: bool | None, now: datetime) -> ReviewRecord:
        """
        Apply an answer to a record and persist the result.

        Args:
            record: Record that was practiced
            correct: Answer correctness (None counts as wrong)
            now: Review timestamp

        Returns:
            The updated record as saved
        """
        updated = apply_outcome(record, ReviewOutcome.from_answer(correct), now)
        self.store.save(updated)

        logger.debug(
            f"Word {record.id}: rate {record.mastery_rate} -> {updated.mastery_rate}, "
            f"reviews {updated.review_count}"
        )
        return updated

    def dashboard(self, now: datetime, scope: str | None = None) -> Dashboard:
        """Summary and learning progress for a scope."""
        records = self.store.load(scope)
        return Dashboard(
            summary=summarize(records, now),
            progress=learning_progress(records, now, daily_goal=self.settings.daily_goal),
        )
