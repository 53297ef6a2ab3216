"""
Weighted Sampler for practice sessions.

Draws words without replacement, biased toward words that need practice
while still letting mastered words surface now and then.

Weight per record:

    weight = max((6 - mastery_rate) * boost, 1)
    boost  = 3 if never reviewed else 1

Never-reviewed rate-0 words weigh 18, reviewed rate-5 words weigh 1.

Draw loop (repeated `count` times):
1. total = sum of weights still in the pool
2. r = rng.random() * total
3. Walk the pool accumulating weights until the running sum exceeds r
4. Remove and emit that record
"""
from __future__ import annotations

import random
from collections.abc import Sequence
from typing import Protocol

from loguru import logger

from wordreview.core.errors import InvalidArgumentError
from wordreview.core.review_record import MAX_MASTERY, ReviewRecord

UNREVIEWED_BOOST = 3
MIN_WEIGHT = 1


class RandomSource(Protocol):
    """Anything that yields uniform floats in [0, 1). random.Random fits."""

    def random(self) -> float:
        ...


def make_rng(seed: int | None = None) -> random.Random:
    """
    Build a random source.

    Args:
        seed: Fixed seed for reproducible sessions, or None for system entropy
    """
    return random.Random(seed)


def review_weight(record: ReviewRecord) -> int:
    """Selection weight of a record (always >= 1)."""
    boost = UNREVIEWED_BOOST if record.review_count == 0 else 1
    return max((MAX_MASTERY + 1 - record.mastery_rate) * boost, MIN_WEIGHT)


def _check_count(count: int) -> None:
    if count < 0:
        raise InvalidArgumentError(f"count must be non-negative, got {count}")


def sample(records: Sequence[ReviewRecord], count: int, rng: RandomSource) -> list[ReviewRecord]:
    """
    Weighted sample without replacement.

    Args:
        records: Pool to draw from
        count: Number of records to draw
        rng: Random source (seed it for deterministic output)

    Returns:
        Drawn records in draw order. When count covers the whole pool,
        every record is returned once in input order.

    Raises:
        InvalidArgumentError: If count is negative
    """
    _check_count(count)

    if not records:
        return []
    if count >= len(records):
        return list(records)

    pool = list(records)
    weights = [review_weight(r) for r in pool]
    selected: list[ReviewRecord] = []

    for _ in range(count):
        total_weight = sum(weights)
        threshold = rng.random() * total_weight

        running = 0
        index = len(pool) - 1  # float edge: fall back to the last record
        for i, weight in enumerate(weights):
            running += weight
            if running > threshold:
                index = i
                break

        selected.append(pool.pop(index))
        weights.pop(index)

    logger.debug(f"Sampled {len(selected)} of {len(records)} records")
    return selected


def shuffle(records: Sequence[ReviewRecord], rng: RandomSource) -> list[ReviewRecord]:
    """Fisher-Yates shuffle into a new list."""
    shuffled = list(records)
    for i in range(len(shuffled) - 1, 0, -1):
        j = int(rng.random() * (i + 1))
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def random_items(records: Sequence[ReviewRecord], count: int, rng: RandomSource) -> list[ReviewRecord]:
    """
    Uniform sample without replacement.

    Raises:
        InvalidArgumentError: If count is negative
    """
    _check_count(count)
    return shuffle(records, rng)[:count]
