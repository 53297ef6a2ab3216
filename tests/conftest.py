"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import random
import sys
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wordreview.config import Settings  # noqa: E402
from wordreview.core.review_record import ReviewRecord  # noqa: E402

NOW = datetime(2024, 3, 15, 12, 0, tzinfo=UTC)


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (in-memory store)")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)


@pytest.fixture
def now():
    """Fixed reference time for eligibility checks."""
    return NOW


@pytest.fixture
def make_record():
    """Factory for records; `days_ago` sets last_reviewed_at relative to NOW."""

    def _make(item_id, rate=0, count=0, days_ago=None):
        last = NOW - timedelta(days=days_ago) if days_ago is not None else None
        return ReviewRecord(id=item_id, mastery_rate=rate, review_count=count, last_reviewed_at=last)

    return _make


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, random_seed=42)
