"""
Pytest Configuration and Centralized Fixtures.

Provides reusable fixtures for testing:
- A controllable clock anchored at a fixed "day 0"
- In-memory and SQLite-backed state stores
- A recording review trigger
- Review manager factories
"""

import os
from collections.abc import Callable
from datetime import UTC, datetime
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

# Set environment variables BEFORE importing library modules
os.environ.setdefault("REVIEW_KIT_DATABASE_URL", "sqlite://")
os.environ.setdefault("REVIEW_KIT_APP_VERSION", "1.0.0")

from review_kit.db.models import Base
from review_kit.services.calendar import add_calendar_days
from review_kit.services.review_manager import ReviewManager
from review_kit.stores.memory import InMemoryStateStore
from review_kit.stores.sql import SQLStateStore

TEST_SUITE = "com.example.tests.reviews"
DAY_0 = datetime(2025, 3, 3, 12, 0, tzinfo=UTC)


class FakeClock:
    """Clock whose current time is set by the test."""

    def __init__(self, start: datetime = DAY_0) -> None:
        self.start = start
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def day(self, n: int) -> datetime:
        """Timestamp n calendar days after the start."""
        return add_calendar_days(self.start, n)

    def set_day(self, n: int) -> None:
        self.now = self.day(n)


class FakeVersion:
    """Version provider whose version is set by the test."""

    def __init__(self, version: str = "1.0.0") -> None:
        self.version = version

    def __call__(self) -> str:
        return self.version


# ============================================================================
# Clock and version fixtures
# ============================================================================


@pytest.fixture
def clock() -> FakeClock:
    """Clock starting at DAY_0."""
    return FakeClock()


@pytest.fixture
def app_version() -> FakeVersion:
    """App version starting at 1.0.0."""
    return FakeVersion()


# ============================================================================
# Store fixtures
# ============================================================================


@pytest.fixture
def memory_store() -> InMemoryStateStore:
    """Empty in-memory store."""
    return InMemoryStateStore(suite_name=TEST_SUITE)


@pytest.fixture
def sql_session_factory() -> sessionmaker[Session]:
    """Session factory over a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield sessionmaker(engine, class_=Session, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def sql_store(sql_session_factory: sessionmaker[Session]) -> SQLStateStore:
    """Empty SQLite-backed store."""
    return SQLStateStore(session_factory=sql_session_factory, suite_name=TEST_SUITE)


# ============================================================================
# Trigger and manager fixtures
# ============================================================================


@pytest.fixture
def trigger() -> MagicMock:
    """Review trigger that records its calls."""
    return MagicMock(name="request_review")


@pytest.fixture
def manager_factory(
    memory_store: InMemoryStateStore, clock: FakeClock, app_version: FakeVersion
) -> Callable[..., ReviewManager]:
    """Factory for review managers sharing the test store, clock and version."""

    def _create_manager(
        min_days_since_install: int = 7,
        action_threshold: int = 20,
        cooldown_days: int = 30,
        store=None,
    ) -> ReviewManager:
        return ReviewManager(
            min_days_since_install=min_days_since_install,
            action_threshold=action_threshold,
            cooldown_days=cooldown_days,
            store=store if store is not None else memory_store,
            version_provider=app_version,
            clock=clock,
        )

    return _create_manager


@pytest.fixture
def manager(manager_factory: Callable[..., ReviewManager]) -> ReviewManager:
    """Review manager with default thresholds (7 days, 20 actions, 30 days)."""
    return manager_factory()
