"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from __future__ import annotations

from datetime import UTC, date, datetime

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

TEST_USER_ID = "user-test-1"


@pytest.fixture
def today() -> date:
    """Today's date for testing."""
    return date(2026, 1, 22)  # Thursday


@pytest.fixture
def now(today: date) -> datetime:
    """Current instant for testing: noon UTC on today."""
    return datetime(today.year, today.month, today.day, 12, 0, tzinfo=UTC)


@pytest.fixture(scope="function")
def db_session():
    """
    Provides a transactional in-memory SQLite DB session for tests.

    This fixture:
    - Creates an isolated in-memory SQLite database per test
    - Binds the session to a single connection inside an outer transaction
    - Rolls the outer transaction back afterwards (session commits inside tests
      and handlers never commit it)

    Usage:
        def test_something(db_session):
            db_session.add(Workout(...))
            db_session.commit()
    """
    from summit.db.models import Base

    engine = create_engine(
        "sqlite:///:memory:",
        echo=False,
        connect_args={"check_same_thread": False},
    )
    Base.metadata.create_all(engine)

    connection = engine.connect()
    transaction = connection.begin()
    session = sessionmaker(bind=connection, autocommit=False, autoflush=False)()

    try:
        yield session
    finally:
        session.close()
        transaction.rollback()
        connection.close()
        engine.dispose()


@pytest.fixture
def client(db_session, today: date, now: datetime):
    """FastAPI test client authenticated as TEST_USER_ID with a frozen clock.

    Dependencies overridden:
    - get_db -> the test session
    - get_current_user_id -> TEST_USER_ID
    - get_today / get_now -> the today / now fixtures
    """
    from fastapi.testclient import TestClient

    from summit.api.dependencies.auth import get_current_user_id
    from summit.api.plans import get_now
    from summit.api.today import get_today
    from summit.db.session import get_db
    from summit.main import app

    app.dependency_overrides[get_db] = lambda: db_session
    app.dependency_overrides[get_current_user_id] = lambda: TEST_USER_ID
    app.dependency_overrides[get_today] = lambda: today
    app.dependency_overrides[get_now] = lambda: now

    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_workout(db_session):
    """Factory fixture that stores a workout and returns it."""
    from summit.db.models import Workout

    def _make(
        scheduled_date: date,
        workout_type: str = "endurance",
        completed: bool = False,
        user_id: str = TEST_USER_ID,
        planned_duration: int | None = 60,
        actual_duration: int | None = None,
        title: str | None = None,
    ) -> Workout:
        workout = Workout(
            user_id=user_id,
            scheduled_date=scheduled_date,
            workout_type=workout_type,
            title=title or f"{workout_type.title()} session",
            planned_duration=planned_duration,
            actual_duration=actual_duration,
            completed=completed,
        )
        db_session.add(workout)
        db_session.commit()
        return workout

    return _make


@pytest.fixture
def make_metrics(db_session):
    """Factory fixture that stores one day of metrics and returns it."""
    from summit.db.models import Metrics

    def _make(day: date, user_id: str = TEST_USER_ID, **values) -> Metrics:
        row = Metrics(user_id=user_id, date=day, **values)
        db_session.add(row)
        db_session.commit()
        return row

    return _make
