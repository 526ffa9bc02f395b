"""Engine and session management.

The engine is built on first use so importing the app (and the test suite)
never opens a connection. Tests replace get_db through dependency overrides.
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from summit.config.settings import settings
from summit.db.models import Base

_engine: Engine | None = None
_session_factory: sessionmaker | None = None


def _engine_options(url: str) -> dict[str, Any]:
    """Driver-specific create_engine keyword arguments."""
    if make_url(url).get_backend_name() == "sqlite":
        logger.warning("[DB] SQLite backend in use (local development only)")
        return {"connect_args": {"check_same_thread": False}}

    return {
        "connect_args": {"connect_timeout": 10, "application_name": "summit"},
        "pool_pre_ping": True,
        "pool_recycle": 3600,
    }


def get_engine() -> Engine:
    """Return the process-wide engine, creating it on first call."""
    global _engine
    if _engine is None:
        url = make_url(settings.database_url)
        logger.info(f"[DB] Creating engine for {url.render_as_string(hide_password=True)}")
        _engine = create_engine(settings.database_url, echo=False, **_engine_options(settings.database_url))
    return _engine


def init_db() -> None:
    """Create any missing tables for Plan, Workout and Metrics."""
    Base.metadata.create_all(bind=get_engine())
    logger.info(f"[DB] Tables ready: {', '.join(sorted(Base.metadata.tables))}")


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request.

    Handlers commit their own writes. A database error rolls the session back
    before it closes.
    """
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=True)

    db = _session_factory()
    try:
        yield db
    except SQLAlchemyError:
        logger.exception("[DB] Database error, rolling back session")
        db.rollback()
        raise
    finally:
        db.close()
