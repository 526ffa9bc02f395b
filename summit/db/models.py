from __future__ import annotations

import datetime as dt
import uuid
from datetime import date, datetime, timezone

from sqlalchemy import JSON, Boolean, Date, DateTime, Float, Index, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class for all database models."""


class Plan(Base):
    """Training plan with its periodization phases.

    Stores:
    - start_date: First Monday of the plan
    - total_weeks: Plan length in weeks (>= 1)
    - phases: Ordered list of {name, week_start, week_end} covering 1..total_weeks
    - status: active, completed, abandoned, paused
    """

    __tablename__ = "plans"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    name: Mapped[str] = mapped_column(String, nullable=False)
    status: Mapped[str] = mapped_column(String, nullable=False, default="active")
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    total_weeks: Mapped[int] = mapped_column(Integer, nullable=False)
    phases: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("idx_plans_user_status", "user_id", "status"),)


class Workout(Base):
    """A scheduled workout occurrence.

    Workouts are never hard-deleted: a removed workout becomes a rest-day
    record with was_adapted set and the reason kept in adaptation_reason.
    """

    __tablename__ = "workouts"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    plan_id: Mapped[str | None] = mapped_column(String, nullable=True, index=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)

    # Scheduling
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False)
    week_number: Mapped[int | None] = mapped_column(Integer, nullable=True)
    day_of_week: Mapped[int | None] = mapped_column(Integer, nullable=True)  # 0=Sunday .. 6=Saturday

    # Details
    workout_type: Mapped[str] = mapped_column(String, nullable=False)
    title: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    planned_duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    target_intensity: Mapped[str | None] = mapped_column(String, nullable=True)  # easy, moderate, hard, max

    # Completion
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    actual_duration: Mapped[int | None] = mapped_column(Integer, nullable=True)  # minutes
    rpe: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    watch_data: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    # Adaptation
    was_adapted: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    adaptation_reason: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("idx_workouts_user_date", "user_id", "scheduled_date"),)


class Metrics(Base):
    """Daily wearable or manually entered recovery metrics, one row per user per day."""

    __tablename__ = "metrics"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, index=True)
    date: Mapped[dt.date] = mapped_column(Date, nullable=False)

    hrv: Mapped[float | None] = mapped_column(Float, nullable=True)
    resting_hr: Mapped[float | None] = mapped_column(Float, nullable=True)
    sleep_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    sleep_duration: Mapped[float | None] = mapped_column(Float, nullable=True)  # minutes
    recovery_score: Mapped[float | None] = mapped_column(Float, nullable=True)
    training_load: Mapped[float | None] = mapped_column(Float, nullable=True)
    source: Mapped[str] = mapped_column(String, nullable=False, default="manual")

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (UniqueConstraint("user_id", "date", name="uq_metrics_user_date"),)


class Profile(Base):
    """Onboarding profile, one per user.

    Captured once by the onboarding flow (POST) and edited afterwards (PUT).
    onboarding_completed_at is set when the profile is first created.
    """

    __tablename__ = "profiles"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=lambda: str(uuid.uuid4()), index=True)
    user_id: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)

    disciplines: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    goal_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    goal_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    hours_per_week: Mapped[float | None] = mapped_column(Float, nullable=True)
    days_per_week: Mapped[int | None] = mapped_column(Integer, nullable=True)
    equipment: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    fitness_level: Mapped[str | None] = mapped_column(String, nullable=True)  # beginner, intermediate, advanced, elite
    recent_activity: Mapped[str | None] = mapped_column(Text, nullable=True)
    injuries: Mapped[str | None] = mapped_column(Text, nullable=True)

    onboarding_completed_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)
