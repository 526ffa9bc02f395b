"""Today endpoint.

Primary endpoint for the Today screen: today's workout(s), today's metrics,
the current streak, and a motivational message.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

from fastapi import APIRouter, Depends
from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from summit.api.dependencies.auth import get_current_user_id
from summit.api.schemas.schemas import MetricsOut, MetricsTrendPoint, TodayResponse, WorkoutOut
from summit.coach.motivation import TodayContext, select_message
from summit.config.settings import settings
from summit.db.models import Metrics, Workout
from summit.db.session import get_db
from summit.workouts.streak import REST_WORKOUT_TYPE, StreakEntry, calculate_streak

router = APIRouter(prefix="/today", tags=["today"])


def get_today() -> date:
    """Reference date for the Today screen (UTC). Overridden in tests."""
    return datetime.now(timezone.utc).date()


def load_streak(db: Session, user_id: str, today: date) -> int:
    """Fetch the trailing history window and compute the user's streak."""
    window_start = today - timedelta(days=settings.streak_window_days)
    rows = db.execute(
        select(Workout.scheduled_date, Workout.completed, Workout.workout_type)
        .where(Workout.user_id == user_id, Workout.scheduled_date >= window_start)
        .order_by(Workout.scheduled_date.desc())
    ).all()
    entries = [StreakEntry(date=r.scheduled_date, completed=r.completed, workout_type=r.workout_type) for r in rows]
    return calculate_streak(entries, today, window_days=settings.streak_window_days)


@router.get("", response_model=TodayResponse)
def get_today_view(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
) -> TodayResponse:
    workouts = (
        db.execute(
            select(Workout)
            .where(Workout.user_id == user_id, Workout.scheduled_date == today)
            .order_by(Workout.created_at.asc())
        )
        .scalars()
        .all()
    )
    metrics = db.execute(select(Metrics).where(Metrics.user_id == user_id, Metrics.date == today)).scalar_one_or_none()
    streak = load_streak(db, user_id, today)

    recent_metrics = (
        db.execute(
            select(Metrics)
            .where(Metrics.user_id == user_id, Metrics.date >= today - timedelta(days=settings.metrics_trend_days))
            .order_by(Metrics.date.desc())
        )
        .scalars()
        .all()
    )

    context = TodayContext(
        has_workout=bool(workouts),
        is_rest_day=bool(workouts) and workouts[0].workout_type == REST_WORKOUT_TYPE,
        streak=streak,
        sleep_score=metrics.sleep_score if metrics else None,
        recovery_score=metrics.recovery_score if metrics else None,
    )
    message = select_message(context)

    logger.info(f"[TODAY] user_id={user_id} date={today.isoformat()} workouts={len(workouts)} streak={streak}")

    return TodayResponse(
        date=today,
        workout=WorkoutOut.model_validate(workouts[0]) if workouts else None,
        metrics=MetricsOut.model_validate(metrics) if metrics else None,
        streak=streak,
        message=message,
        all_workouts=[WorkoutOut.model_validate(w) for w in workouts] if len(workouts) > 1 else None,
        metrics_trend=[MetricsTrendPoint.model_validate(m) for m in recent_metrics] if recent_metrics else None,
    )
