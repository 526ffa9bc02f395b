"""Week endpoint: one calendar week of training at a glance."""

from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from summit.api.dependencies.auth import get_current_user_id
from summit.api.schemas.schemas import WeekResponse, WorkoutOut
from summit.api.today import get_today
from summit.db.models import Workout
from summit.db.session import get_db
from summit.plans.repository import get_active_plan, plan_phases
from summit.plans.types import DEFAULT_PHASE_NAME
from summit.plans.week_resolver import current_week_number, phase_for_week
from summit.utils.calendar import parse_date, week_end, week_start
from summit.workouts.stats import compute_week_stats

router = APIRouter(prefix="/week", tags=["week"])


@router.get("", response_model=WeekResponse)
def get_week(
    date_param: str | None = Query(default=None, alias="date", description="Any date in the requested week (YYYY-MM-DD)"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
) -> WeekResponse:
    """Return all workouts of the week containing date (defaults to this week) with summary statistics."""
    reference = parse_date(date_param) if date_param else today
    start = week_start(reference)
    end = week_end(reference)

    workouts = (
        db.execute(
            select(Workout)
            .where(Workout.user_id == user_id, Workout.scheduled_date >= start, Workout.scheduled_date <= end)
            .order_by(Workout.scheduled_date.asc(), Workout.created_at.asc())
        )
        .scalars()
        .all()
    )
    stats = compute_week_stats(workouts)

    week_number = 1
    phase_name = DEFAULT_PHASE_NAME
    plan = get_active_plan(db, user_id)
    if plan is not None:
        week_number = max(current_week_number(plan.start_date, reference), 1)
        phase = phase_for_week(plan_phases(plan), week_number)
        if phase is not None:
            phase_name = phase.name
        else:
            logger.warning(f"[WEEK] Plan {plan.id} has no phase covering week {week_number}")

    logger.info(
        f"[WEEK] user_id={user_id} week={start.isoformat()}..{end.isoformat()} "
        f"workouts={len(workouts)} completion={stats.completion_rate}%"
    )

    return WeekResponse(
        week_number=week_number,
        phase=phase_name,
        workouts=[WorkoutOut.model_validate(w) for w in workouts],
        planned_hours=stats.planned_hours,
        completed_hours=stats.completed_hours,
        completion_rate=stats.completion_rate,
        week_start=start,
        week_end=end,
        total_workouts=stats.total_workouts,
        completed_workouts=stats.completed_workouts,
        remaining_workouts=stats.remaining_workouts,
    )
