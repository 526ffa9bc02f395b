"""Workout endpoints.

GET /workouts lists scheduled workouts, /workouts/log records completion
(manual or synced from watch data), and /workouts/{id}/remove turns a
workout into a rest day without deleting it.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlalchemy import select
from sqlalchemy.orm import Session

from summit.api.dependencies.auth import get_current_user_id
from summit.api.schemas.schemas import (
    WorkoutListResponse,
    WorkoutLogRequest,
    WorkoutLogResponse,
    WorkoutOut,
    WorkoutRemoveRequest,
)
from summit.db.models import Workout
from summit.db.session import get_db
from summit.utils.calendar import parse_date, week_end, week_start
from summit.workouts.stats import training_load_contribution
from summit.workouts.streak import REST_WORKOUT_TYPE

router = APIRouter(prefix="/workouts", tags=["workouts"])

REMOVED_WORKOUT_TITLE = "Adapted: Rest Day"


def _get_owned_workout(db: Session, workout_id: str, user_id: str) -> Workout:
    """Fetch a workout and check it belongs to the caller.

    Raises:
        HTTPException: 404 if the workout does not exist, 403 if it belongs to someone else
    """
    workout = db.get(Workout, workout_id)
    if workout is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    if workout.user_id != user_id:
        logger.warning(f"[WORKOUTS] user_id={user_id} tried to modify workout {workout_id} owned by another user")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Not your workout")
    return workout


@router.get("", response_model=WorkoutListResponse)
def list_workouts(
    date_param: str | None = Query(default=None, alias="date", description="Workouts on this date (YYYY-MM-DD)"),
    week: str | None = Query(default=None, description="Workouts in the week containing this date"),
    plan_id: str | None = None,
    completed: bool | None = None,
    limit: int = Query(default=50, ge=1, le=500),
    offset: int = Query(default=0, ge=0),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> WorkoutListResponse:
    query = select(Workout).where(Workout.user_id == user_id)

    if date_param:
        query = query.where(Workout.scheduled_date == parse_date(date_param))
    if week:
        reference = parse_date(week)
        query = query.where(Workout.scheduled_date >= week_start(reference), Workout.scheduled_date <= week_end(reference))
    if plan_id:
        query = query.where(Workout.plan_id == plan_id)
    if completed is not None:
        query = query.where(Workout.completed == completed)

    query = query.order_by(Workout.scheduled_date.asc(), Workout.created_at.asc()).offset(offset).limit(limit)
    workouts = db.execute(query).scalars().all()

    return WorkoutListResponse(workouts=[WorkoutOut.model_validate(w) for w in workouts], count=len(workouts))


@router.post("/log", response_model=WorkoutLogResponse)
@router.patch("/log", response_model=WorkoutLogResponse)
def log_workout(
    request: WorkoutLogRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> WorkoutLogResponse:
    """Record completion (or non-completion) and session details for a workout."""
    workout = _get_owned_workout(db, request.workout_id, user_id)

    workout.completed = request.completed
    workout.completed_at = datetime.now(timezone.utc) if request.completed else None
    if request.actual_duration is not None:
        workout.actual_duration = request.actual_duration
    if request.rpe is not None:
        workout.rpe = request.rpe
    if request.notes is not None:
        workout.notes = request.notes
    if request.watch_data:
        workout.watch_data = request.watch_data

    db.commit()
    db.refresh(workout)

    load = training_load_contribution(request.completed, request.actual_duration, request.rpe)
    logger.info(
        f"[WORKOUTS] Logged workout {workout.id} for user_id={user_id}: "
        f"completed={request.completed} training_load={load}"
    )

    return WorkoutLogResponse(
        workout=WorkoutOut.model_validate(workout),
        training_load_contribution=load,
        message="Workout logged! Great work 💪" if request.completed else "Workout marked as incomplete",
    )


@router.post("/{workout_id}/remove", response_model=WorkoutOut)
def remove_workout(
    workout_id: str,
    request: WorkoutRemoveRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> WorkoutOut:
    """Convert a workout into a rest-day record. Workouts are never hard-deleted."""
    workout = _get_owned_workout(db, workout_id, user_id)

    workout.workout_type = REST_WORKOUT_TYPE
    workout.title = REMOVED_WORKOUT_TITLE
    workout.description = request.reason
    workout.was_adapted = True
    workout.adaptation_reason = request.reason

    db.commit()
    db.refresh(workout)
    logger.info(f"[WORKOUTS] Converted workout {workout.id} to rest day for user_id={user_id}")
    return WorkoutOut.model_validate(workout)
