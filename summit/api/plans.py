"""Plan endpoints: list and create plans, and resolve where the caller is in the active one."""

from __future__ import annotations

from datetime import date, datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Query, status
from loguru import logger
from sqlalchemy.orm import Session

from summit.api.dependencies.auth import get_current_user_id
from summit.api.schemas.schemas import (
    ActivePlanResponse,
    CurrentPlanResponse,
    PlanCreateRequest,
    PlanListResponse,
    PlanOut,
)
from summit.api.today import get_today
from summit.db.session import get_db
from summit.plans.repository import create_plan, get_active_plan, list_plans, plan_phases
from summit.plans.review import should_show_review
from summit.plans.types import PlanStatus
from summit.plans.week_resolver import current_week_number, phase_for_week, week_days

router = APIRouter(prefix="/plans", tags=["plans"])


def get_now() -> datetime:
    """Current instant used for the review window (UTC). Overridden in tests."""
    return datetime.now(timezone.utc)


@router.get("", response_model=PlanListResponse | ActivePlanResponse)
def get_plans(
    active: bool = Query(default=False, description="Return only the active plan (or null)"),
    status_filter: PlanStatus | None = Query(default=None, alias="status"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanListResponse | ActivePlanResponse:
    """List the caller's plans newest first; active=true takes precedence over status."""
    if active:
        plan = get_active_plan(db, user_id)
        return ActivePlanResponse(plan=PlanOut.model_validate(plan) if plan else None)

    plans = list_plans(db, user_id, status=status_filter)
    return PlanListResponse(plans=[PlanOut.model_validate(p) for p in plans])


@router.post("", response_model=PlanOut, status_code=status.HTTP_201_CREATED)
def post_plan(
    request: PlanCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> PlanOut:
    plan = create_plan(
        db,
        user_id=user_id,
        name=request.name,
        start_date=request.start_date,
        total_weeks=request.total_weeks,
        phases=request.phases,
    )
    return PlanOut.model_validate(plan)


@router.get("/current", response_model=CurrentPlanResponse)
def get_current_plan(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
    now: datetime = Depends(get_now),
) -> CurrentPlanResponse:
    """Return the active plan with its current week, phase, review flag and week days."""
    plan = get_active_plan(db, user_id)
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No active plan")

    week_number = current_week_number(plan.start_date, today)
    phase = phase_for_week(plan_phases(plan), week_number)
    if phase is None and week_number > 0:
        logger.warning(f"[PLANS] Plan {plan.id} has no phase covering week {week_number}")

    show_review = should_show_review(plan.start_date, week_number, plan.total_weeks, now)

    return CurrentPlanResponse(
        plan=PlanOut.model_validate(plan),
        week_number=week_number,
        phase=phase.name if phase else None,
        show_review=show_review,
        week_days=week_days(plan.start_date, max(week_number, 1)),
    )
