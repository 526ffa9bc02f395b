"""Repository functions for plans.

Handles fetching the caller's active plan and persisting new plans.
"""

from __future__ import annotations

from datetime import date

from loguru import logger
from sqlalchemy import select, update
from sqlalchemy.orm import Session

from summit.core.errors import InvalidArgumentError
from summit.db.models import Plan
from summit.plans.types import Phase, PlanStatus
from summit.plans.week_resolver import validate_phases


def get_active_plan(db: Session, user_id: str) -> Plan | None:
    """Return the user's active plan, preferring the most recently created one."""
    return (
        db.execute(
            select(Plan)
            .where(Plan.user_id == user_id, Plan.status == "active")
            .order_by(Plan.created_at.desc())
            .limit(1)
        )
        .scalars()
        .first()
    )


def plan_phases(plan: Plan) -> list[Phase]:
    """Load the stored phase list as typed phases."""
    return [Phase.model_validate(raw) for raw in plan.phases or []]


def create_plan(db: Session, user_id: str, name: str, start_date: date, total_weeks: int, phases: list[Phase]) -> Plan:
    """Validate and store a new active plan, abandoning any previous active plan.

    Raises:
        InvalidArgumentError: If the start date is not a Monday or phases do not
            partition the plan's weeks
    """
    if start_date.weekday() != 0:
        raise InvalidArgumentError("start_date", f"Plans start on a Monday, got {start_date.strftime('%A')}")
    validate_phases(phases, total_weeks)

    abandoned = db.execute(
        update(Plan).where(Plan.user_id == user_id, Plan.status == "active").values(status="abandoned")
    ).rowcount
    if abandoned:
        logger.info(f"[PLANS] Abandoned {abandoned} previous active plan(s) for user_id={user_id}")

    plan = Plan(
        user_id=user_id,
        name=name,
        status="active",
        start_date=start_date,
        total_weeks=total_weeks,
        phases=[phase.model_dump() for phase in phases],
    )
    db.add(plan)
    db.commit()
    db.refresh(plan)
    logger.info(f"[PLANS] Created plan {plan.id} for user_id={user_id} ({total_weeks} weeks, {len(phases)} phases)")
    return plan


def list_plans(db: Session, user_id: str, status: PlanStatus | None = None) -> list[Plan]:
    """Return the user's plans newest first, optionally filtered by status."""
    query = select(Plan).where(Plan.user_id == user_id)
    if status is not None:
        query = query.where(Plan.status == status)
    return list(db.execute(query.order_by(Plan.created_at.desc())).scalars().all())
