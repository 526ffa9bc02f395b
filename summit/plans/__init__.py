"""Plans module - deterministic plan-calendar logic.

This module provides:
- Plan week resolution (current week, phase lookup, phase validation)
- Week-day helpers for a plan week
- The weekly-review trigger

Persistence lives in summit.plans.repository and is not re-exported here.
"""

from summit.plans.review import should_show_review
from summit.plans.types import Phase, WeekDay
from summit.plans.week_resolver import (
    can_log_workout,
    current_week_number,
    date_for_day,
    is_current_week,
    is_future_week,
    is_past_week,
    next_monday,
    phase_for_week,
    validate_phases,
    week_days,
)

__all__ = [
    "Phase",
    "WeekDay",
    "can_log_workout",
    "current_week_number",
    "date_for_day",
    "is_current_week",
    "is_future_week",
    "is_past_week",
    "next_monday",
    "phase_for_week",
    "should_show_review",
    "validate_phases",
    "week_days",
]
