"""Weekly-review trigger.

The review prompt is shown during the 24 hours before the next plan week
starts (Sunday 00:00 until Monday 00:00 for Monday-start plans).
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

from summit.core.errors import InvalidArgumentError
from summit.utils.calendar import parse_date

REVIEW_WINDOW = timedelta(days=1)


def review_window(plan_start_date: date | datetime | str, current_week: int, now: datetime) -> tuple[datetime, datetime]:
    """Return the [start, end) review window that precedes week current_week + 1.

    The window is expressed in now's timezone so aware and naive callers both
    compare like with like.
    """
    start_midnight = datetime.combine(parse_date(plan_start_date), time.min, tzinfo=now.tzinfo)
    next_week_start = start_midnight + timedelta(weeks=current_week)
    return next_week_start - REVIEW_WINDOW, next_week_start


def should_show_review(
    plan_start_date: date | datetime | str,
    current_week: int,
    total_weeks: int,
    now: datetime,
) -> bool:
    """Decide whether now falls inside the weekly-review window.

    Args:
        plan_start_date: First day of the plan
        current_week: Current 1-indexed plan week (0 before the plan starts)
        total_weeks: Plan length in weeks
        now: Current instant

    Returns:
        False once the plan is on its last week; otherwise whether
        next_week_start - 1 day <= now < next_week_start
    """
    if current_week < 0:
        raise InvalidArgumentError("current_week", f"Week number cannot be negative: {current_week}")
    if total_weeks < 1:
        raise InvalidArgumentError("total_weeks", f"Plan must have at least one week, got {total_weeks}")

    if current_week >= total_weeks:
        return False

    window_start, next_week_start = review_window(plan_start_date, current_week, now)
    return window_start <= now < next_week_start
