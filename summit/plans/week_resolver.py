"""Plan-week resolution.

Maps calendar dates onto 1-indexed plan weeks and plan weeks onto
periodization phases. Plans always start on a Monday; week N covers
[start + 7*(N-1), start + 7*N).
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, datetime, timedelta

from summit.core.errors import InvalidArgumentError
from summit.plans.types import Phase, WeekDay
from summit.utils.calendar import parse_date

_DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def current_week_number(plan_start_date: date | datetime | str, today: date | datetime | str) -> int:
    """Return the 1-indexed plan week containing today.

    Args:
        plan_start_date: First day of the plan
        today: Reference date (time of day is ignored)

    Returns:
        0 if the plan has not started yet, otherwise floor(days / 7) + 1
    """
    start = parse_date(plan_start_date)
    current = parse_date(today)
    if current < start:
        return 0
    return (current - start).days // 7 + 1


def phase_for_week(phases: Sequence[Phase], week_number: int) -> Phase | None:
    """Return the first phase whose week range contains week_number.

    Phase coverage is not enforced here; a missing phase is reported as None
    and left for the caller to treat as a data-integrity problem.
    """
    if week_number < 0:
        raise InvalidArgumentError("week_number", f"Week number cannot be negative: {week_number}")
    for phase in phases:
        if phase.week_start <= week_number <= phase.week_end:
            return phase
    return None


def validate_phases(phases: Sequence[Phase], total_weeks: int) -> None:
    """Check that phases partition [1, total_weeks] in order with no gaps or overlaps.

    Raises:
        InvalidArgumentError: On the first violation found
    """
    if total_weeks < 1:
        raise InvalidArgumentError("total_weeks", f"Plan must have at least one week, got {total_weeks}")
    if not phases:
        raise InvalidArgumentError("phases", "Plan must have at least one phase")

    expected_start = 1
    for phase in phases:
        if phase.week_end < phase.week_start:
            raise InvalidArgumentError(
                "phases",
                f"Phase {phase.name!r} ends (week {phase.week_end}) before it starts (week {phase.week_start})",
            )
        if phase.week_start != expected_start:
            raise InvalidArgumentError(
                "phases",
                f"Phase {phase.name!r} starts at week {phase.week_start}, expected week {expected_start}",
            )
        expected_start = phase.week_end + 1

    if expected_start - 1 != total_weeks:
        raise InvalidArgumentError(
            "phases",
            f"Phases cover weeks 1-{expected_start - 1}, but the plan has {total_weeks} weeks",
        )


def date_for_day(plan_start_date: date | datetime | str, week_number: int, day_of_week: int) -> date:
    """Return the calendar date of a weekday within a plan week.

    day_of_week uses 0=Sunday .. 6=Saturday; Sunday is the last day of the week.
    """
    if week_number < 1:
        raise InvalidArgumentError("week_number", f"Week number must be >= 1, got {week_number}")
    if not 0 <= day_of_week <= 6:
        raise InvalidArgumentError("day_of_week", f"day_of_week must be 0-6, got {day_of_week}")
    offset = 6 if day_of_week == 0 else day_of_week - 1
    return parse_date(plan_start_date) + timedelta(weeks=week_number - 1, days=offset)


def week_days(plan_start_date: date | datetime | str, week_number: int) -> list[WeekDay]:
    """Return the seven days of a plan week, Monday first."""
    if week_number < 1:
        raise InvalidArgumentError("week_number", f"Week number must be >= 1, got {week_number}")
    first = parse_date(plan_start_date) + timedelta(weeks=week_number - 1)
    return [
        WeekDay(day_of_week=(index + 1) % 7, date=first + timedelta(days=index), day_name=name)
        for index, name in enumerate(_DAY_NAMES)
    ]


def is_current_week(plan_start_date: date | datetime | str, week_number: int, today: date) -> bool:
    return current_week_number(plan_start_date, today) == week_number


def is_past_week(plan_start_date: date | datetime | str, week_number: int, today: date) -> bool:
    return week_number < current_week_number(plan_start_date, today)


def is_future_week(plan_start_date: date | datetime | str, week_number: int, today: date) -> bool:
    return week_number > current_week_number(plan_start_date, today)


def can_log_workout(plan_start_date: date | datetime | str, week_number: int, day_of_week: int, today: date) -> bool:
    """A workout can be logged once its date is today or in the past."""
    return date_for_day(plan_start_date, week_number, day_of_week) <= today


def next_monday(today: date) -> date:
    """Return today if it is a Monday, otherwise the following Monday."""
    return today + timedelta(days=(7 - today.weekday()) % 7)
