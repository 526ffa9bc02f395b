"""Canonical week-window and date formatting helpers.

Week boundaries are Monday-Sunday (ISO week) unless a different first weekday
is requested.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Literal

from summit.core.errors import InvalidArgumentError

MONDAY = 0
SUNDAY = 6

WeekDirection = Literal["prev", "next"]


def parse_date(value: date | datetime | str) -> date:
    """Coerce a date-like value to a calendar date.

    Args:
        value: date, datetime (time of day dropped) or ISO string. Full ISO
            timestamps such as "2025-01-13T08:30:00Z" (or with a space separator)
            are truncated to the date; any other trailing text is rejected.

    Returns:
        The calendar date

    Raises:
        InvalidArgumentError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10 and text[10] not in ("T", " "):
            raise InvalidArgumentError("date", f"Cannot parse date: {value!r}")
        try:
            return date.fromisoformat(text[:10])
        except ValueError as e:
            raise InvalidArgumentError("date", f"Cannot parse date: {value!r}") from e
    raise InvalidArgumentError("date", f"Unsupported date type: {type(value).__name__}")


def week_start(d: date | datetime | str, week_starts_on: int = MONDAY) -> date:
    """Return the first day of the calendar week containing d."""
    if not MONDAY <= week_starts_on <= SUNDAY:
        raise InvalidArgumentError("week_starts_on", f"week_starts_on must be 0-6, got {week_starts_on}")
    day = parse_date(d)
    return day - timedelta(days=(day.weekday() - week_starts_on) % 7)


def week_end(d: date | datetime | str, week_starts_on: int = MONDAY) -> date:
    """Return the last day of the calendar week containing d."""
    return week_start(d, week_starts_on) + timedelta(days=6)


def navigate_week(d: date | datetime | str, direction: WeekDirection) -> date:
    """Move a reference date one week back or forward."""
    day = parse_date(d)
    if direction == "next":
        return day + timedelta(weeks=1)
    if direction == "prev":
        return day - timedelta(weeks=1)
    raise InvalidArgumentError("direction", f"direction must be 'prev' or 'next', got {direction!r}")


def format_date_iso(d: date | datetime | str) -> str:
    """Format for API requests and storage keys: 2025-01-13."""
    return parse_date(d).isoformat()


def format_date_full(d: date | datetime | str) -> str:
    """Format for headers: Monday, January 13."""
    day = parse_date(d)
    return f"{day.strftime('%A, %B')} {day.day}"


def format_day_short(d: date | datetime | str) -> str:
    return parse_date(d).strftime("%a")


def relative_day_label(d: date | datetime | str, today: date) -> str:
    """Return Today/Tomorrow/Yesterday, or the weekday name for other dates."""
    day = parse_date(d)
    delta = (day - today).days
    if delta == 0:
        return "Today"
    if delta == 1:
        return "Tomorrow"
    if delta == -1:
        return "Yesterday"
    return day.strftime("%A")


def format_duration(minutes: int) -> str:
    """Format a duration in minutes: "45 min", "1 hr", "1 hr 30 min"."""
    if minutes < 0:
        raise InvalidArgumentError("minutes", f"Duration cannot be negative: {minutes}")
    if minutes < 60:
        return f"{minutes} min"
    hours, mins = divmod(minutes, 60)
    if mins == 0:
        return f"{hours} hr"
    return f"{hours} hr {mins} min"
