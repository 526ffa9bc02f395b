"""Workout streak calculation.

A streak is the number of consecutive qualifying days walking backward from
yesterday. Today is never counted because it may still be in progress.

Rules, per day:
- rest day: counts (rest preserves a streak without needing completion)
- non-rest day: counts only when completed, otherwise the streak ends
- no record: ends an active streak; before any day has counted, unscheduled
  days are skipped until the walk leaves the history window

Read-only and deterministic. No database access.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, timedelta

from loguru import logger

from summit.core.errors import InvalidArgumentError

REST_WORKOUT_TYPE = "rest"
DEFAULT_WINDOW_DAYS = 90


@dataclass(frozen=True)
class StreakEntry:
    """One scheduled workout occurrence from the user's history."""

    date: date
    completed: bool
    workout_type: str


@dataclass
class DayStatus:
    """Merged view of every workout scheduled on one date."""

    completed: bool
    is_rest: bool


def merge_days(entries: Iterable[StreakEntry]) -> dict[date, DayStatus]:
    """Collapse same-day entries into a single status per date.

    A day stays rest only while every entry on it is rest. Any completed
    non-rest entry marks the day completed.
    """
    days: dict[date, DayStatus] = {}
    for entry in entries:
        is_rest = entry.workout_type == REST_WORKOUT_TYPE
        existing = days.get(entry.date)
        if existing is None:
            days[entry.date] = DayStatus(completed=bool(entry.completed), is_rest=is_rest)
            continue
        if not is_rest:
            if existing.is_rest:
                # A rest entry's completion flag says nothing about the workout
                existing.completed = bool(entry.completed)
            elif entry.completed:
                existing.completed = True
            existing.is_rest = False
    return days


def calculate_streak(
    entries: Iterable[StreakEntry],
    today: date,
    window_days: int = DEFAULT_WINDOW_DAYS,
) -> int:
    """Count consecutive qualifying days ending yesterday.

    Args:
        entries: Workout history in any order. Entries outside the window
            (older than today - window_days) and entries dated today or later
            are ignored.
        today: Reference date; counting starts the day before
        window_days: Trailing history window in days

    Returns:
        Non-negative streak length in days
    """
    if window_days < 1:
        raise InvalidArgumentError("window_days", f"Streak window must be at least one day, got {window_days}")

    window_start = today - timedelta(days=window_days)
    days = merge_days(e for e in entries if window_start <= e.date < today)
    if not days:
        return 0

    streak = 0
    current = today - timedelta(days=1)

    while current >= window_start:
        status = days.get(current)

        if status is None:
            if streak > 0:
                break
            current -= timedelta(days=1)
            continue

        if status.is_rest or status.completed:
            streak += 1
        else:
            break

        current -= timedelta(days=1)

    logger.debug(f"[STREAK] streak={streak} today={today.isoformat()} days_with_history={len(days)}")
    return streak
