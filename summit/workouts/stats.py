"""Week-level workout statistics and per-workout training load."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from summit.workouts.streak import REST_WORKOUT_TYPE


class ScheduledWorkout(Protocol):
    workout_type: str
    completed: bool
    planned_duration: int | None
    actual_duration: int | None


@dataclass
class WeekStats:
    """Summary of one calendar week of scheduled workouts.

    Rest days are excluded from every count and total.
    """

    planned_hours: float
    completed_hours: float
    completion_rate: int  # percent, 0-100
    total_workouts: int
    completed_workouts: int

    @property
    def remaining_workouts(self) -> int:
        return self.total_workouts - self.completed_workouts


def compute_week_stats(workouts: Iterable[ScheduledWorkout]) -> WeekStats:
    planned_minutes = 0
    completed_minutes = 0
    total = 0
    completed = 0

    for workout in workouts:
        if workout.workout_type == REST_WORKOUT_TYPE:
            continue
        total += 1
        planned_minutes += workout.planned_duration or 0
        if workout.completed:
            completed += 1
            completed_minutes += workout.actual_duration or workout.planned_duration or 0

    return WeekStats(
        planned_hours=round(planned_minutes / 60, 1),
        completed_hours=round(completed_minutes / 60, 1),
        completion_rate=round(completed / total * 100) if total else 0,
        total_workouts=total,
        completed_workouts=completed,
    )


def training_load_contribution(completed: bool, actual_duration: float | None, rpe: float | None) -> int | None:
    """Session load as duration (minutes) x RPE, a simplified TRIMP.

    Returns None unless the workout was completed with a non-zero duration and RPE.
    """
    if not completed or not actual_duration or not rpe:
        return None
    return round(actual_duration * rpe)
