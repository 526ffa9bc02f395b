"""Plan structure types shared by the resolver, the API and persistence."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, Field

PlanStatus = Literal["active", "completed", "abandoned", "paused"]

DEFAULT_PHASE_NAME = "Training"


class Phase(BaseModel):
    """A named, contiguous range of plan weeks (e.g. Base, Build, Peak).

    Attributes:
        name: Display name of the periodization stage
        week_start: First week of the phase (1-indexed, inclusive)
        week_end: Last week of the phase (inclusive)
    """

    name: str = Field(min_length=1)
    week_start: int = Field(ge=1)
    week_end: int = Field(ge=1)


class WeekDay(BaseModel):
    """One day of a plan week, Monday first."""

    day_of_week: int  # 0=Sunday .. 6=Saturday
    date: date
    day_name: str
