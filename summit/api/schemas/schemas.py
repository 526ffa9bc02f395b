"""API contract schemas for the Today, Week, Plan, Workouts, Metrics and Profile endpoints."""

from datetime import date, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from summit.metrics.trends import Trend
from summit.plans.types import Phase, PlanStatus, WeekDay

WorkoutType = Literal[
    "strength",
    "endurance",
    "power",
    "technique",
    "recovery",
    "rest",
    "climbing",
    "running",
    "hiking",
    "cross_training",
]
MetricSource = Literal["manual", "garmin", "apple", "whoop", "coros"]

# ============================================================================
# Workouts
# ============================================================================


class WorkoutOut(BaseModel):
    """A scheduled workout as returned to clients."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    plan_id: str | None = None
    scheduled_date: date
    week_number: int | None = None
    day_of_week: int | None = None
    workout_type: str
    title: str
    description: str | None = None
    planned_duration: int | None = Field(default=None, description="Planned duration in minutes")
    target_intensity: str | None = None
    completed: bool
    completed_at: datetime | None = None
    actual_duration: int | None = Field(default=None, description="Actual duration in minutes")
    rpe: int | None = None
    notes: str | None = None
    watch_data: dict[str, Any] | None = None
    was_adapted: bool = False
    adaptation_reason: str | None = None


class WorkoutListResponse(BaseModel):
    """Response for GET /workouts."""

    workouts: list[WorkoutOut]
    count: int


class WorkoutLogRequest(BaseModel):
    """Request body for POST/PATCH /workouts/log."""

    workout_id: str = Field(min_length=1)
    completed: bool
    actual_duration: int | None = Field(default=None, ge=0, description="Minutes")
    rpe: int | None = Field(default=None, ge=1, le=10, description="Rate of Perceived Exertion")
    notes: str | None = Field(default=None, max_length=1000)
    watch_data: dict[str, Any] | None = Field(default=None, description="Raw data from wearable")


class WorkoutLogResponse(BaseModel):
    workout: WorkoutOut
    training_load_contribution: int | None
    message: str


class WorkoutRemoveRequest(BaseModel):
    """Request body for POST /workouts/{id}/remove."""

    reason: str = Field(min_length=1, max_length=1000)


# ============================================================================
# Metrics
# ============================================================================


class MetricsOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    date: date
    hrv: float | None = None
    resting_hr: float | None = None
    sleep_score: float | None = None
    sleep_duration: float | None = None
    recovery_score: float | None = None
    training_load: float | None = None
    source: str


class MetricsCreateRequest(BaseModel):
    """Request body for POST /metrics (manual entry or wearable sync)."""

    date: date
    hrv: float | None = None
    resting_hr: float | None = None
    sleep_score: float | None = Field(default=None, ge=0, le=100)
    sleep_duration: float | None = Field(default=None, ge=0, description="Minutes")
    recovery_score: float | None = Field(default=None, ge=0, le=100)
    training_load: float | None = None
    source: MetricSource = "manual"


class MetricsTrendsOut(BaseModel):
    hrv_trend: Trend
    sleep_trend: Trend
    recovery_trend: Trend
    avg_hrv: float | None
    avg_sleep_score: float | None
    avg_recovery: float | None


class MetricsListResponse(BaseModel):
    metrics: list[MetricsOut]
    count: int
    trends: MetricsTrendsOut


class MetricsDayResponse(BaseModel):
    metrics: MetricsOut | None


class MetricsTrendPoint(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: date
    hrv: float | None = None
    sleep_score: float | None = None
    recovery_score: float | None = None


# ============================================================================
# Today / Week
# ============================================================================


class TodayResponse(BaseModel):
    """Response for GET /today."""

    date: date
    workout: WorkoutOut | None
    metrics: MetricsOut | None
    streak: int
    message: str
    all_workouts: list[WorkoutOut] | None = Field(default=None, description="Present when more than one workout is scheduled")
    metrics_trend: list[MetricsTrendPoint] | None = None


class WeekResponse(BaseModel):
    """Response for GET /week."""

    week_number: int
    phase: str
    workouts: list[WorkoutOut]
    planned_hours: float
    completed_hours: float
    completion_rate: int
    week_start: date
    week_end: date
    total_workouts: int
    completed_workouts: int
    remaining_workouts: int


# ============================================================================
# Plans
# ============================================================================


class PlanOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    status: PlanStatus
    start_date: date
    total_weeks: int
    phases: list[Phase]


class PlanListResponse(BaseModel):
    """Response for GET /plans."""

    plans: list[PlanOut]


class ActivePlanResponse(BaseModel):
    """Response for GET /plans?active=true."""

    plan: PlanOut | None


class PlanCreateRequest(BaseModel):
    name: str = Field(min_length=1)
    start_date: date
    total_weeks: int = Field(ge=1)
    phases: list[Phase] = Field(min_length=1)


class CurrentPlanResponse(BaseModel):
    """Response for GET /plans/current."""

    plan: PlanOut
    week_number: int
    phase: str | None
    show_review: bool
    week_days: list[WeekDay]


# ============================================================================
# Profiles
# ============================================================================

Discipline = Literal["climbing", "ultra", "skimo", "mountaineering", "trail_running", "alpinism"]
FitnessLevel = Literal["beginner", "intermediate", "advanced", "elite"]


class ProfileOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    disciplines: list[str]
    goal_text: str | None = None
    goal_date: date | None = None
    hours_per_week: float | None = None
    days_per_week: int | None = None
    equipment: list[str]
    fitness_level: FitnessLevel | None = None
    recent_activity: str | None = None
    injuries: str | None = None
    onboarding_completed_at: datetime | None = None


class ProfileCreateRequest(BaseModel):
    """Request body for POST /profiles (end of onboarding)."""

    disciplines: list[Discipline] = Field(min_length=1)
    goal_text: str = Field(min_length=1)
    goal_date: date | None = None
    hours_per_week: float = Field(ge=1, le=40)
    days_per_week: int = Field(ge=1, le=7)
    equipment: list[str] = Field(default_factory=list)
    fitness_level: FitnessLevel
    recent_activity: str | None = None
    injuries: str | None = None


class ProfileUpdateRequest(BaseModel):
    """Request body for PUT /profiles. Only fields present in the body are changed."""

    disciplines: list[Discipline] | None = Field(default=None, min_length=1)
    goal_text: str | None = Field(default=None, min_length=1)
    goal_date: date | None = None
    hours_per_week: float | None = Field(default=None, ge=1, le=40)
    days_per_week: int | None = Field(default=None, ge=1, le=7)
    equipment: list[str] | None = None
    fitness_level: FitnessLevel | None = None
    recent_activity: str | None = None
    injuries: str | None = None


class ProfileResponse(BaseModel):
    profile: ProfileOut | None
