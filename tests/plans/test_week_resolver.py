"""Contract tests for plan-week resolution.

Plans start on Monday 2025-01-06 unless stated otherwise.
"""

from datetime import date, datetime, timedelta

import pytest

from summit.core.errors import InvalidArgumentError
from summit.plans import (
    Phase,
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

pytestmark = pytest.mark.contract

START = date(2025, 1, 6)

PHASES = [
    Phase(name="Base", week_start=1, week_end=4),
    Phase(name="Build", week_start=5, week_end=8),
    Phase(name="Peak", week_start=9, week_end=10),
    Phase(name="Taper", week_start=11, week_end=12),
]


# ---------------------------------------------------------------------------
# current_week_number
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("days_before", [1, 2, 7, 30])
def test_week_zero_before_plan_starts(days_before):
    assert current_week_number(START, START - timedelta(days=days_before)) == 0


def test_week_one_on_start_date():
    assert current_week_number(START, START) == 1


@pytest.mark.parametrize("n", [0, 1, 2, 5, 11, 20])
def test_week_advances_every_seven_days(n):
    assert current_week_number(START, START + timedelta(days=7 * n)) == n + 1


def test_last_day_of_week_stays_in_week():
    # Sunday closes week 1
    assert current_week_number(START, START + timedelta(days=6)) == 1
    assert current_week_number(START, START + timedelta(days=13)) == 2


def test_time_of_day_is_ignored():
    assert current_week_number(START, datetime(2025, 1, 12, 23, 59)) == 1
    assert current_week_number("2025-01-06", "2025-01-13T00:00:00Z") == 2


def test_past_plan_end_keeps_counting():
    assert current_week_number(START, START + timedelta(weeks=15)) == 16


# ---------------------------------------------------------------------------
# phase_for_week
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    ("week", "expected"),
    [(1, "Base"), (4, "Base"), (5, "Build"), (8, "Build"), (9, "Peak"), (12, "Taper")],
)
def test_phase_for_week_returns_containing_phase(week, expected):
    assert phase_for_week(PHASES, week).name == expected


@pytest.mark.parametrize("week", [0, 13, 40])
def test_phase_for_week_outside_all_phases_is_none(week):
    assert phase_for_week(PHASES, week) is None


def test_phase_for_week_rejects_negative_week():
    with pytest.raises(InvalidArgumentError):
        phase_for_week(PHASES, -1)


# ---------------------------------------------------------------------------
# validate_phases
# ---------------------------------------------------------------------------


def test_validate_phases_accepts_partition():
    validate_phases(PHASES, 12)


def test_validate_phases_rejects_gap():
    phases = [Phase(name="Base", week_start=1, week_end=3), Phase(name="Build", week_start=5, week_end=6)]
    with pytest.raises(InvalidArgumentError, match="expected week 4"):
        validate_phases(phases, 6)


def test_validate_phases_rejects_overlap():
    phases = [Phase(name="Base", week_start=1, week_end=4), Phase(name="Build", week_start=4, week_end=6)]
    with pytest.raises(InvalidArgumentError):
        validate_phases(phases, 6)


def test_validate_phases_rejects_short_coverage():
    with pytest.raises(InvalidArgumentError, match="plan has 14 weeks"):
        validate_phases(PHASES, 14)


def test_validate_phases_rejects_inverted_phase():
    with pytest.raises(InvalidArgumentError):
        validate_phases([Phase(name="Base", week_start=3, week_end=1)], 3)


def test_validate_phases_rejects_empty_and_zero_weeks():
    with pytest.raises(InvalidArgumentError):
        validate_phases([], 4)
    with pytest.raises(InvalidArgumentError):
        validate_phases(PHASES, 0)


# ---------------------------------------------------------------------------
# Week days
# ---------------------------------------------------------------------------


def test_date_for_day_monday_and_sunday():
    assert date_for_day(START, 1, 1) == date(2025, 1, 6)
    assert date_for_day(START, 1, 6) == date(2025, 1, 11)
    # Sunday (0) is the last day of the plan week
    assert date_for_day(START, 1, 0) == date(2025, 1, 12)
    assert date_for_day(START, 3, 3) == date(2025, 1, 22)


def test_date_for_day_rejects_bad_input():
    with pytest.raises(InvalidArgumentError):
        date_for_day(START, 0, 1)
    with pytest.raises(InvalidArgumentError):
        date_for_day(START, 1, 7)


def test_week_days_lists_monday_to_sunday():
    days = week_days(START, 2)

    assert [d.day_name for d in days] == ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]
    assert [d.day_of_week for d in days] == [1, 2, 3, 4, 5, 6, 0]
    assert days[0].date == date(2025, 1, 13)
    assert days[-1].date == date(2025, 1, 19)
    for day in days:
        assert date_for_day(START, 2, day.day_of_week) == day.date


def test_week_relative_position():
    today = date(2025, 1, 15)  # week 2

    assert is_current_week(START, 2, today)
    assert is_past_week(START, 1, today)
    assert is_future_week(START, 3, today)
    assert not is_current_week(START, 3, today)


def test_can_log_workout_only_for_today_or_earlier():
    today = date(2025, 1, 15)  # Wednesday of week 2

    assert can_log_workout(START, 2, 3, today)
    assert can_log_workout(START, 1, 0, today)
    assert not can_log_workout(START, 2, 4, today)
    assert not can_log_workout(START, 3, 1, today)


@pytest.mark.parametrize(
    ("today", "expected"),
    [
        (date(2025, 1, 6), date(2025, 1, 6)),
        (date(2025, 1, 7), date(2025, 1, 13)),
        (date(2025, 1, 12), date(2025, 1, 13)),
    ],
)
def test_next_monday(today, expected):
    assert next_monday(today) == expected
