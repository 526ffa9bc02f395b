"""Contract tests for the Today-screen motivational message ladder."""

import pytest

from summit.coach.motivation import (
    DEFAULT_MESSAGES,
    FATIGUE_MESSAGE,
    LOW_RECOVERY_MESSAGE,
    NO_WORKOUT_MESSAGE,
    REST_DAY_MESSAGE,
    TodayContext,
    select_message,
    streak_message,
)

pytestmark = pytest.mark.contract


def first(messages):
    return messages[0]


def context(**overrides) -> TodayContext:
    values = {"has_workout": True, "is_rest_day": False, "streak": 0}
    values.update(overrides)
    return TodayContext(**values)


@pytest.mark.parametrize("streak", [0, 3, 10, 45])
def test_poor_sleep_wins_regardless_of_streak(streak):
    assert select_message(context(sleep_score=55, streak=streak)) == FATIGUE_MESSAGE


def test_poor_sleep_beats_low_recovery_and_rest_day():
    ctx = context(sleep_score=40, recovery_score=20, is_rest_day=True)
    assert select_message(ctx) == FATIGUE_MESSAGE


def test_low_recovery_when_sleep_is_fine():
    assert select_message(context(sleep_score=85, recovery_score=45, streak=30)) == LOW_RECOVERY_MESSAGE


def test_zero_scores_count_as_reported():
    assert select_message(context(sleep_score=0)) == FATIGUE_MESSAGE
    assert select_message(context(recovery_score=0)) == LOW_RECOVERY_MESSAGE


def test_thresholds_are_exclusive():
    assert select_message(context(sleep_score=60, recovery_score=50), chooser=first) == DEFAULT_MESSAGES[0]


def test_no_workout_scheduled():
    assert select_message(context(has_workout=False, streak=12)) == NO_WORKOUT_MESSAGE


def test_rest_day():
    assert select_message(context(is_rest_day=True, streak=12)) == REST_DAY_MESSAGE


@pytest.mark.parametrize(
    ("streak", "expected"),
    [
        (1, "1 day streak. Keep showing up. The work compounds."),
        (6, "6 day streak. Keep showing up. The work compounds."),
        (7, "Week 1 complete. You're in the rhythm now."),
        (13, "Week 1 complete. You're in the rhythm now."),
        (14, "14 days in a row. The consistency is paying off. Trust the process."),
        (30, "🔥 30 day streak! You're building something real. One more day."),
    ],
)
def test_streak_tiers(streak, expected):
    assert streak_message(streak) == expected
    assert select_message(context(streak=streak)) == expected


def test_streak_message_none_without_streak():
    assert streak_message(0) is None


def test_default_message_uses_chooser():
    seen = []

    def chooser(messages):
        seen.append(tuple(messages))
        return messages[-1]

    assert select_message(context(), chooser=chooser) == DEFAULT_MESSAGES[-1]
    assert seen == [DEFAULT_MESSAGES]


def test_default_message_is_from_pool():
    assert select_message(context()) in DEFAULT_MESSAGES
