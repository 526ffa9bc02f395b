"""Motivational message for the Today screen.

Deterministic priority ladder; the first matching rule wins:
1. poor sleep
2. low recovery
3. nothing scheduled
4. rest day
5. streak tiers (30, 14, 7, >0 days)
6. generic encouragement, picked by an injectable chooser
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass

SLEEP_SCORE_THRESHOLD = 60
RECOVERY_SCORE_THRESHOLD = 50

FATIGUE_MESSAGE = (
    "Sleep was rough last night. Listen to your body and consider going easier today. Recovery is training too."
)
LOW_RECOVERY_MESSAGE = "Your recovery metrics are low. Consider modifying today's intensity or taking extra rest."
NO_WORKOUT_MESSAGE = "No workout scheduled for today. Enjoy your rest or get outside and move!"
REST_DAY_MESSAGE = "Rest day. Recovery is when adaptation happens. Sleep well, eat well, move gently."

DEFAULT_MESSAGES: tuple[str, ...] = (
    "Today's session awaits. You know what to do.",
    "Show up. Do the work. Get better.",
    "Another chance to invest in your goal.",
    "The summit is built one session at a time.",
)

Chooser = Callable[[Sequence[str]], str]


@dataclass(frozen=True)
class TodayContext:
    """Snapshot of what the Today screen knows about the user.

    Attributes:
        has_workout: Whether anything is scheduled today
        is_rest_day: Whether today's first scheduled workout (earliest created)
            is a rest day. Workouts added later the same day do not change it.
        streak: Current streak in days
        sleep_score: Today's sleep score (0-100), if a wearable reported one
        recovery_score: Today's recovery score (0-100), if reported
    """

    has_workout: bool
    is_rest_day: bool
    streak: int
    sleep_score: float | None = None
    recovery_score: float | None = None


def streak_message(streak: int) -> str | None:
    """Return the tiered streak message, or None for a zero streak."""
    if streak >= 30:
        return f"🔥 {streak} day streak! You're building something real. One more day."
    if streak >= 14:
        return f"{streak} days in a row. The consistency is paying off. Trust the process."
    if streak >= 7:
        return f"Week {streak // 7} complete. You're in the rhythm now."
    if streak > 0:
        return f"{streak} day streak. Keep showing up. The work compounds."
    return None


def select_message(context: TodayContext, chooser: Chooser = random.choice) -> str:
    """Pick the message to show for the given context.

    Args:
        context: Today's workout, streak and recovery signals
        chooser: Picks one of the generic encouragement strings. Defaults to
            random.choice; pass a deterministic callable in tests.
    """
    if context.sleep_score is not None and context.sleep_score < SLEEP_SCORE_THRESHOLD:
        return FATIGUE_MESSAGE
    if context.recovery_score is not None and context.recovery_score < RECOVERY_SCORE_THRESHOLD:
        return LOW_RECOVERY_MESSAGE
    if not context.has_workout:
        return NO_WORKOUT_MESSAGE
    if context.is_rest_day:
        return REST_DAY_MESSAGE

    tiered = streak_message(context.streak)
    if tiered is not None:
        return tiered

    return chooser(DEFAULT_MESSAGES)
