"""Recovery-metric trends over a window of daily metrics.

Metrics arrive newest first. A trend compares the mean of the newer half of a
series against the mean of the older half.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass
from typing import Literal, Protocol

Trend = Literal["up", "down", "stable", "insufficient_data"]

MIN_ROWS_FOR_TRENDS = 3
MIN_VALUES_FOR_TREND = 4
TREND_CHANGE_PCT = 5.0


class DailyMetrics(Protocol):
    hrv: float | None
    sleep_score: float | None
    recovery_score: float | None


@dataclass
class MetricsTrends:
    hrv_trend: Trend
    sleep_trend: Trend
    recovery_trend: Trend
    avg_hrv: float | None
    avg_sleep_score: float | None
    avg_recovery: float | None

    def to_dict(self) -> dict:
        return asdict(self)


def _mean(values: Sequence[float]) -> float | None:
    if not values:
        return None
    return sum(values) / len(values)


def series_trend(values_newest_first: Sequence[float]) -> Trend:
    """Classify a series as up/down/stable, or insufficient_data below four values."""
    if len(values_newest_first) < MIN_VALUES_FOR_TREND:
        return "insufficient_data"

    midpoint = len(values_newest_first) // 2
    newer = _mean(values_newest_first[:midpoint]) or 0.0
    older = _mean(values_newest_first[midpoint:]) or 0.0
    if older == 0:
        return "stable"

    change = (newer - older) / older * 100
    if change > TREND_CHANGE_PCT:
        return "up"
    if change < -TREND_CHANGE_PCT:
        return "down"
    return "stable"


def calculate_trends(metrics_newest_first: Sequence[DailyMetrics]) -> MetricsTrends:
    if len(metrics_newest_first) < MIN_ROWS_FOR_TRENDS:
        return MetricsTrends(
            hrv_trend="insufficient_data",
            sleep_trend="insufficient_data",
            recovery_trend="insufficient_data",
            avg_hrv=None,
            avg_sleep_score=None,
            avg_recovery=None,
        )

    hrv = [m.hrv for m in metrics_newest_first if m.hrv is not None]
    sleep = [m.sleep_score for m in metrics_newest_first if m.sleep_score is not None]
    recovery = [m.recovery_score for m in metrics_newest_first if m.recovery_score is not None]

    return MetricsTrends(
        hrv_trend=series_trend(hrv),
        sleep_trend=series_trend(sleep),
        recovery_trend=series_trend(recovery),
        avg_hrv=_mean(hrv),
        avg_sleep_score=_mean(sleep),
        avg_recovery=_mean(recovery),
    )
