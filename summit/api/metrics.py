"""Metrics endpoints.

GET returns the caller's daily recovery metrics with trends; POST stores one
day of metrics (manual entry or wearable sync), replacing that day's values.
"""

from __future__ import annotations

from datetime import date, timedelta

from fastapi import APIRouter, Depends, Query, status
from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from summit.api.dependencies.auth import get_current_user_id
from summit.api.schemas.schemas import (
    MetricsCreateRequest,
    MetricsDayResponse,
    MetricsListResponse,
    MetricsOut,
    MetricsTrendsOut,
)
from summit.api.today import get_today
from summit.config.settings import settings
from summit.db.models import Metrics
from summit.db.session import get_db
from summit.metrics.trends import calculate_trends
from summit.utils.calendar import parse_date

router = APIRouter(prefix="/metrics", tags=["metrics"])

METRIC_FIELDS = ("hrv", "resting_hr", "sleep_score", "sleep_duration", "recovery_score", "training_load", "source")


def _find_metrics(db: Session, user_id: str, day: date) -> Metrics | None:
    return db.execute(select(Metrics).where(Metrics.user_id == user_id, Metrics.date == day)).scalar_one_or_none()


def _apply_values(row: Metrics, request: MetricsCreateRequest) -> None:
    for field in METRIC_FIELDS:
        setattr(row, field, getattr(request, field))


@router.get("", response_model=MetricsListResponse | MetricsDayResponse)
def get_metrics(
    date_param: str | None = Query(default=None, alias="date", description="Single day (YYYY-MM-DD)"),
    start_date: str | None = None,
    end_date: str | None = None,
    limit: int = Query(default=30, ge=1, le=366),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
) -> MetricsListResponse | MetricsDayResponse:
    """Return one day of metrics, or a date range (default: recent days) with trends."""
    if date_param:
        row = _find_metrics(db, user_id, parse_date(date_param))
        return MetricsDayResponse(metrics=MetricsOut.model_validate(row) if row else None)

    query = select(Metrics).where(Metrics.user_id == user_id)
    if start_date and end_date:
        query = query.where(Metrics.date >= parse_date(start_date), Metrics.date <= parse_date(end_date))
    else:
        query = query.where(Metrics.date >= today - timedelta(days=settings.metrics_default_days))

    rows = db.execute(query.order_by(Metrics.date.desc()).limit(limit)).scalars().all()
    trends = calculate_trends(rows)

    return MetricsListResponse(
        metrics=[MetricsOut.model_validate(r) for r in rows],
        count=len(rows),
        trends=MetricsTrendsOut(**trends.to_dict()),
    )


@router.post("", response_model=MetricsDayResponse, status_code=status.HTTP_201_CREATED)
def post_metrics(
    request: MetricsCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> MetricsDayResponse:
    """Upsert metrics for (user, date); at most one row exists per user per day.

    The insert runs in a savepoint. If another writer stored the same day
    after the lookup, the unique constraint rejects the insert and the values
    are written onto that row instead.
    """
    row = _find_metrics(db, user_id, request.date)
    created = False

    if row is None:
        savepoint = db.begin_nested()
        try:
            row = Metrics(user_id=user_id, date=request.date)
            _apply_values(row, request)
            db.add(row)
            db.flush()
            savepoint.commit()
            created = True
        except IntegrityError:
            savepoint.rollback()
            logger.debug(f"[METRICS] Concurrent insert for user_id={user_id} date={request.date.isoformat()}, updating")
            row = db.execute(
                select(Metrics).where(Metrics.user_id == user_id, Metrics.date == request.date)
            ).scalar_one()

    if not created:
        _apply_values(row, request)

    db.commit()
    db.refresh(row)
    logger.info(f"[METRICS] {'Created' if created else 'Updated'} metrics for user_id={user_id} date={request.date.isoformat()}")
    return MetricsDayResponse(metrics=MetricsOut.model_validate(row))
