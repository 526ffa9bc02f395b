"""Profile endpoints.

The onboarding flow creates the caller's profile once (POST); the settings
screen edits it afterwards (PUT).
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, status
from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from summit.api.dependencies.auth import get_current_user_id
from summit.api.schemas.schemas import ProfileCreateRequest, ProfileOut, ProfileResponse, ProfileUpdateRequest
from summit.db.models import Profile
from summit.db.session import get_db

router = APIRouter(prefix="/profiles", tags=["profiles"])

# Optional fields that null clears on update
CLEARABLE_FIELDS = ("goal_date", "recent_activity", "injuries")


def _get_profile(db: Session, user_id: str) -> Profile | None:
    return db.execute(select(Profile).where(Profile.user_id == user_id)).scalar_one_or_none()


def _profile_exists() -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Profile already exists. Use PUT to update.")


@router.get("", response_model=ProfileResponse)
def get_profile(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    """Return the caller's profile, or null before onboarding is finished."""
    profile = _get_profile(db, user_id)
    return ProfileResponse(profile=ProfileOut.model_validate(profile) if profile else None)


@router.post("", response_model=ProfileResponse, status_code=status.HTTP_201_CREATED)
def create_profile(
    request: ProfileCreateRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    """Create the caller's profile and mark onboarding complete.

    Raises:
        HTTPException: 409 if the caller already has a profile
    """
    if _get_profile(db, user_id) is not None:
        raise _profile_exists()

    savepoint = db.begin_nested()
    try:
        profile = Profile(
            user_id=user_id,
            onboarding_completed_at=datetime.now(timezone.utc),
            **request.model_dump(),
        )
        db.add(profile)
        db.flush()
        savepoint.commit()
    except IntegrityError as e:
        savepoint.rollback()
        logger.warning(f"[PROFILES] Concurrent profile creation for user_id={user_id}")
        raise _profile_exists() from e

    db.commit()
    db.refresh(profile)
    logger.info(f"[PROFILES] Onboarding complete for user_id={user_id} disciplines={profile.disciplines}")
    return ProfileResponse(profile=ProfileOut.model_validate(profile))


@router.put("", response_model=ProfileResponse)
def update_profile(
    request: ProfileUpdateRequest,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> ProfileResponse:
    """Apply the fields present in the body to the caller's profile.

    null leaves a field unchanged, except goal_date, recent_activity and
    injuries, which null clears ("" also clears the two text fields).

    Raises:
        HTTPException: 404 if the caller has no profile yet
    """
    profile = _get_profile(db, user_id)
    if profile is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Profile not found")

    changes = request.model_dump(exclude_unset=True)
    for field, value in changes.items():
        if field in CLEARABLE_FIELDS:
            setattr(profile, field, value or None)
        elif value is not None:
            setattr(profile, field, value)

    db.commit()
    db.refresh(profile)
    logger.info(f"[PROFILES] Updated {sorted(changes)} for user_id={user_id}")
    return ProfileResponse(profile=ProfileOut.model_validate(profile))
