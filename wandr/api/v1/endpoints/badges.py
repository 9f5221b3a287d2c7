from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from wandr.core.auth import get_current_user_id
from wandr.core.config import settings
from wandr.core.constants import BadgeTier, LocationType
from wandr.core.database import get_db
from wandr.schemas.badge import (
    AllBadgeProgress,
    BadgeCollection,
    BadgeProgress,
    BadgeSummary,
    BadgeTimeline,
)
from wandr.schemas.response import Messages, SuccessResponse
from wandr.services.badge_service import BadgeService

router = APIRouter()


@router.get("/", response_model=SuccessResponse[BadgeCollection])
def read_badges(
    db: Session = Depends(get_db),
    location_type: Optional[LocationType] = Query(
        None, description="Filter by location type"
    ),
    tier: Optional[BadgeTier] = Query(None, description="Filter by badge tier"),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Retrieve the current user's badges, newest first, with a summary.
    """
    collection = BadgeService(db).get_collection(
        user_id, location_type=location_type, tier=tier
    )
    return SuccessResponse(message=Messages.BADGES_RETRIEVED, data=collection)


@router.get("/progress", response_model=SuccessResponse[AllBadgeProgress])
def read_all_progress(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Progress for every city, country and continent the user has a visit in.
    """
    return SuccessResponse(
        message=Messages.BADGE_PROGRESS_RETRIEVED,
        data=BadgeService(db).get_progress(user_id),
    )


@router.get(
    "/progress/{location_type}/{location_id}",
    response_model=SuccessResponse[BadgeProgress],
)
def read_location_progress(
    location_type: LocationType,
    location_id: int,
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Progress toward the badges of a single location.
    """
    progress = BadgeService(db).get_location_progress(
        user_id, location_type, location_id
    )
    return SuccessResponse(message=Messages.BADGE_PROGRESS_RETRIEVED, data=progress)


@router.get("/timeline", response_model=SuccessResponse[BadgeTimeline])
def read_badge_timeline(
    db: Session = Depends(get_db),
    limit: int = Query(
        default=settings.BADGE_TIMELINE_DEFAULT_LIMIT,
        ge=1,
        le=settings.BADGE_TIMELINE_MAX_LIMIT,
    ),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Most recently earned badges.
    """
    return SuccessResponse(
        message=Messages.BADGE_TIMELINE_RETRIEVED,
        data=BadgeService(db).get_timeline(user_id, limit=limit),
    )


@router.get("/summary", response_model=SuccessResponse[BadgeSummary])
def read_badge_summary(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    """
    Badge counts by tier and location type, plus the latest badge.
    """
    return SuccessResponse(
        message=Messages.BADGE_SUMMARY_RETRIEVED,
        data=BadgeService(db).get_summary(user_id),
    )
