from typing import Any, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from wandr.core.auth import get_current_user_id, get_optional_user_id
from wandr.core.config import settings
from wandr.core.database import get_db
from wandr.schemas.leaderboard import (
    LeaderboardBadgeCatalogue,
    LeaderboardResponse,
    TopUsers,
    UserLeaderboardStats,
)
from wandr.schemas.response import Messages, SuccessResponse
from wandr.services.leaderboard_service import LEADERBOARD_BADGES, LeaderboardService

router = APIRouter()


@router.get("/", response_model=SuccessResponse[LeaderboardResponse])
def read_leaderboard(
    db: Session = Depends(get_db),
    limit: int = Query(
        default=settings.LEADERBOARD_DEFAULT_LIMIT,
        ge=1,
        le=settings.LEADERBOARD_MAX_LIMIT,
    ),
    user_id: Optional[int] = Depends(get_optional_user_id),
) -> Any:
    """
    Global ranking by verified visits. Signed-in callers also get their own standing.
    """
    return SuccessResponse(
        message=Messages.LEADERBOARD_RETRIEVED,
        data=LeaderboardService(db).get_leaderboard(limit=limit, user_id=user_id),
    )


@router.get("/top", response_model=SuccessResponse[TopUsers])
def read_top_users(db: Session = Depends(get_db)) -> Any:
    top = LeaderboardService(db).get_top_users(limit=settings.LEADERBOARD_TOP_LIMIT)
    return SuccessResponse(
        message=Messages.LEADERBOARD_RETRIEVED, data=TopUsers(leaderboard=top)
    )


@router.get("/badges", response_model=SuccessResponse[LeaderboardBadgeCatalogue])
def read_leaderboard_badges() -> Any:
    """
    Display details of the badges held by top-ranked users.
    """
    return SuccessResponse(
        message=Messages.DATA_RETRIEVED,
        data=LeaderboardBadgeCatalogue(badges=LEADERBOARD_BADGES),
    )


@router.get("/me", response_model=SuccessResponse[UserLeaderboardStats])
def read_my_leaderboard_stats(
    db: Session = Depends(get_db),
    user_id: int = Depends(get_current_user_id),
) -> Any:
    return SuccessResponse(
        message=Messages.LEADERBOARD_STATS_RETRIEVED,
        data=LeaderboardService(db).get_user_stats(user_id),
    )
