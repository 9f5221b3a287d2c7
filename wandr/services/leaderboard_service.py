import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from wandr.core.config import settings
from wandr.core.constants import LEADERBOARD_BADGE_CUTOFFS, LeaderboardBadge
from wandr.crud.visit import crud_visit
from wandr.schemas.leaderboard import (
    LeaderboardBadgeInfo,
    LeaderboardEntry,
    LeaderboardResponse,
    UserLeaderboardStats,
)

logger = logging.getLogger(__name__)

LEADERBOARD_BADGES: List[LeaderboardBadgeInfo] = [
    LeaderboardBadgeInfo(
        id=LeaderboardBadge.GOLD_CHAMPION,
        name="Gold Champion",
        emoji="🥇",
        description="Ranked #1 on the global leaderboard",
        position="1",
    ),
    LeaderboardBadgeInfo(
        id=LeaderboardBadge.SILVER_EXPLORER,
        name="Silver Explorer",
        emoji="🥈",
        description="Ranked #2 on the global leaderboard",
        position="2",
    ),
    LeaderboardBadgeInfo(
        id=LeaderboardBadge.BRONZE_VOYAGER,
        name="Bronze Voyager",
        emoji="🥉",
        description="Ranked #3 on the global leaderboard",
        position="3",
    ),
    LeaderboardBadgeInfo(
        id=LeaderboardBadge.ELITE_TRAVELER,
        name="Elite Traveler",
        emoji="🏆",
        description="Ranked in the top 10 globally",
        position="4-10",
    ),
    LeaderboardBadgeInfo(
        id=LeaderboardBadge.RISING_STAR,
        name="Rising Star",
        emoji="⭐",
        description="Ranked in the top 100 globally",
        position="11-100",
    ),
]


def badge_for_rank(rank: Optional[int]) -> Optional[LeaderboardBadge]:
    if rank is None or rank < 1:
        return None
    for cutoff, badge in LEADERBOARD_BADGE_CUTOFFS:
        if rank <= cutoff:
            return badge
    return None


class LeaderboardService:
    """
    Global ranking of users by verified visits.

    Users tied on verified visits share a rank and the next rank is skipped
    (1, 2, 2, 4), so a user's rank is one more than the number of users with
    strictly more verified visits. Users without a verified visit are unranked.
    """

    def __init__(self, db: Session):
        self.db = db

    def get_leaderboard(
        self, limit: int = 100, user_id: Optional[int] = None
    ) -> LeaderboardResponse:
        limit = max(1, min(limit, settings.LEADERBOARD_MAX_LIMIT))
        leaders = crud_visit.verified_leaders(self.db, limit=limit)

        entries: List[LeaderboardEntry] = []
        previous_count = None
        rank = 0
        for position, (leader_id, verified_visits) in enumerate(leaders, start=1):
            if verified_visits != previous_count:
                rank = position
                previous_count = verified_visits
            entries.append(
                LeaderboardEntry(
                    rank=rank,
                    user_id=leader_id,
                    verified_visits=verified_visits,
                    badge=badge_for_rank(rank),
                )
            )

        current_user = self.get_user_stats(user_id) if user_id is not None else None
        return LeaderboardResponse(
            leaderboard=entries,
            current_user=current_user,
            total_participants=crud_visit.count_verified_participants(self.db),
        )

    def get_user_stats(self, user_id: int) -> UserLeaderboardStats:
        total_visits = crud_visit.count_by_user(self.db, user_id=user_id)
        verified_visits = crud_visit.count_verified_by_user(self.db, user_id=user_id)
        if verified_visits == 0:
            return UserLeaderboardStats(total_visits=total_visits)

        rank = 1 + crud_visit.count_users_ahead(self.db, verified_visits=verified_visits)
        logger.debug(f"User {user_id} ranks {rank} with {verified_visits} verified visits")
        return UserLeaderboardStats(
            rank=rank,
            verified_visits=verified_visits,
            total_visits=total_visits,
            badge=badge_for_rank(rank),
        )

    def get_user_badge(self, user_id: int) -> Optional[LeaderboardBadge]:
        return self.get_user_stats(user_id).badge

    def get_top_users(self, limit: int = 10) -> List[LeaderboardEntry]:
        return self.get_leaderboard(limit).leaderboard
