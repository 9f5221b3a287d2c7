from typing import List, Optional

from pydantic import BaseModel

from wandr.core.constants import LeaderboardBadge


class LeaderboardEntry(BaseModel):
    rank: int
    user_id: int
    verified_visits: int
    badge: Optional[LeaderboardBadge] = None


class UserLeaderboardStats(BaseModel):
    # None until the user has a verified visit
    rank: Optional[int] = None
    verified_visits: int = 0
    total_visits: int = 0
    badge: Optional[LeaderboardBadge] = None
    is_eligible: bool = True


class LeaderboardResponse(BaseModel):
    leaderboard: List[LeaderboardEntry]
    current_user: Optional[UserLeaderboardStats] = None
    total_participants: int = 0


class TopUsers(BaseModel):
    leaderboard: List[LeaderboardEntry]


class LeaderboardBadgeInfo(BaseModel):
    id: LeaderboardBadge
    name: str
    emoji: str
    description: str
    position: str


class LeaderboardBadgeCatalogue(BaseModel):
    badges: List[LeaderboardBadgeInfo]
