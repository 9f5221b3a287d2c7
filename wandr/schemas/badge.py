from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from wandr.core.constants import BadgeTier, LocationType


class BadgeInfo(BaseModel):
    """An earned badge as shown to its owner."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    tier: BadgeTier
    location_id: int
    location_name: str
    location_type: LocationType
    icon_url: Optional[str] = None
    location_image_url: Optional[str] = None
    earned_at: datetime
    attractions_visited: int
    total_attractions: int
    progress_percent: int


class NewBadgeResult(BaseModel):
    badge: BadgeInfo
    is_new: bool = True


class BadgeProgress(BaseModel):
    location_id: int
    location_name: str
    location_type: LocationType
    total_attractions: int
    visited_attractions: int
    progress_percent: int
    current_tier: BadgeTier
    next_tier: Optional[BadgeTier] = None
    progress_to_next_tier: int
    earned_badges: List[BadgeInfo] = []


class AllBadgeProgress(BaseModel):
    continents: List[BadgeProgress] = []
    countries: List[BadgeProgress] = []
    cities: List[BadgeProgress] = []


class BadgeSummary(BaseModel):
    total_badges: int
    badges_by_tier: Dict[BadgeTier, int]
    badges_by_type: Dict[LocationType, int]
    recent_badge: Optional[BadgeInfo] = None


class BadgeCollection(BaseModel):
    badges: List[BadgeInfo]
    summary: BadgeSummary


class BadgeTimeline(BaseModel):
    items: List[BadgeInfo]
    total: int
