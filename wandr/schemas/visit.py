from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from wandr.schemas.badge import NewBadgeResult


class VisitCreate(BaseModel):
    attraction_id: int
    photo_url: Optional[str] = Field(default=None, max_length=500)
    notes: Optional[str] = Field(default=None, max_length=500)
    visit_date: Optional[datetime] = None
    is_verified: bool = False


class VisitAttraction(BaseModel):
    id: int
    name: str
    city_id: int
    city_name: str
    country_name: str
    continent_name: str
    thumbnail_url: Optional[str] = None


class VisitResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    attraction_id: int
    visit_date: datetime
    verified_at: datetime
    is_verified: bool = False
    photo_url: Optional[str] = None
    notes: Optional[str] = None
    attraction: Optional[VisitAttraction] = None


class MarkVisitedResponse(BaseModel):
    visit: VisitResponse
    new_badges: List[NewBadgeResult] = []
    already_visited: bool = False


class VisitCheck(BaseModel):
    is_visited: bool


class UserStats(BaseModel):
    total_visits: int = 0
    verified_visits: int = 0
    cities_visited: int = 0
    countries_visited: int = 0
    continents_visited: int = 0
    cities: List[str] = []
    countries: List[str] = []
    continents: List[str] = []


class LocationStatsAttraction(BaseModel):
    id: int
    name: str
    is_visited: bool


class LocationStats(BaseModel):
    total_attractions: int = 0
    visited_attractions: int = 0
    progress: int = 0
    attractions: Optional[List[LocationStatsAttraction]] = None
