from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from wandr.core.constants import LOCATION_LEVELS, LocationType


class ContinentBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    image_url: Optional[str] = None


class ContinentCreate(ContinentBase):
    pass


class ContinentResponse(ContinentBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    attraction_count: int = 0
    created_at: Optional[datetime] = None


class CountryBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    code: Optional[str] = Field(default=None, max_length=3)
    continent_id: int
    flag_url: Optional[str] = None
    image_url: Optional[str] = None


class CountryCreate(CountryBase):
    pass


class CountryResponse(CountryBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    attraction_count: int = 0
    created_at: Optional[datetime] = None


class CityBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    country_id: int
    image_url: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class CityCreate(CityBase):
    pass


class CityResponse(CityBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    attraction_count: int = 0
    created_at: Optional[datetime] = None


class LocationNode(BaseModel):
    """A continent, country or city together with its attraction total."""

    model_config = ConfigDict(frozen=True)

    id: int
    type: LocationType
    name: str
    parent_id: Optional[int] = None
    total_attractions: int = 0
    image_url: Optional[str] = None


class LocationAncestors(BaseModel):
    model_config = ConfigDict(frozen=True)

    attraction_id: int
    city: LocationNode
    country: LocationNode
    continent: LocationNode

    def nodes(self):
        """Ancestors from most to least specific."""
        return [getattr(self, level.value) for level in LOCATION_LEVELS]
