from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AttractionBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    city_id: int
    category: Optional[str] = None
    description: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    thumbnail_url: Optional[str] = None


class AttractionCreate(AttractionBase):
    pass


class AttractionResponse(AttractionBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    created_at: Optional[datetime] = None
