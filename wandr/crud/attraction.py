import logging
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from wandr.crud.base import CRUDBase
from wandr.models.attraction import Attraction
from wandr.models.location import City, Country
from wandr.schemas.attraction import AttractionCreate

logger = logging.getLogger(__name__)


class CRUDAttraction(CRUDBase[Attraction, AttractionCreate]):
    def get_with_hierarchy(self, db: Session, *, id: int) -> Optional[Attraction]:
        """Attraction with its city, country and continent loaded."""
        return (
            db.query(Attraction)
            .options(
                joinedload(Attraction.city)
                .joinedload(City.country)
                .joinedload(Country.continent)
            )
            .filter(Attraction.id == id)
            .first()
        )

    def get_by_city(
        self, db: Session, *, city_id: int, skip: int = 0, limit: int = 10000
    ) -> List[Attraction]:
        return (
            db.query(Attraction)
            .filter(Attraction.city_id == city_id)
            .order_by(Attraction.name)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create(self, db: Session, *, obj_in: AttractionCreate) -> Attraction:
        """Create an attraction and bump the counts of every ancestor."""
        city = (
            db.query(City)
            .options(joinedload(City.country).joinedload(Country.continent))
            .filter(City.id == obj_in.city_id)
            .first()
        )
        if city is None:
            raise ValueError(f"City with id {obj_in.city_id} does not exist")

        attraction = Attraction(**obj_in.model_dump())
        db.add(attraction)
        self._shift_counts(city, 1)
        db.commit()
        db.refresh(attraction)
        return attraction

    def remove(self, db: Session, *, id: int) -> Optional[Attraction]:
        attraction = self.get_with_hierarchy(db, id=id)
        if attraction is None:
            return None
        self._shift_counts(attraction.city, -1)
        db.delete(attraction)
        db.commit()
        return attraction

    @staticmethod
    def _shift_counts(city: City, delta: int) -> None:
        city.attraction_count = (city.attraction_count or 0) + delta
        city.country.attraction_count = (city.country.attraction_count or 0) + delta
        continent = city.country.continent
        continent.attraction_count = (continent.attraction_count or 0) + delta


crud_attraction = CRUDAttraction(Attraction)
