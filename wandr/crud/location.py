import logging
from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from wandr.crud.base import CRUDBase
from wandr.models.attraction import Attraction
from wandr.models.location import City, Continent, Country
from wandr.schemas.location import CityCreate, ContinentCreate, CountryCreate

logger = logging.getLogger(__name__)


class CRUDContinent(CRUDBase[Continent, ContinentCreate]):
    def get_by_name(self, db: Session, *, name: str) -> Optional[Continent]:
        return (
            db.query(Continent)
            .filter(func.lower(Continent.name) == name.strip().lower())
            .first()
        )

    def get_all(self, db: Session) -> List[Continent]:
        return db.query(Continent).order_by(Continent.name).all()


class CRUDCountry(CRUDBase[Country, CountryCreate]):
    def get_by_name(self, db: Session, *, name: str) -> Optional[Country]:
        return (
            db.query(Country)
            .filter(func.lower(Country.name) == name.strip().lower())
            .first()
        )

    def get_by_continent(self, db: Session, *, continent_id: int) -> List[Country]:
        return (
            db.query(Country)
            .filter(Country.continent_id == continent_id)
            .order_by(Country.name)
            .all()
        )


class CRUDCity(CRUDBase[City, CityCreate]):
    def get_by_name(self, db: Session, *, name: str) -> Optional[City]:
        return (
            db.query(City).filter(func.lower(City.name) == name.strip().lower()).first()
        )

    def get_by_country(self, db: Session, *, country_id: int) -> List[City]:
        return (
            db.query(City)
            .filter(City.country_id == country_id)
            .order_by(City.name)
            .all()
        )


def recount_attractions(db: Session) -> None:
    """Rebuild every denormalized attraction_count from the attractions table."""
    city_counts = dict(
        db.query(Attraction.city_id, func.count(Attraction.id))
        .group_by(Attraction.city_id)
        .all()
    )
    country_counts = dict(
        db.query(City.country_id, func.count(Attraction.id))
        .join(Attraction, Attraction.city_id == City.id)
        .group_by(City.country_id)
        .all()
    )
    continent_counts = dict(
        db.query(Country.continent_id, func.count(Attraction.id))
        .join(City, City.country_id == Country.id)
        .join(Attraction, Attraction.city_id == City.id)
        .group_by(Country.continent_id)
        .all()
    )

    for city in db.query(City).all():
        city.attraction_count = city_counts.get(city.id, 0)
    for country in db.query(Country).all():
        country.attraction_count = country_counts.get(country.id, 0)
    for continent in db.query(Continent).all():
        continent.attraction_count = continent_counts.get(continent.id, 0)

    db.commit()
    logger.info(
        f"Recounted attractions for {len(city_counts)} cities, "
        f"{len(country_counts)} countries, {len(continent_counts)} continents"
    )


crud_continent = CRUDContinent(Continent)
crud_country = CRUDCountry(Country)
crud_city = CRUDCity(City)
