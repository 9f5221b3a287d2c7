import logging
from typing import Dict, Optional

from sqlalchemy.orm import Session

from wandr.core.constants import LocationType
from wandr.core.exceptions import AttractionNotFound, LocationNotFound
from wandr.crud.attraction import crud_attraction
from wandr.crud.location import crud_city, crud_continent, crud_country
from wandr.models.attraction import Attraction
from wandr.models.location import City, Continent, Country
from wandr.schemas.location import LocationAncestors, LocationNode

logger = logging.getLogger(__name__)


def city_node(city: City) -> LocationNode:
    return LocationNode(
        id=city.id,
        type=LocationType.CITY,
        name=city.name,
        parent_id=city.country_id,
        total_attractions=city.attraction_count or 0,
        image_url=city.image_url,
    )


def country_node(country: Country) -> LocationNode:
    return LocationNode(
        id=country.id,
        type=LocationType.COUNTRY,
        name=country.name,
        parent_id=country.continent_id,
        total_attractions=country.attraction_count or 0,
        image_url=country.flag_url or country.image_url,
    )


def continent_node(continent: Continent) -> LocationNode:
    return LocationNode(
        id=continent.id,
        type=LocationType.CONTINENT,
        name=continent.name,
        parent_id=None,
        total_attractions=continent.attraction_count or 0,
        image_url=continent.image_url,
    )


_NODE_LOADERS = {
    LocationType.CITY: (crud_city, city_node),
    LocationType.COUNTRY: (crud_country, country_node),
    LocationType.CONTINENT: (crud_continent, continent_node),
}


class LocationHierarchyIndex:
    """
    Read access to the continent > country > city > attraction tree.

    Lookups are cached for the lifetime of the instance, which is one request.
    """

    def __init__(self, db: Session):
        self.db = db
        self._attractions: Dict[int, Optional[Attraction]] = {}

    def get_attraction(self, attraction_id: int) -> Optional[Attraction]:
        if attraction_id not in self._attractions:
            self._attractions[attraction_id] = crud_attraction.get_with_hierarchy(
                self.db, id=attraction_id
            )
        return self._attractions[attraction_id]

    def get_ancestors(self, attraction_id: int) -> LocationAncestors:
        attraction = self.get_attraction(attraction_id)
        if attraction is None:
            raise AttractionNotFound(attraction_id)

        city = attraction.city
        country = city.country
        return LocationAncestors(
            attraction_id=attraction.id,
            city=city_node(city),
            country=country_node(country),
            continent=continent_node(country.continent),
        )

    def get_node(self, location_type: LocationType, location_id: int) -> LocationNode:
        crud, to_node = _NODE_LOADERS[location_type]
        row = crud.get(self.db, id=location_id)
        if row is None:
            raise LocationNotFound(location_type.value, location_id)
        return to_node(row)
