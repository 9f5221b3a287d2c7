import logging
from typing import List, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from wandr.core.constants import LocationType
from wandr.core.exceptions import VisitNotFound
from wandr.crud.attraction import crud_attraction
from wandr.crud.base import lock_user_awards
from wandr.crud.location import crud_city, crud_continent, crud_country
from wandr.crud.visit import crud_visit
from wandr.models.visit import Visit
from wandr.schemas.visit import (
    LocationStats,
    LocationStatsAttraction,
    MarkVisitedResponse,
    UserStats,
    VisitAttraction,
    VisitCreate,
    VisitResponse,
)
from wandr.services.badge_awards import BadgeAwardDetector
from wandr.services.location_index import (
    LocationHierarchyIndex,
    city_node,
    continent_node,
    country_node,
)
from wandr.services.progress import compute_progress
from wandr.services.visit_aggregator import VisitAggregator

logger = logging.getLogger(__name__)


def to_visit_response(visit: Visit) -> VisitResponse:
    attraction = visit.attraction
    city = attraction.city
    country = city.country
    return VisitResponse(
        id=visit.id,
        user_id=visit.user_id,
        attraction_id=visit.attraction_id,
        visit_date=visit.visit_date,
        verified_at=visit.verified_at,
        is_verified=visit.is_verified,
        photo_url=visit.photo_url,
        notes=visit.notes,
        attraction=VisitAttraction(
            id=attraction.id,
            name=attraction.name,
            city_id=city.id,
            city_name=city.name,
            country_name=country.name,
            continent_name=country.continent.name,
            thumbnail_url=attraction.thumbnail_url,
        ),
    )


class VisitService:
    def __init__(self, db: Session):
        self.db = db
        self.index = LocationHierarchyIndex(db)
        self.aggregator = VisitAggregator(db)

    def record_visit(self, user_id: int, visit_in: VisitCreate) -> MarkVisitedResponse:
        """
        Mark an attraction as visited and award any badges it earns.

        The visit and its badges are committed together. Badge evaluation is
        serialized per user, so two visits recorded at once in the same city
        each see the other once the first commits. Marking an attraction the
        user already visited returns the stored visit and still re-checks its
        locations, issuing any tier that a lost race left missing.
        """
        # Raises AttractionNotFound before anything is written
        self.index.get_ancestors(visit_in.attraction_id)

        try:
            lock_user_awards(self.db, user_id)
            visit, created = crud_visit.create_if_absent(
                self.db, user_id=user_id, obj_in=visit_in
            )
            if not created:
                logger.debug(
                    f"User {user_id} already visited attraction {visit_in.attraction_id}"
                )

            detector = BadgeAwardDetector(self.db, index=self.index)
            new_badges = detector.on_visit_recorded(user_id, visit_in.attraction_id)
            self.db.commit()
        except SQLAlchemyError as e:
            logger.error(f"Failed to record visit for user {user_id}: {e}")
            self.db.rollback()
            raise

        if created:
            logger.info(
                f"User {user_id} visited attraction {visit_in.attraction_id}, "
                f"{len(new_badges)} new badge(s)"
            )
        elif new_badges:
            logger.warning(
                f"Issued {len(new_badges)} missing badge(s) to user {user_id} "
                f"on repeat visit to attraction {visit_in.attraction_id}"
            )
        self.db.refresh(visit)
        return MarkVisitedResponse(
            visit=to_visit_response(visit),
            new_badges=new_badges,
            already_visited=not created,
        )

    def remove_visit(self, user_id: int, attraction_id: int) -> None:
        """Delete a visit. Badges already earned are kept."""
        visit = crud_visit.remove_for_user(
            self.db, user_id=user_id, attraction_id=attraction_id
        )
        if visit is None:
            raise VisitNotFound(attraction_id)
        logger.info(f"User {user_id} removed visit to attraction {attraction_id}")

    def list_visits(
        self,
        user_id: int,
        page: int = 1,
        limit: int = 20,
        sort_by: str = "recent",
        sort_order: str = "desc",
    ) -> Tuple[List[VisitResponse], int]:
        visits = crud_visit.get_by_user(
            self.db,
            user_id=user_id,
            skip=(page - 1) * limit,
            limit=limit,
            sort_by=sort_by,
            sort_order=sort_order,
        )
        total = crud_visit.count_by_user(self.db, user_id=user_id)
        return [to_visit_response(v) for v in visits], total

    def is_visited(self, user_id: int, attraction_id: int) -> bool:
        return (
            crud_visit.get_by_user_and_attraction(
                self.db, user_id=user_id, attraction_id=attraction_id
            )
            is not None
        )

    def get_user_stats(self, user_id: int) -> UserStats:
        cities = crud_visit.visited_location_names(
            self.db, user_id=user_id, location_type=LocationType.CITY
        )
        countries = crud_visit.visited_location_names(
            self.db, user_id=user_id, location_type=LocationType.COUNTRY
        )
        continents = crud_visit.visited_location_names(
            self.db, user_id=user_id, location_type=LocationType.CONTINENT
        )
        return UserStats(
            total_visits=crud_visit.count_by_user(self.db, user_id=user_id),
            verified_visits=crud_visit.count_verified_by_user(self.db, user_id=user_id),
            cities_visited=len(cities),
            countries_visited=len(countries),
            continents_visited=len(continents),
            cities=cities,
            countries=countries,
            continents=continents,
        )

    def get_location_stats(
        self, user_id: int, location_type: LocationType, name: str
    ) -> LocationStats:
        """Progress for a location looked up by name, ignoring case."""
        if location_type == LocationType.CITY:
            city = crud_city.get_by_name(self.db, name=name)
            if city is None:
                return LocationStats(attractions=[])
            node = city_node(city)
        elif location_type == LocationType.COUNTRY:
            country = crud_country.get_by_name(self.db, name=name)
            if country is None:
                return LocationStats()
            node = country_node(country)
        else:
            continent = crud_continent.get_by_name(self.db, name=name)
            if continent is None:
                return LocationStats()
            node = continent_node(continent)

        visited = self.aggregator.count_visited(user_id, node)
        progress = compute_progress(visited, node.total_attractions)
        stats = LocationStats(
            total_attractions=progress.total,
            visited_attractions=progress.visited,
            progress=progress.percent,
        )

        if location_type == LocationType.CITY:
            attractions = crud_attraction.get_by_city(self.db, city_id=node.id)
            visited_ids = crud_visit.visited_attraction_ids(
                self.db, user_id=user_id, attraction_ids=[a.id for a in attractions]
            )
            stats.attractions = [
                LocationStatsAttraction(
                    id=a.id, name=a.name, is_visited=a.id in visited_ids
                )
                for a in attractions
            ]
        return stats
