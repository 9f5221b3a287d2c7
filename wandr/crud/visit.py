import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Set, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Query, Session, joinedload

from wandr.core.constants import LocationType
from wandr.crud.base import CRUDBase, insert_ignoring_conflicts
from wandr.models.attraction import Attraction
from wandr.models.location import City, Continent, Country
from wandr.models.visit import Visit
from wandr.schemas.visit import VisitCreate

logger = logging.getLogger(__name__)


class CRUDVisit(CRUDBase[Visit, VisitCreate]):
    def get_by_user_and_attraction(
        self, db: Session, *, user_id: int, attraction_id: int
    ) -> Optional[Visit]:
        return (
            db.query(Visit)
            .filter(Visit.user_id == user_id, Visit.attraction_id == attraction_id)
            .first()
        )

    def create_if_absent(
        self, db: Session, *, user_id: int, obj_in: VisitCreate
    ) -> Tuple[Visit, bool]:
        """
        Record a visit unless one already exists for this user and attraction.

        Does not commit. Returns the stored visit and whether this call created it.
        """
        now = datetime.now(timezone.utc)
        created = insert_ignoring_conflicts(
            db,
            Visit,
            {
                "user_id": user_id,
                "attraction_id": obj_in.attraction_id,
                "visit_date": obj_in.visit_date or now,
                "verified_at": now,
                "is_verified": obj_in.is_verified,
                "photo_url": obj_in.photo_url,
                "notes": obj_in.notes,
            },
        )
        visit = self.get_by_user_and_attraction(
            db, user_id=user_id, attraction_id=obj_in.attraction_id
        )
        return visit, created

    def get_by_user(
        self,
        db: Session,
        *,
        user_id: int,
        skip: int = 0,
        limit: int = 20,
        sort_by: str = "recent",
        sort_order: str = "desc",
    ) -> List[Visit]:
        query = (
            db.query(Visit)
            .join(Attraction, Visit.attraction_id == Attraction.id)
            .options(
                joinedload(Visit.attraction)
                .joinedload(Attraction.city)
                .joinedload(City.country)
                .joinedload(Country.continent)
            )
            .filter(Visit.user_id == user_id)
        )

        sort_column = Attraction.name if sort_by == "name" else Visit.visit_date
        if sort_order == "asc":
            query = query.order_by(sort_column.asc(), Visit.id.asc())
        else:
            query = query.order_by(sort_column.desc(), Visit.id.desc())

        return query.offset(skip).limit(limit).all()

    def count_by_user(self, db: Session, *, user_id: int) -> int:
        return db.query(Visit).filter(Visit.user_id == user_id).count()

    def count_verified_by_user(self, db: Session, *, user_id: int) -> int:
        return (
            db.query(Visit)
            .filter(Visit.user_id == user_id, Visit.is_verified.is_(True))
            .count()
        )

    def remove_for_user(
        self, db: Session, *, user_id: int, attraction_id: int
    ) -> Optional[Visit]:
        visit = self.get_by_user_and_attraction(
            db, user_id=user_id, attraction_id=attraction_id
        )
        if visit:
            db.delete(visit)
            db.commit()
        return visit

    def count_visited(
        self,
        db: Session,
        *,
        user_id: int,
        location_type: LocationType,
        location_id: int,
    ) -> int:
        """Distinct attractions under one location node visited by the user."""
        query = _scoped_to_level(
            db.query(func.count(func.distinct(Visit.attraction_id))), location_type
        )
        node_column = _LEVEL_COLUMNS[location_type]
        return (
            query.filter(Visit.user_id == user_id, node_column == location_id).scalar()
            or 0
        )

    def visited_counts(
        self, db: Session, *, user_id: int, location_type: LocationType
    ) -> Dict[int, int]:
        """Visited attraction counts keyed by node id, for every node at one level."""
        node_column = _LEVEL_COLUMNS[location_type]
        query = _scoped_to_level(
            db.query(node_column, func.count(func.distinct(Visit.attraction_id))),
            location_type,
        )
        rows = query.filter(Visit.user_id == user_id).group_by(node_column).all()
        return {node_id: count for node_id, count in rows}

    def visited_location_names(
        self, db: Session, *, user_id: int, location_type: LocationType
    ) -> List[str]:
        name_column = {
            LocationType.CITY: City.name,
            LocationType.COUNTRY: Country.name,
            LocationType.CONTINENT: Continent.name,
        }[location_type]
        rows = (
            db.query(name_column)
            .select_from(Visit)
            .join(Attraction, Visit.attraction_id == Attraction.id)
            .join(City, Attraction.city_id == City.id)
            .join(Country, City.country_id == Country.id)
            .join(Continent, Country.continent_id == Continent.id)
            .filter(Visit.user_id == user_id)
            .distinct()
            .order_by(name_column)
            .all()
        )
        return [name for (name,) in rows]

    def visited_attraction_ids(
        self, db: Session, *, user_id: int, attraction_ids: List[int]
    ) -> Set[int]:
        if not attraction_ids:
            return set()
        rows = (
            db.query(Visit.attraction_id)
            .filter(Visit.user_id == user_id, Visit.attraction_id.in_(attraction_ids))
            .all()
        )
        return {attraction_id for (attraction_id,) in rows}

    def verified_leaders(self, db: Session, *, limit: int = 100) -> List[Tuple[int, int]]:
        """(user_id, verified visit count) pairs, most verified visits first."""
        verified = func.count(Visit.id)
        rows = (
            db.query(Visit.user_id, verified)
            .filter(Visit.is_verified.is_(True))
            .group_by(Visit.user_id)
            .order_by(verified.desc(), Visit.user_id.asc())
            .limit(limit)
            .all()
        )
        return [(user_id, count) for user_id, count in rows]

    def count_verified_participants(self, db: Session) -> int:
        return (
            db.query(func.count(func.distinct(Visit.user_id)))
            .filter(Visit.is_verified.is_(True))
            .scalar()
            or 0
        )

    def count_users_ahead(self, db: Session, *, verified_visits: int) -> int:
        """Users holding strictly more verified visits than the given count."""
        ahead = (
            db.query(Visit.user_id)
            .filter(Visit.is_verified.is_(True))
            .group_by(Visit.user_id)
            .having(func.count(Visit.id) > verified_visits)
            .subquery()
        )
        return db.query(func.count()).select_from(ahead).scalar() or 0


# Column holding the node id for each level once a visit is joined up to it
_LEVEL_COLUMNS = {
    LocationType.CITY: Attraction.city_id,
    LocationType.COUNTRY: City.country_id,
    LocationType.CONTINENT: Country.continent_id,
}


def _scoped_to_level(query: Query, location_type: LocationType) -> Query:
    query = query.select_from(Visit).join(
        Attraction, Visit.attraction_id == Attraction.id
    )
    if location_type in (LocationType.COUNTRY, LocationType.CONTINENT):
        query = query.join(City, Attraction.city_id == City.id)
    if location_type == LocationType.CONTINENT:
        query = query.join(Country, City.country_id == Country.id)
    return query


crud_visit = CRUDVisit(Visit)
