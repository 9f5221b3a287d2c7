from typing import Dict

from sqlalchemy.orm import Session

from wandr.core.constants import LocationType
from wandr.crud.visit import crud_visit
from wandr.schemas.location import LocationNode


class VisitAggregator:
    """Counts of distinct visited attractions, read from the visits table."""

    def __init__(self, db: Session):
        self.db = db

    def count_visited(self, user_id: int, node: LocationNode) -> int:
        return crud_visit.count_visited(
            self.db, user_id=user_id, location_type=node.type, location_id=node.id
        )

    def visited_counts(self, user_id: int, location_type: LocationType) -> Dict[int, int]:
        """Visited counts for each node of one level the user has any visit under."""
        return crud_visit.visited_counts(
            self.db, user_id=user_id, location_type=location_type
        )
