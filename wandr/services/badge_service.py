import logging
from collections import defaultdict
from typing import Dict, List, Optional, Tuple

from sqlalchemy.orm import Session

from wandr.core.constants import BadgeTier, LocationType
from wandr.crud.badge import crud_user_badge
from wandr.models.location import City, Continent, Country
from wandr.schemas.badge import (
    AllBadgeProgress,
    BadgeCollection,
    BadgeInfo,
    BadgeProgress,
    BadgeSummary,
    BadgeTimeline,
)
from wandr.schemas.location import LocationNode
from wandr.services.badge_info import to_badge_infos
from wandr.services.location_index import (
    LocationHierarchyIndex,
    city_node,
    continent_node,
    country_node,
)
from wandr.services.progress import compute_progress
from wandr.services.visit_aggregator import VisitAggregator

logger = logging.getLogger(__name__)

_LEVEL_MODELS = {
    LocationType.CITY: (City, city_node),
    LocationType.COUNTRY: (Country, country_node),
    LocationType.CONTINENT: (Continent, continent_node),
}


class BadgeService:
    """Read side of badges: held badges, per-location progress and summaries."""

    def __init__(self, db: Session):
        self.db = db
        self.index = LocationHierarchyIndex(db)
        self.aggregator = VisitAggregator(db)

    def get_user_badges(
        self,
        user_id: int,
        location_type: Optional[LocationType] = None,
        tier: Optional[BadgeTier] = None,
    ) -> List[BadgeInfo]:
        user_badges = crud_user_badge.get_by_user(
            self.db, user_id=user_id, location_type=location_type, tier=tier
        )
        return to_badge_infos(self.db, user_badges)

    def get_collection(
        self,
        user_id: int,
        location_type: Optional[LocationType] = None,
        tier: Optional[BadgeTier] = None,
    ) -> BadgeCollection:
        return BadgeCollection(
            badges=self.get_user_badges(user_id, location_type, tier),
            summary=self.get_summary(user_id),
        )

    def get_location_progress(
        self, user_id: int, location_type: LocationType, location_id: int
    ) -> BadgeProgress:
        node = self.index.get_node(location_type, location_id)
        visited = self.aggregator.count_visited(user_id, node)
        user_badges = crud_user_badge.get_by_user_and_location(
            self.db,
            user_id=user_id,
            location_type=location_type,
            location_id=location_id,
        )
        return self._build_progress(node, visited, to_badge_infos(self.db, user_badges))

    def get_progress(self, user_id: int) -> AllBadgeProgress:
        """Progress for every city, country and continent the user has visited."""
        earned = self._earned_by_location(user_id)

        levels: Dict[LocationType, List[BadgeProgress]] = {}
        for location_type, (model, to_node) in _LEVEL_MODELS.items():
            counts = self.aggregator.visited_counts(user_id, location_type)
            rows = (
                self.db.query(model).filter(model.id.in_(list(counts))).all()
                if counts
                else []
            )
            items = [
                self._build_progress(
                    to_node(row),
                    counts[row.id],
                    earned.get((location_type, row.id), []),
                )
                for row in rows
            ]
            items.sort(key=lambda p: (-p.progress_percent, p.location_name))
            levels[location_type] = items

        return AllBadgeProgress(
            continents=levels[LocationType.CONTINENT],
            countries=levels[LocationType.COUNTRY],
            cities=levels[LocationType.CITY],
        )

    def get_timeline(self, user_id: int, limit: int = 20) -> BadgeTimeline:
        user_badges = crud_user_badge.get_by_user(self.db, user_id=user_id, limit=limit)
        return BadgeTimeline(
            items=to_badge_infos(self.db, user_badges),
            total=crud_user_badge.count_by_user(self.db, user_id=user_id),
        )

    def get_summary(self, user_id: int) -> BadgeSummary:
        recent = crud_user_badge.get_by_user(self.db, user_id=user_id, limit=1)
        return BadgeSummary(
            total_badges=crud_user_badge.count_by_user(self.db, user_id=user_id),
            badges_by_tier=crud_user_badge.count_by_tier(self.db, user_id=user_id),
            badges_by_type=crud_user_badge.count_by_type(self.db, user_id=user_id),
            recent_badge=to_badge_infos(self.db, recent)[0] if recent else None,
        )

    def _earned_by_location(
        self, user_id: int
    ) -> Dict[Tuple[LocationType, int], List[BadgeInfo]]:
        user_badges = crud_user_badge.get_by_user(self.db, user_id=user_id)
        earned: Dict[Tuple[LocationType, int], List[BadgeInfo]] = defaultdict(list)
        # Oldest first within a location
        for info in reversed(to_badge_infos(self.db, user_badges)):
            earned[(info.location_type, info.location_id)].append(info)
        return earned

    @staticmethod
    def _build_progress(
        node: LocationNode, visited: int, earned_badges: List[BadgeInfo]
    ) -> BadgeProgress:
        progress = compute_progress(visited, node.total_attractions)
        return BadgeProgress(
            location_id=node.id,
            location_name=node.name,
            location_type=node.type,
            total_attractions=progress.total,
            visited_attractions=progress.visited,
            progress_percent=progress.percent,
            current_tier=progress.current_tier,
            next_tier=progress.next_tier,
            progress_to_next_tier=progress.progress_to_next_tier,
            earned_badges=earned_badges,
        )
