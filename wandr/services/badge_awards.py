import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from wandr.core.constants import BadgeTier
from wandr.crud.badge import crud_badge, crud_user_badge
from wandr.schemas.badge import NewBadgeResult
from wandr.schemas.location import LocationNode
from wandr.services.badge_info import to_badge_info
from wandr.services.location_index import LocationHierarchyIndex
from wandr.services.progress import compute_progress, tiers_crossed
from wandr.services.visit_aggregator import VisitAggregator

logger = logging.getLogger(__name__)


class BadgeAwardDetector:
    """
    Issues the badges a new visit has earned.

    For the city, country and continent above the visited attraction (in that
    order) progress is recomputed and every tier above the highest one already
    held is awarded, lowest first. Awards are insert-or-ignore on the
    (user, badge) key, so replaying a visit or racing another request for the
    same tier never produces a second row. Nothing is committed here; the
    caller owns the transaction.
    """

    def __init__(self, db: Session, index: Optional[LocationHierarchyIndex] = None):
        self.db = db
        self.index = index or LocationHierarchyIndex(db)
        self.aggregator = VisitAggregator(db)

    def on_visit_recorded(self, user_id: int, attraction_id: int) -> List[NewBadgeResult]:
        ancestors = self.index.get_ancestors(attraction_id)

        new_badges: List[NewBadgeResult] = []
        for node in ancestors.nodes():
            new_badges.extend(self._award_for_node(user_id, node))
        return new_badges

    def _award_for_node(self, user_id: int, node: LocationNode) -> List[NewBadgeResult]:
        visited = self.aggregator.count_visited(user_id, node)
        progress = compute_progress(visited, node.total_attractions)

        held = crud_user_badge.issued_tiers(
            self.db, user_id=user_id, location_type=node.type, location_id=node.id
        )
        highest_held = max(held, key=lambda tier: tier.rank, default=BadgeTier.NONE)

        results: List[NewBadgeResult] = []
        for tier in tiers_crossed(highest_held, progress.current_tier):
            badge = crud_badge.get_or_create(self.db, node=node, tier=tier)
            user_badge = crud_user_badge.award(
                self.db,
                user_id=user_id,
                badge=badge,
                attractions_visited=progress.visited,
                total_attractions=progress.total,
                progress_percent=progress.percent,
            )
            if user_badge is None:
                logger.debug(
                    f"User {user_id} already holds {tier.value} for "
                    f"{node.type.value} {node.id}"
                )
                continue

            logger.info(
                f"User {user_id} earned {tier.value} badge for "
                f"{node.type.value} '{node.name}' ({progress.percent}%)"
            )
            results.append(
                NewBadgeResult(badge=to_badge_info(user_badge, node.image_url))
            )
        return results
