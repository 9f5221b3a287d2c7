import logging
from datetime import datetime, timezone
from typing import Dict, List, Optional, Set

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from wandr.core.constants import AWARDABLE_TIERS, BadgeTier, LocationType
from wandr.crud.base import CRUDBase, insert_ignoring_conflicts
from wandr.models.badge import Badge, UserBadge
from wandr.schemas.location import LocationNode

logger = logging.getLogger(__name__)


class _NoSchema(BaseModel):
    pass


class CRUDBadge(CRUDBase[Badge, _NoSchema]):
    def get_for_location(
        self,
        db: Session,
        *,
        location_type: LocationType,
        location_id: int,
        tier: BadgeTier,
    ) -> Optional[Badge]:
        return (
            db.query(Badge)
            .filter(
                Badge.location_type == location_type,
                Badge.location_id == location_id,
                Badge.tier == tier,
            )
            .first()
        )

    def get_or_create(self, db: Session, *, node: LocationNode, tier: BadgeTier) -> Badge:
        """Catalogue row for a tier at a node, created on first use. Does not commit."""
        created = insert_ignoring_conflicts(
            db,
            Badge,
            {
                "location_type": node.type,
                "location_id": node.id,
                "location_name": node.name,
                "tier": tier,
            },
        )
        if created:
            logger.debug(f"Added {tier.value} badge for {node.type.value} {node.id}")
        return self.get_for_location(
            db, location_type=node.type, location_id=node.id, tier=tier
        )


class CRUDUserBadge(CRUDBase[UserBadge, _NoSchema]):
    def _user_query(self, db: Session, user_id: int):
        return (
            db.query(UserBadge)
            .join(Badge, UserBadge.badge_id == Badge.id)
            .options(joinedload(UserBadge.badge))
            .filter(UserBadge.user_id == user_id)
        )

    def issued_tiers(
        self,
        db: Session,
        *,
        user_id: int,
        location_type: LocationType,
        location_id: int,
    ) -> Set[BadgeTier]:
        rows = (
            db.query(Badge.tier)
            .join(UserBadge, UserBadge.badge_id == Badge.id)
            .filter(
                UserBadge.user_id == user_id,
                Badge.location_type == location_type,
                Badge.location_id == location_id,
            )
            .all()
        )
        return {tier for (tier,) in rows}

    def award(
        self,
        db: Session,
        *,
        user_id: int,
        badge: Badge,
        attractions_visited: int,
        total_attractions: int,
        progress_percent: int,
    ) -> Optional[UserBadge]:
        """
        Give a badge to a user unless they already hold it.

        Returns the new row, or None when the badge was already held (including
        when a concurrent request awarded it first). Does not commit.
        """
        inserted = insert_ignoring_conflicts(
            db,
            UserBadge,
            {
                "user_id": user_id,
                "badge_id": badge.id,
                "earned_at": datetime.now(timezone.utc),
                "attractions_visited": attractions_visited,
                "total_attractions": total_attractions,
                "progress_percent": progress_percent,
            },
        )
        if not inserted:
            return None
        return (
            self._user_query(db, user_id).filter(UserBadge.badge_id == badge.id).first()
        )

    def get_by_user(
        self,
        db: Session,
        *,
        user_id: int,
        location_type: Optional[LocationType] = None,
        tier: Optional[BadgeTier] = None,
        limit: Optional[int] = None,
    ) -> List[UserBadge]:
        """Badges held by a user, newest first."""
        query = self._user_query(db, user_id)
        if location_type is not None:
            query = query.filter(Badge.location_type == location_type)
        if tier is not None:
            query = query.filter(Badge.tier == tier)
        query = query.order_by(UserBadge.earned_at.desc(), UserBadge.id.desc())
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_by_user_and_location(
        self,
        db: Session,
        *,
        user_id: int,
        location_type: LocationType,
        location_id: int,
    ) -> List[UserBadge]:
        return (
            self._user_query(db, user_id)
            .filter(
                Badge.location_type == location_type,
                Badge.location_id == location_id,
            )
            .order_by(UserBadge.earned_at.asc(), UserBadge.id.asc())
            .all()
        )

    def count_by_user(self, db: Session, *, user_id: int) -> int:
        return db.query(UserBadge).filter(UserBadge.user_id == user_id).count()

    def count_by_tier(self, db: Session, *, user_id: int) -> Dict[BadgeTier, int]:
        """Held badge counts for every awardable tier, zero-filled."""
        counts = {tier: 0 for tier in AWARDABLE_TIERS}
        rows = (
            db.query(Badge.tier, func.count(UserBadge.id))
            .join(UserBadge, UserBadge.badge_id == Badge.id)
            .filter(UserBadge.user_id == user_id)
            .group_by(Badge.tier)
            .all()
        )
        for tier, count in rows:
            counts[tier] = count
        return counts

    def count_by_type(self, db: Session, *, user_id: int) -> Dict[LocationType, int]:
        counts = {location_type: 0 for location_type in LocationType}
        rows = (
            db.query(Badge.location_type, func.count(UserBadge.id))
            .join(UserBadge, UserBadge.badge_id == Badge.id)
            .filter(UserBadge.user_id == user_id)
            .group_by(Badge.location_type)
            .all()
        )
        for location_type, count in rows:
            counts[location_type] = count
        return counts


crud_badge = CRUDBadge(Badge)
crud_user_badge = CRUDUserBadge(UserBadge)
