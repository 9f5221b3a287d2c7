from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wandr.core.constants import BadgeTier, LocationType
from wandr.core.database import Base


def _enum_column(enum_cls, name: str) -> Enum:
    return Enum(
        enum_cls,
        name=name,
        native_enum=False,
        length=16,
        values_callable=lambda members: [m.value for m in members],
    )


class Badge(Base):
    """One collectible badge: a tier at a specific location node."""

    __tablename__ = "badges"

    id = Column(Integer, primary_key=True, index=True)
    location_type = Column(_enum_column(LocationType, "location_type"), nullable=False)
    location_id = Column(Integer, nullable=False)
    location_name = Column(String(100), nullable=False)
    tier = Column(_enum_column(BadgeTier, "badge_tier"), nullable=False)
    icon_url = Column(String(500), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user_badges = relationship("UserBadge", back_populates="badge")

    __table_args__ = (
        UniqueConstraint(
            "location_type", "location_id", "tier", name="unique_location_tier_badge"
        ),
    )

    def __repr__(self):
        return (
            f"<Badge(id={self.id}, {self.location_type.value}={self.location_id}, "
            f"tier={self.tier.value})>"
        )


class UserBadge(Base):
    __tablename__ = "user_badges"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False)
    badge_id = Column(
        Integer, ForeignKey("badges.id", ondelete="CASCADE"), nullable=False
    )
    earned_at = Column(DateTime(timezone=True), nullable=False)

    # Progress snapshot at the moment of award
    attractions_visited = Column(Integer, nullable=False, default=0)
    total_attractions = Column(Integer, nullable=False, default=0)
    progress_percent = Column(Integer, nullable=False, default=0)

    badge = relationship("Badge", back_populates="user_badges")

    # Awards are permanent; this key is the dedup for concurrent awarding
    __table_args__ = (
        UniqueConstraint("user_id", "badge_id", name="unique_user_badge"),
        Index("idx_user_badges_user_earned", "user_id", "earned_at"),
    )

    def __repr__(self):
        return f"<UserBadge(id={self.id}, user_id={self.user_id}, badge_id={self.badge_id})>"
