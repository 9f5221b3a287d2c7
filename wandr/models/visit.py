from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wandr.core.database import Base


class Visit(Base):
    __tablename__ = "visits"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, nullable=False, index=True)
    attraction_id = Column(
        Integer,
        ForeignKey("attractions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    visit_date = Column(DateTime(timezone=True), nullable=False)
    verified_at = Column(DateTime(timezone=True), nullable=False)
    # True when confirmed by a camera scan rather than marked by hand
    is_verified = Column(Boolean, nullable=False, default=False)
    photo_url = Column(String(500), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    attraction = relationship("Attraction", back_populates="visits")

    # One visit per user per attraction
    __table_args__ = (
        UniqueConstraint("user_id", "attraction_id", name="unique_user_attraction_visit"),
    )

    def __repr__(self):
        return (
            f"<Visit(id={self.id}, user_id={self.user_id}, "
            f"attraction_id={self.attraction_id})>"
        )
