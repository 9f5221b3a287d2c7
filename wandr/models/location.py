from sqlalchemy import Column, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from wandr.core.database import Base


class Continent(Base):
    __tablename__ = "continents"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, unique=True, index=True)
    image_url = Column(String(500), nullable=True)

    # Denormalized count of attractions under this continent
    attraction_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    countries = relationship(
        "Country", back_populates="continent", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Continent(id={self.id}, name='{self.name}')>"


class Country(Base):
    __tablename__ = "countries"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    code = Column(String(3), nullable=True)
    continent_id = Column(
        Integer,
        ForeignKey("continents.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    flag_url = Column(String(500), nullable=True)
    image_url = Column(String(500), nullable=True)

    attraction_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    continent = relationship("Continent", back_populates="countries")
    cities = relationship(
        "City", back_populates="country", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<Country(id={self.id}, name='{self.name}')>"


class City(Base):
    __tablename__ = "cities"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False, index=True)
    country_id = Column(
        Integer,
        ForeignKey("countries.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    image_url = Column(String(500), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)

    attraction_count = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    country = relationship("Country", back_populates="cities")
    attractions = relationship(
        "Attraction", back_populates="city", cascade="all, delete-orphan"
    )

    def __repr__(self):
        return f"<City(id={self.id}, name='{self.name}')>"
