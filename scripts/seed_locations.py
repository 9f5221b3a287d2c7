#!/usr/bin/env python3
"""
Location Seeding Script

Creates all tables and a small sample hierarchy of continents, countries,
cities and attractions. Attraction counts are kept in step by the catalogue
and rebuilt once at the end.

Usage:
    python scripts/seed_locations.py
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from sqlalchemy.exc import SQLAlchemyError

import wandr.models  # noqa: F401
from wandr.core.database import Base, SessionLocal, engine
from wandr.core.settings import settings
from wandr.crud.attraction import crud_attraction
from wandr.crud.location import crud_city, crud_continent, crud_country, recount_attractions
from wandr.schemas.attraction import AttractionCreate
from wandr.schemas.location import CityCreate, ContinentCreate, CountryCreate

SAMPLE_WORLD = {
    "Europe": {
        ("France", "FR"): {
            "Paris": [
                ("Eiffel Tower", "landmark"),
                ("Louvre Museum", "museum"),
                ("Notre-Dame Cathedral", "religious"),
                ("Arc de Triomphe", "landmark"),
            ],
            "Lyon": [
                ("Basilica of Notre-Dame de Fourviere", "religious"),
                ("Vieux Lyon", "historic"),
            ],
        },
        ("Italy", "IT"): {
            "Rome": [
                ("Colosseum", "historic"),
                ("Pantheon", "historic"),
                ("Trevi Fountain", "landmark"),
            ],
        },
    },
    "Asia": {
        ("Japan", "JP"): {
            "Tokyo": [
                ("Senso-ji", "religious"),
                ("Tokyo Skytree", "landmark"),
            ],
            "Kyoto": [
                ("Fushimi Inari Taisha", "religious"),
                ("Kinkaku-ji", "religious"),
            ],
        },
    },
    "North America": {
        ("United States", "US"): {
            "New York": [
                ("Statue of Liberty", "landmark"),
                ("Central Park", "park"),
                ("Metropolitan Museum of Art", "museum"),
            ],
        },
    },
}


def seed_world(session):
    """Seed the sample hierarchy, skipping anything that already exists."""
    print("🌍 Seeding locations...")
    created = 0

    for continent_name, countries in SAMPLE_WORLD.items():
        continent = crud_continent.get_by_name(session, name=continent_name)
        if continent is None:
            continent = crud_continent.create(
                session, obj_in=ContinentCreate(name=continent_name)
            )

        for (country_name, code), cities in countries.items():
            country = crud_country.get_by_name(session, name=country_name)
            if country is None:
                country = crud_country.create(
                    session,
                    obj_in=CountryCreate(
                        name=country_name, code=code, continent_id=continent.id
                    ),
                )

            for city_name, attractions in cities.items():
                city = crud_city.get_by_name(session, name=city_name)
                if city is not None:
                    print(f"  ⚠️  {city_name} already exists")
                    continue
                city = crud_city.create(
                    session, obj_in=CityCreate(name=city_name, country_id=country.id)
                )
                for name, category in attractions:
                    crud_attraction.create(
                        session,
                        obj_in=AttractionCreate(
                            name=name, city_id=city.id, category=category
                        ),
                    )
                    created += 1
                print(f"  ✅ {city_name}: {len(attractions)} attractions")

    recount_attractions(session)
    return created


def main():
    """Main function."""
    print("🏗️  Wandr Location Seeder")
    print("=" * 40)
    print(f"Environment: {settings.ENVIRONMENT}")
    print(f"Database: {settings.DATABASE_URL[:50]}...")
    print()

    session = SessionLocal()
    try:
        Base.metadata.create_all(bind=engine)
        created = seed_world(session)
    except SQLAlchemyError as e:
        session.rollback()
        print(f"❌ Database error: {str(e)}")
        sys.exit(1)
    finally:
        session.close()

    print(f"\n🎉 Seeded {created} attractions")


if __name__ == "__main__":
    main()
