"""
Test configuration and fixtures for Wandr API tests.
"""
import os

os.environ["ENVIRONMENT"] = "testing"

import sqlite3
from typing import Dict, Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wandr.core.auth import create_access_token
from wandr.core.database import Base, get_db
from wandr.crud.attraction import crud_attraction
from wandr.crud.location import crud_city, crud_continent, crud_country
from wandr.main import app
from wandr.schemas.attraction import AttractionCreate
from wandr.schemas.location import CityCreate, ContinentCreate, CountryCreate

# Use in-memory SQLite database for testing
TEST_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={
        "check_same_thread": False,
    },
    poolclass=StaticPool,
    echo=False,
)


@event.listens_for(Engine, "connect")
def enable_sqlite_fks(dbapi_connection, connection_record):
    """Enable foreign key constraints in SQLite."""
    if isinstance(dbapi_connection, sqlite3.Connection):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_USER_ID = 1001
OTHER_USER_ID = 2002


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=engine)

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session) -> Generator[TestClient, None, None]:
    """Create a test client with database session override."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def api_v1_prefix() -> str:
    return "/api/v1"


@pytest.fixture
def user_id() -> int:
    return TEST_USER_ID


@pytest.fixture
def other_user_id() -> int:
    return OTHER_USER_ID


@pytest.fixture
def auth_headers(user_id) -> Dict[str, str]:
    """Authentication headers for the main test user."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


@pytest.fixture
def other_auth_headers(other_user_id) -> Dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(other_user_id)}"}


@pytest.fixture
def world(db_session) -> Dict[str, int]:
    """
    A small location tree, built through the catalogue so counts are maintained.

    Europe > France > Paris (4 attractions), Lyon (2 attractions)
    Asia > Japan > Tokyo (1 attraction)
    """
    europe = crud_continent.create(
        db_session, obj_in=ContinentCreate(name="Europe", image_url="https://img/eu.jpg")
    )
    asia = crud_continent.create(db_session, obj_in=ContinentCreate(name="Asia"))
    france = crud_country.create(
        db_session,
        obj_in=CountryCreate(
            name="France",
            code="FR",
            continent_id=europe.id,
            flag_url="https://img/fr-flag.png",
        ),
    )
    japan = crud_country.create(
        db_session, obj_in=CountryCreate(name="Japan", code="JP", continent_id=asia.id)
    )
    paris = crud_city.create(
        db_session,
        obj_in=CityCreate(
            name="Paris", country_id=france.id, image_url="https://img/paris.jpg"
        ),
    )
    lyon = crud_city.create(db_session, obj_in=CityCreate(name="Lyon", country_id=france.id))
    tokyo = crud_city.create(db_session, obj_in=CityCreate(name="Tokyo", country_id=japan.id))

    ids = {
        "europe": europe.id,
        "asia": asia.id,
        "france": france.id,
        "japan": japan.id,
        "paris": paris.id,
        "lyon": lyon.id,
        "tokyo": tokyo.id,
    }

    attractions = [
        ("eiffel", "Eiffel Tower", paris.id),
        ("louvre", "Louvre Museum", paris.id),
        ("notre_dame", "Notre-Dame", paris.id),
        ("arc", "Arc de Triomphe", paris.id),
        ("fourviere", "Basilica of Fourviere", lyon.id),
        ("vieux_lyon", "Vieux Lyon", lyon.id),
        ("senso_ji", "Senso-ji", tokyo.id),
    ]
    for key, name, city_id in attractions:
        attraction = crud_attraction.create(
            db_session,
            obj_in=AttractionCreate(name=name, city_id=city_id, category="landmark"),
        )
        ids[key] = attraction.id

    return ids
