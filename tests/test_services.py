"""
Test visit and badge read services.
"""
from datetime import datetime, timedelta, timezone

import pytest

from wandr.core.constants import BadgeTier, LocationType
from wandr.core.exceptions import LocationNotFound, VisitNotFound
from wandr.models.badge import UserBadge
from wandr.schemas.visit import VisitCreate
from wandr.services.badge_service import BadgeService
from wandr.services.visit_service import VisitService


@pytest.fixture
def visited(db_session, world, user_id):
    """The main user has visited the Eiffel Tower, the Louvre and Senso-ji."""
    service = VisitService(db_session)
    start = datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    for offset, key in enumerate(("eiffel", "louvre", "senso_ji")):
        service.record_visit(
            user_id,
            VisitCreate(
                attraction_id=world[key],
                visit_date=start + timedelta(days=offset),
                is_verified=key == "senso_ji",
            ),
        )
    return world


class TestVisitService:
    """Test VisitService."""

    def test_record_visit_returns_visit_with_location(self, db_session, world, user_id):
        result = VisitService(db_session).record_visit(
            user_id,
            VisitCreate(attraction_id=world["eiffel"], notes="Sunset from the top"),
        )

        assert result.already_visited is False
        assert result.visit.user_id == user_id
        assert result.visit.notes == "Sunset from the top"
        assert result.visit.is_verified is False
        assert result.visit.attraction.name == "Eiffel Tower"
        assert result.visit.attraction.city_name == "Paris"
        assert result.visit.attraction.country_name == "France"
        assert result.visit.attraction.continent_name == "Europe"

    def test_record_visit_twice_keeps_first(self, db_session, world, user_id):
        service = VisitService(db_session)
        first = service.record_visit(
            user_id, VisitCreate(attraction_id=world["eiffel"], notes="first")
        )
        second = service.record_visit(
            user_id, VisitCreate(attraction_id=world["eiffel"], notes="second")
        )

        assert second.already_visited is True
        assert second.visit.id == first.visit.id
        assert second.visit.notes == "first"

    def test_is_visited(self, db_session, visited, user_id, other_user_id):
        service = VisitService(db_session)
        assert service.is_visited(user_id, visited["eiffel"]) is True
        assert service.is_visited(user_id, visited["arc"]) is False
        assert service.is_visited(other_user_id, visited["eiffel"]) is False

    def test_list_visits_recent_first(self, db_session, visited, user_id):
        visits, total = VisitService(db_session).list_visits(user_id)

        assert total == 3
        assert [v.attraction.name for v in visits] == [
            "Senso-ji",
            "Louvre Museum",
            "Eiffel Tower",
        ]

    def test_list_visits_by_name_and_paging(self, db_session, visited, user_id):
        service = VisitService(db_session)
        visits, total = service.list_visits(
            user_id, page=1, limit=2, sort_by="name", sort_order="asc"
        )
        assert total == 3
        assert [v.attraction.name for v in visits] == ["Eiffel Tower", "Louvre Museum"]

        visits, _ = service.list_visits(
            user_id, page=2, limit=2, sort_by="name", sort_order="asc"
        )
        assert [v.attraction.name for v in visits] == ["Senso-ji"]

    def test_remove_visit_keeps_badges(self, db_session, visited, user_id):
        service = VisitService(db_session)
        badges_before = db_session.query(UserBadge).filter_by(user_id=user_id).count()

        service.remove_visit(user_id, visited["senso_ji"])

        assert service.is_visited(user_id, visited["senso_ji"]) is False
        assert (
            db_session.query(UserBadge).filter_by(user_id=user_id).count()
            == badges_before
        )

    def test_remove_missing_visit(self, db_session, world, user_id):
        with pytest.raises(VisitNotFound):
            VisitService(db_session).remove_visit(user_id, world["eiffel"])

    def test_user_stats(self, db_session, visited, user_id):
        stats = VisitService(db_session).get_user_stats(user_id)

        assert stats.total_visits == 3
        assert stats.verified_visits == 1
        assert stats.cities_visited == 2
        assert stats.countries_visited == 2
        assert stats.continents_visited == 2
        assert stats.cities == ["Paris", "Tokyo"]
        assert stats.countries == ["France", "Japan"]
        assert stats.continents == ["Asia", "Europe"]

    def test_user_stats_empty(self, db_session, world, other_user_id):
        stats = VisitService(db_session).get_user_stats(other_user_id)
        assert stats.total_visits == 0
        assert stats.cities == []

    def test_city_stats_lists_attractions(self, db_session, visited, user_id):
        stats = VisitService(db_session).get_location_stats(
            user_id, LocationType.CITY, "pArIs"
        )

        assert stats.total_attractions == 4
        assert stats.visited_attractions == 2
        assert stats.progress == 50
        flags = {a.name: a.is_visited for a in stats.attractions}
        assert flags == {
            "Arc de Triomphe": False,
            "Eiffel Tower": True,
            "Louvre Museum": True,
            "Notre-Dame": False,
        }

    def test_country_stats(self, db_session, visited, user_id):
        stats = VisitService(db_session).get_location_stats(
            user_id, LocationType.COUNTRY, "france"
        )
        assert stats.total_attractions == 6
        assert stats.visited_attractions == 2
        assert stats.progress == 33
        assert stats.attractions is None

    def test_unknown_location_stats(self, db_session, visited, user_id):
        stats = VisitService(db_session).get_location_stats(
            user_id, LocationType.CONTINENT, "Atlantis"
        )
        assert stats.total_attractions == 0
        assert stats.visited_attractions == 0
        assert stats.progress == 0


class TestBadgeService:
    """Test BadgeService."""

    def test_progress_lists_visited_nodes_by_percent(self, db_session, visited, user_id):
        progress = BadgeService(db_session).get_progress(user_id)

        assert [p.location_name for p in progress.cities] == ["Tokyo", "Paris"]
        assert [p.location_name for p in progress.countries] == ["Japan", "France"]
        assert [p.location_name for p in progress.continents] == ["Asia", "Europe"]

        paris = progress.cities[1]
        assert paris.visited_attractions == 2
        assert paris.total_attractions == 4
        assert paris.progress_percent == 50
        assert paris.current_tier is BadgeTier.SILVER
        assert paris.next_tier is BadgeTier.GOLD
        assert paris.progress_to_next_tier == 25
        assert [b.tier for b in paris.earned_badges] == [
            BadgeTier.BRONZE,
            BadgeTier.SILVER,
        ]

        tokyo = progress.cities[0]
        assert tokyo.current_tier is BadgeTier.PLATINUM
        assert tokyo.next_tier is None
        assert tokyo.progress_to_next_tier == 0

    def test_progress_empty_for_new_user(self, db_session, world, other_user_id):
        progress = BadgeService(db_session).get_progress(other_user_id)
        assert progress.cities == []
        assert progress.countries == []
        assert progress.continents == []

    def test_location_progress(self, db_session, visited, user_id):
        progress = BadgeService(db_session).get_location_progress(
            user_id, LocationType.COUNTRY, visited["france"]
        )
        assert progress.location_name == "France"
        assert progress.visited_attractions == 2
        assert progress.progress_percent == 33
        assert progress.current_tier is BadgeTier.BRONZE
        assert progress.progress_to_next_tier == 17
        assert [b.tier for b in progress.earned_badges] == [BadgeTier.BRONZE]
        assert progress.earned_badges[0].location_image_url == "https://img/fr-flag.png"

    def test_location_progress_without_visits(self, db_session, visited, user_id):
        progress = BadgeService(db_session).get_location_progress(
            user_id, LocationType.CITY, visited["lyon"]
        )
        assert progress.visited_attractions == 0
        assert progress.current_tier is BadgeTier.NONE
        assert progress.next_tier is BadgeTier.BRONZE
        assert progress.earned_badges == []

    def test_location_progress_unknown_location(self, db_session, world, user_id):
        with pytest.raises(LocationNotFound):
            BadgeService(db_session).get_location_progress(
                user_id, LocationType.CITY, 99999
            )

    def test_summary(self, db_session, visited, user_id):
        summary = BadgeService(db_session).get_summary(user_id)

        # Paris bronze+silver, France bronze, Europe bronze, and every tier of
        # Tokyo, Japan and Asia
        assert summary.total_badges == 16
        assert summary.badges_by_tier == {
            BadgeTier.BRONZE: 6,
            BadgeTier.SILVER: 4,
            BadgeTier.GOLD: 3,
            BadgeTier.PLATINUM: 3,
        }
        assert summary.badges_by_type == {
            LocationType.CITY: 6,
            LocationType.COUNTRY: 5,
            LocationType.CONTINENT: 5,
        }
        assert summary.recent_badge.location_name == "Asia"
        assert summary.recent_badge.tier is BadgeTier.PLATINUM

    def test_summary_is_zero_filled(self, db_session, world, other_user_id):
        summary = BadgeService(db_session).get_summary(other_user_id)

        assert summary.total_badges == 0
        assert summary.badges_by_tier == {
            BadgeTier.BRONZE: 0,
            BadgeTier.SILVER: 0,
            BadgeTier.GOLD: 0,
            BadgeTier.PLATINUM: 0,
        }
        assert set(summary.badges_by_type) == set(LocationType)
        assert summary.recent_badge is None

    def test_user_badges_filters(self, db_session, visited, user_id):
        service = BadgeService(db_session)

        assert len(service.get_user_badges(user_id)) == 16
        cities = service.get_user_badges(user_id, location_type=LocationType.CITY)
        assert {b.location_name for b in cities} == {"Paris", "Tokyo"}
        platinum = service.get_user_badges(user_id, tier=BadgeTier.PLATINUM)
        assert {b.location_type for b in platinum} == set(LocationType)
        assert (
            service.get_user_badges(
                user_id, location_type=LocationType.COUNTRY, tier=BadgeTier.SILVER
            )[0].location_name
            == "Japan"
        )

    def test_timeline(self, db_session, visited, user_id):
        timeline = BadgeService(db_session).get_timeline(user_id, limit=3)

        assert timeline.total == 16
        assert len(timeline.items) == 3
        assert timeline.items[0].location_name == "Asia"
        assert timeline.items[0].tier is BadgeTier.PLATINUM
        assert timeline.items[-1].location_name == "Asia"
        assert timeline.items[-1].tier is BadgeTier.SILVER
