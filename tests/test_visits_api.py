"""
Test visit endpoints.
"""
from fastapi.testclient import TestClient

from wandr.core.auth import create_access_token


class TestVisitEndpoints:
    """Test /visits API endpoints."""

    def test_mark_visited(self, client: TestClient, api_v1_prefix, auth_headers, world):
        response = client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["eiffel"], "notes": "Great view"},
            headers=auth_headers,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Visit recorded successfully"
        assert data["data"]["already_visited"] is False
        assert data["data"]["visit"]["attraction_id"] == world["eiffel"]
        assert data["data"]["visit"]["attraction"]["city_name"] == "Paris"
        assert len(data["data"]["new_badges"]) == 1
        badge = data["data"]["new_badges"][0]
        assert badge["is_new"] is True
        assert badge["badge"]["tier"] == "bronze"
        assert badge["badge"]["location_type"] == "city"
        assert badge["badge"]["progress_percent"] == 25

    def test_mark_visited_twice(self, client, api_v1_prefix, auth_headers, world):
        payload = {"attraction_id": world["eiffel"]}
        client.post(f"{api_v1_prefix}/visits/", json=payload, headers=auth_headers)

        response = client.post(
            f"{api_v1_prefix}/visits/", json=payload, headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Attraction is already marked as visited"
        assert data["data"]["already_visited"] is True
        assert data["data"]["new_badges"] == []

    def test_mark_unknown_attraction(self, client, api_v1_prefix, auth_headers, world):
        response = client.post(
            f"{api_v1_prefix}/visits/", json={"attraction_id": 99999}, headers=auth_headers
        )

        assert response.status_code == 404
        assert "99999" in response.json()["detail"]

    def test_mark_visited_requires_auth(self, client, api_v1_prefix, world):
        response = client.post(
            f"{api_v1_prefix}/visits/", json={"attraction_id": world["eiffel"]}
        )
        assert response.status_code in (401, 403)

    def test_mark_visited_rejects_bad_token(self, client, api_v1_prefix, world):
        response = client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["eiffel"]},
            headers={"Authorization": "Bearer not-a-token"},
        )
        assert response.status_code == 401

    def test_mark_visited_validation(self, client, api_v1_prefix, auth_headers, world):
        response = client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["eiffel"], "notes": "x" * 501},
            headers=auth_headers,
        )
        assert response.status_code == 422

        response = client.post(f"{api_v1_prefix}/visits/", json={}, headers=auth_headers)
        assert response.status_code == 422

    def test_list_visits(self, client, api_v1_prefix, auth_headers, world):
        for key in ("eiffel", "louvre", "senso_ji"):
            client.post(
                f"{api_v1_prefix}/visits/",
                json={"attraction_id": world[key]},
                headers=auth_headers,
            )

        response = client.get(
            f"{api_v1_prefix}/visits/?sort_by=name&sort_order=asc&limit=2",
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert [v["attraction"]["name"] for v in data["data"]] == [
            "Eiffel Tower",
            "Louvre Museum",
        ]
        assert data["meta"] == {"total": 3, "page": 1, "limit": 2, "total_pages": 2}

    def test_list_visits_rejects_unknown_sort(self, client, api_v1_prefix, auth_headers):
        response = client.get(
            f"{api_v1_prefix}/visits/?sort_by=rating", headers=auth_headers
        )
        assert response.status_code == 422

    def test_visits_are_per_user(self, client, api_v1_prefix, auth_headers, world):
        client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["eiffel"]},
            headers=auth_headers,
        )
        other = {"Authorization": f"Bearer {create_access_token(777)}"}

        response = client.get(f"{api_v1_prefix}/visits/", headers=other)

        assert response.json()["data"] == []
        assert response.json()["meta"]["total"] == 0

    def test_check_visited(self, client, api_v1_prefix, auth_headers, world):
        client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["eiffel"]},
            headers=auth_headers,
        )

        visited = client.get(
            f"{api_v1_prefix}/visits/check/{world['eiffel']}", headers=auth_headers
        )
        not_visited = client.get(
            f"{api_v1_prefix}/visits/check/{world['louvre']}", headers=auth_headers
        )

        assert visited.json()["data"] == {"is_visited": True}
        assert not_visited.json()["data"] == {"is_visited": False}

    def test_remove_visit(self, client, api_v1_prefix, auth_headers, world):
        client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["eiffel"]},
            headers=auth_headers,
        )

        response = client.delete(
            f"{api_v1_prefix}/visits/{world['eiffel']}", headers=auth_headers
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Visit removed successfully"

        response = client.delete(
            f"{api_v1_prefix}/visits/{world['eiffel']}", headers=auth_headers
        )
        assert response.status_code == 404

        # Badges stay after the visit is gone
        badges = client.get(f"{api_v1_prefix}/badges/summary", headers=auth_headers)
        assert badges.json()["data"]["total_badges"] == 1

    def test_stats(self, client, api_v1_prefix, auth_headers, world):
        client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["eiffel"], "is_verified": True},
            headers=auth_headers,
        )

        response = client.get(f"{api_v1_prefix}/visits/stats", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_visits"] == 1
        assert data["verified_visits"] == 1
        assert data["cities"] == ["Paris"]
        assert data["continents"] == ["Europe"]

    def test_location_stats(self, client, api_v1_prefix, auth_headers, world):
        client.post(
            f"{api_v1_prefix}/visits/",
            json={"attraction_id": world["fourviere"]},
            headers=auth_headers,
        )

        response = client.get(
            f"{api_v1_prefix}/visits/stats/city/lyon", headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_attractions"] == 2
        assert data["visited_attractions"] == 1
        assert data["progress"] == 50
        assert len(data["attractions"]) == 2

    def test_location_stats_bad_type(self, client, api_v1_prefix, auth_headers, world):
        response = client.get(
            f"{api_v1_prefix}/visits/stats/planet/earth", headers=auth_headers
        )
        assert response.status_code == 422
