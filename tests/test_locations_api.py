"""
Test location catalogue endpoints.
"""


class TestLocationEndpoints:
    """Test /locations API endpoints."""

    def test_read_continents(self, client, api_v1_prefix, world):
        response = client.get(f"{api_v1_prefix}/locations/continents")

        assert response.status_code == 200
        data = response.json()
        assert [c["name"] for c in data["data"]] == ["Asia", "Europe"]
        assert data["data"][1]["attraction_count"] == 6
        assert data["meta"]["total"] == 2

    def test_read_countries(self, client, api_v1_prefix, world):
        response = client.get(
            f"{api_v1_prefix}/locations/continents/{world['europe']}/countries"
        )

        assert response.status_code == 200
        countries = response.json()["data"]
        assert [c["name"] for c in countries] == ["France"]
        assert countries[0]["flag_url"] == "https://img/fr-flag.png"

    def test_read_countries_unknown_continent(self, client, api_v1_prefix, world):
        response = client.get(f"{api_v1_prefix}/locations/continents/99999/countries")
        assert response.status_code == 404

    def test_read_cities(self, client, api_v1_prefix, world):
        response = client.get(
            f"{api_v1_prefix}/locations/countries/{world['france']}/cities"
        )

        cities = response.json()["data"]
        assert [(c["name"], c["attraction_count"]) for c in cities] == [
            ("Lyon", 2),
            ("Paris", 4),
        ]

    def test_read_attractions(self, client, api_v1_prefix, world):
        response = client.get(
            f"{api_v1_prefix}/locations/cities/{world['paris']}/attractions"
        )

        assert response.status_code == 200
        data = response.json()
        assert [a["name"] for a in data["data"]] == [
            "Arc de Triomphe",
            "Eiffel Tower",
            "Louvre Museum",
            "Notre-Dame",
        ]
        assert data["meta"]["total"] == 4

    def test_read_attractions_unknown_city(self, client, api_v1_prefix, world):
        response = client.get(f"{api_v1_prefix}/locations/cities/99999/attractions")
        assert response.status_code == 404
