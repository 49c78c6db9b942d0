"""
REST API 엔드포인트 테스트 (FastAPI TestClient + fixture 데이터)
"""

import pytest
from fastapi.testclient import TestClient

from accessroute.core.exceptions import CollaboratorUnavailableException
from accessroute.main import app
from accessroute.services.route_composer import get_route_composer

GANGNAM = {"lat": 37.4979, "lng": 127.0276}
SEOUL_STATION = {"lat": 37.5550, "lng": 126.9707}


@pytest.fixture
def client(clean_cache):
    get_route_composer.cache_clear()
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
    get_route_composer.cache_clear()


def combined_payload(origin, destination, **extra):
    payload = {
        "origin_lat": origin["lat"],
        "origin_lng": origin["lng"],
        "destination_lat": destination["lat"],
        "destination_lng": destination["lng"],
    }
    payload.update(extra)
    return payload


class TestCombinedRoute:
    def test_combined_route(self, client):
        response = client.post(
            "/v1/routes/combined", json=combined_payload(GANGNAM, SEOUL_STATION)
        )

        assert response.status_code == 200
        body = response.json()
        assert body["route_id"]
        assert body["selected_mode"] == "subway"
        assert [leg["mode"] for leg in body["legs"]] == ["walk", "subway", "walk"]
        assert body["transfers"] == 1

        subway = body["legs"][1]["details"]
        assert subway["kind"] == "subway"
        assert subway["route_sequence"][0] == "강남"
        assert subway["route_sequence"][-1] == "서울역"
        assert body["accessibility"]["count"] == len(body["accessibility"]["facilities"])
        assert body["accessibility"]["count"] > 0

    def test_legs_are_contiguous(self, client):
        body = client.post(
            "/v1/routes/combined", json=combined_payload(GANGNAM, SEOUL_STATION)
        ).json()

        for prev, curr in zip(body["legs"], body["legs"][1:]):
            assert prev["end"] == curr["start"]

    def test_without_accessibility(self, client):
        response = client.post(
            "/v1/routes/combined",
            json=combined_payload(GANGNAM, SEOUL_STATION, include_accessibility=False),
        )

        assert response.status_code == 200
        assert response.json()["accessibility"]["count"] == 0

    def test_invalid_latitude(self, client):
        response = client.post(
            "/v1/routes/combined",
            json=combined_payload({"lat": 123.0, "lng": 127.0}, SEOUL_STATION),
        )

        assert response.status_code == 422

    def test_service_error_is_400(self, client, mocker):
        composer = mocker.Mock()
        composer.compose_route.side_effect = CollaboratorUnavailableException()
        app.dependency_overrides[get_route_composer] = lambda: composer

        response = client.post(
            "/v1/routes/combined", json=combined_payload(GANGNAM, SEOUL_STATION)
        )

        assert response.status_code == 400
        assert response.json()["detail"]["code"] == CollaboratorUnavailableException().code

    def test_unexpected_error_is_500(self, client, mocker):
        composer = mocker.Mock()
        composer.compose_route.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_route_composer] = lambda: composer

        response = client.post(
            "/v1/routes/combined", json=combined_payload(GANGNAM, SEOUL_STATION)
        )

        assert response.status_code == 500


class TestSubwayRoute:
    def test_subway_route(self, client):
        response = client.post(
            "/v1/routes/subway", json={"origin": "강남", "destination": "서울역"}
        )

        assert response.status_code == 200
        body = response.json()
        assert body["total_time"] == 1260
        assert body["transfers"] == 1
        assert body["transfer_details"][0]["station"] == "을지로입구"
        assert body["route_lines"][0] == "2호선"
        assert body["route_lines"][-1] == "1호선"

    def test_unknown_station(self, client):
        response = client.post(
            "/v1/routes/subway", json={"origin": "강남", "destination": "없는역"}
        )

        assert response.status_code == 404
        assert "code" in response.json()["detail"]

    def test_empty_station_name(self, client):
        response = client.post(
            "/v1/routes/subway", json={"origin": "", "destination": "서울역"}
        )

        assert response.status_code == 422


class TestStations:
    def test_nearest_station(self, client):
        response = client.get("/v1/stations/nearest", params=GANGNAM)

        assert response.status_code == 200
        body = response.json()
        assert body["name"] == "강남"
        assert body["line"] == "2호선"
        assert body["distance"] < 100

    def test_nearest_out_of_range(self, client):
        response = client.get("/v1/stations/nearest", params={"lat": 95, "lng": 127})

        assert response.status_code == 422


class TestHealth:
    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["components"]["data_provider"] == "fixture"
        assert body["graph"]["stations"] > 0
