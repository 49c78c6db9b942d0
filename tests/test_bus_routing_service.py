"""
BusRoutingService 테스트
"""

import pytest

from accessroute.core.config import (
    BUS_DIRECT_SECONDS,
    BUS_DISTANCE_FACTOR,
    BUS_TRANSFER_FIRST_LEG_SECONDS,
    BUS_TRANSFER_SECOND_LEG_SECONDS,
)
from accessroute.core.exceptions import CollaboratorUnavailableException
from accessroute.data.provider import DataProvider
from accessroute.models.domain import BusStop, Coordinate
from accessroute.services.bus_routing_service import BusRoutingService


class TestBusRoutingService:
    @pytest.fixture
    def service(self, fixture_provider):
        return BusRoutingService(fixture_provider)

    def test_direct_route(self, service, city_hall, seoul_station):
        """시청앞 → 서울역버스환승센터 (150번 공통 노선)"""
        result = service.find_bus_route(city_hall, seoul_station)

        assert result.kind == "direct"
        assert result.transfers == 0
        assert len(result.segments) == 1

        segment = result.segments[0]
        assert segment.route_id == "150"
        assert segment.start_stop.name == "시청앞"
        assert segment.end_stop.name == "서울역버스환승센터"
        assert result.total_duration == BUS_DIRECT_SECONDS

        straight = service.distance_calculator.haversine(
            segment.start_stop.coordinate.as_tuple(),
            segment.end_stop.coordinate.as_tuple(),
        )
        assert segment.distance == pytest.approx(straight * BUS_DISTANCE_FACTOR)

    def test_transfer_route_via_hub(self, service, gangnam, seoul_station):
        """강남역 → (3412) 시청앞 → (150) 서울역버스환승센터"""
        result = service.find_bus_route(gangnam, seoul_station)

        assert result.kind == "transfer"
        assert result.transfers == 1
        assert [s.route_id for s in result.segments] == ["3412", "150"]
        assert result.segments[0].end_stop.name == "시청앞"
        assert result.segments[1].start_stop.name == "시청앞"
        assert result.total_duration == (
            BUS_TRANSFER_FIRST_LEG_SECONDS + BUS_TRANSFER_SECOND_LEG_SECONDS
        )
        assert result.segments[0].route.name == "3412"
        assert [s.name for s in result.stops] == ["강남역", "시청앞", "서울역버스환승센터"]

    def test_hub_equal_to_end_stop(self, service, gangnam, city_hall):
        assert service.find_bus_route(gangnam, city_hall) is None

    def test_no_nearby_stops(self, service, remote_location, gangnam):
        assert service.find_bus_route(remote_location, gangnam) is None
        assert service.find_bus_route(gangnam, remote_location) is None

    def test_same_stop(self, service, gangnam):
        assert service.find_bus_route(gangnam, Coordinate(37.4980, 127.0277)) is None

    def test_no_route_ids(self, mocker, gangnam, seoul_station):
        provider = mocker.Mock(spec=DataProvider)
        provider.find_nearby_bus_stops.side_effect = [
            [BusStop("1", "출발", gangnam)],
            [BusStop("2", "도착", seoul_station)],
        ]
        provider.bus_route_ids_at.return_value = []

        assert BusRoutingService(provider).find_bus_route(gangnam, seoul_station) is None
        provider.bus_hub_stop.assert_not_called()

    def test_missing_hub(self, mocker, gangnam, seoul_station):
        provider = mocker.Mock(spec=DataProvider)
        provider.find_nearby_bus_stops.side_effect = [
            [BusStop("1", "출발", gangnam, route_ids=("A",))],
            [BusStop("2", "도착", seoul_station, route_ids=("B",))],
        ]
        provider.bus_route_ids_at.side_effect = lambda stop: list(stop.route_ids)
        provider.bus_hub_stop.return_value = None

        assert BusRoutingService(provider).find_bus_route(gangnam, seoul_station) is None

    def test_provider_failure_propagates(self, mocker, gangnam, seoul_station):
        provider = mocker.Mock(spec=DataProvider)
        provider.find_nearby_bus_stops.side_effect = CollaboratorUnavailableException()

        with pytest.raises(CollaboratorUnavailableException):
            BusRoutingService(provider).find_bus_route(gangnam, seoul_station)
