"""
최근접 역/정류장 탐색 테스트
"""

import pytest

from accessroute.algorithms.nearest import (
    filter_within_radius,
    find_nearest,
    find_nearest_within,
)
from accessroute.core.exceptions import NotFoundException
from accessroute.data.fixtures import BUS_STOPS
from accessroute.models.domain import Coordinate, Station


class TestFindNearest:
    def test_nearest_station(self, fixture_graph, gangnam):
        station = find_nearest(gangnam, fixture_graph.stations_with_coordinates())

        assert station.name == "강남"

    def test_tie_goes_to_first_candidate(self):
        point = Coordinate(37.5, 127.0)
        candidates = [
            Station("동쪽역", "1호선", Coordinate(37.5, 127.25)),
            Station("서쪽역", "1호선", Coordinate(37.5, 126.75)),
        ]

        assert find_nearest(point, candidates).name == "동쪽역"
        assert find_nearest(point, list(reversed(candidates))).name == "서쪽역"

    def test_candidates_without_coordinates_ignored(self, gangnam):
        candidates = [
            Station("좌표없음", "2호선"),
            Station("역삼", "2호선", Coordinate(37.5000, 127.0360)),
        ]

        assert find_nearest(gangnam, candidates).name == "역삼"

    def test_empty_candidates(self, gangnam):
        with pytest.raises(NotFoundException):
            find_nearest(gangnam, [])

    def test_no_coordinates(self, gangnam):
        with pytest.raises(NotFoundException):
            find_nearest(gangnam, [Station("좌표없음", "2호선")])

    def test_custom_key(self, gangnam):
        points = [("강남", gangnam), ("서울역", Coordinate(37.5550, 126.9707))]

        assert find_nearest(gangnam, points, key=lambda p: p[1])[0] == "강남"


class TestRadiusFilter:
    def test_filter_within_radius_sorted(self, gangnam):
        stops = filter_within_radius(gangnam, BUS_STOPS, 500)

        assert [s.name for s in stops] == ["강남역", "강남역12번출구"]

    def test_filter_uses_meters(self, gangnam):
        # 약 780m 떨어진 역삼역
        yeoksam = Station("역삼", "2호선", Coordinate(37.5000, 127.0360))

        assert filter_within_radius(gangnam, [yeoksam], 500) == []
        assert filter_within_radius(gangnam, [yeoksam], 1000) == [yeoksam]

    def test_find_nearest_within_far_away(self, fixture_graph, remote_location):
        with pytest.raises(NotFoundException):
            find_nearest_within(
                remote_location, fixture_graph.stations_with_coordinates(), 3000
            )

    def test_find_nearest_within(self, fixture_graph, seoul_station):
        station = find_nearest_within(
            seoul_station, fixture_graph.stations_with_coordinates(), 3000
        )

        assert station.name == "서울역"
