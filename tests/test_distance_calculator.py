"""
DistanceCalculator 테스트
"""

import pytest
from accessroute.algorithms.distance_calculator import DistanceCalculator
from accessroute.models.domain import Coordinate


class TestDistanceCalculator:
    """DistanceCalculator 테스트 클래스"""

    @pytest.fixture
    def calculator(self):
        """DistanceCalculator 인스턴스"""
        return DistanceCalculator()

    def test_same_point(self, calculator):
        """동일한 지점 간 거리 계산 (0이어야 함)"""
        seoul_station = (37.5550, 126.9707)

        assert calculator.haversine(seoul_station, seoul_station) == 0.0

    def test_known_locations(self, calculator):
        """서울역 - 강남역 (약 8km)"""
        distance = calculator.haversine((37.5550, 126.9707), (37.4979, 127.0276))

        assert 7500 < distance < 8500

    def test_haversine_formula_accuracy(self, calculator):
        """역삼역 - 강남역 (약 800m)"""
        distance = calculator.haversine((37.5000, 127.0360), (37.4979, 127.0276))

        assert 700 < distance < 850

    def test_long_distance(self, calculator):
        """서울 - 부산 (약 325km)"""
        distance = calculator.haversine((37.5550, 126.9707), (35.1796, 129.0756))

        assert 310000 < distance < 340000

    def test_distance_symmetry(self, calculator):
        """거리 계산의 대칭성 (A→B == B→A)"""
        a = (37.5550, 126.9707)
        b = (37.4979, 127.0276)

        assert calculator.haversine(a, b) == pytest.approx(calculator.haversine(b, a))

    def test_meters_between_coordinates(self, calculator):
        a = Coordinate(37.5550, 126.9707)
        b = Coordinate(37.4979, 127.0276)

        assert calculator.meters_between(a, b) == calculator.haversine(
            a.as_tuple(), b.as_tuple()
        )

    def test_no_state_kept_between_requests(self, calculator):
        """요청마다 다른 좌표로 계산해도 계산기 상태가 늘어나지 않음"""
        for i in range(500):
            calculator.meters_between(
                Coordinate(37.40 + i * 0.0001, 126.90), Coordinate(37.55, 126.97)
            )

        assert vars(calculator) == {}

    def test_planar_squared(self):
        """위경도 평면 제곱 거리 (degree^2)"""
        squared = DistanceCalculator.planar_squared((0.0, 0.0), [(3.0, 4.0), (1.0, 0.0)])

        assert squared.tolist() == [25.0, 1.0]
