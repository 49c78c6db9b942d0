"""
좌표 간 거리 계산

- haversine / meters_between: 지구 곡률 반영 실제 거리(meter) => 반경 판정, 도보/버스 거리
- planar_squared: 위경도 평면 제곱 거리(degree^2) => 최근접 순위 비교 전용

요청 좌표는 매번 달라지므로 결과를 저장하지 않는다
"""

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from accessroute.models.domain import Coordinate


class DistanceCalculator:
    EARTH_RADIUS = 6371000  # meters

    def haversine(
        self, coord1: Tuple[float, float], coord2: Tuple[float, float]
    ) -> float:
        """하버사인 공식으로 지구의 곡률 고려하여 두 좌표 간 거리 계산"""
        lat1, lon1, lat2, lon2 = map(math.radians, (*coord1, *coord2))

        dlat = lat2 - lat1
        dlon = lon2 - lon1
        a = (
            math.sin(dlat / 2) ** 2
            + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
        )
        # 부동소수 오차로 a가 1을 살짝 넘는 경우 방지
        return self.EARTH_RADIUS * 2 * math.asin(math.sqrt(min(1.0, a)))

    def meters_between(self, a: Coordinate, b: Coordinate) -> float:
        return self.haversine(a.as_tuple(), b.as_tuple())

    @staticmethod
    def planar_squared(
        origin: Tuple[float, float], points: Sequence[Tuple[float, float]]
    ) -> np.ndarray:
        """origin에서 각 지점까지 위경도 평면 거리의 제곱 (degree^2)"""
        delta = np.asarray(points, dtype=float).reshape(-1, 2) - np.asarray(
            origin, dtype=float
        )
        return (delta**2).sum(axis=1)


_distance_calculator: Optional[DistanceCalculator] = None


def get_distance_calculator() -> DistanceCalculator:
    global _distance_calculator
    if _distance_calculator is None:
        _distance_calculator = DistanceCalculator()
    return _distance_calculator
