"""
좌표 기준 최근접 역/정류장 탐색

- find_nearest: 위경도 평면 거리(degree) 순위 => 내부 순위 비교 전용
- filter_within_radius: 하버사인(미터) => 실제 반경 필터 전용
두 거리 척도를 섞어 쓰지 않는다
"""

from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

import numpy as np

from accessroute.algorithms.distance_calculator import get_distance_calculator
from accessroute.core.exceptions import NotFoundException
from accessroute.models.domain import Coordinate

T = TypeVar("T")


def coordinate_of(candidate) -> Optional[Coordinate]:
    return getattr(candidate, "coordinate", None)


def find_nearest(
    coordinate: Coordinate,
    candidates: Iterable[T],
    key: Callable[[T], Optional[Coordinate]] = coordinate_of,
) -> T:
    """
    평면 제곱 거리가 가장 작은 후보 반환
    동일 거리 => 먼저 들어온 후보 (np.argmin은 첫 번째 최솟값 위치 반환)

    Raises:
        NotFoundException: 후보가 없거나 좌표가 있는 후보가 없을 때
    """
    located = [(c, key(c)) for c in candidates]
    located = [(c, coord) for c, coord in located if coord is not None]
    if not located:
        raise NotFoundException("가까운 역 또는 정류장을 찾을 수 없습니다")

    squared = get_distance_calculator().planar_squared(
        coordinate.as_tuple(), [coord.as_tuple() for _, coord in located]
    )

    return located[int(np.argmin(squared))][0]


def filter_within_radius(
    coordinate: Coordinate,
    candidates: Iterable[T],
    radius_m: float,
    key: Callable[[T], Optional[Coordinate]] = coordinate_of,
) -> List[T]:
    """반경(미터) 내 후보를 가까운 순서로 반환"""
    calc = get_distance_calculator()
    within = []
    for candidate in candidates:
        coord = key(candidate)
        if coord is None:
            continue
        distance = calc.meters_between(coordinate, coord)
        if distance <= radius_m:
            within.append((distance, candidate))
    # sort는 안정 정렬 => 동일 거리는 입력 순서 유지
    within.sort(key=lambda item: item[0])
    return [candidate for _, candidate in within]


def find_nearest_within(
    coordinate: Coordinate,
    candidates: Sequence[T],
    radius_m: float,
    key: Callable[[T], Optional[Coordinate]] = coordinate_of,
) -> T:
    """반경(미터)으로 후보를 거른 뒤 평면 거리로 최근접 선택"""
    calc = get_distance_calculator()
    nearby = []
    for candidate in candidates:
        coord = key(candidate)
        if coord is None:
            continue
        if calc.meters_between(coordinate, coord) <= radius_m:
            nearby.append(candidate)
    # 입력 순서 유지한 채로 평면 거리 순위 비교
    return find_nearest(coordinate, nearby, key)
