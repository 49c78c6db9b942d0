"""
지하철 역 그래프 자료구조

역 이름 -> 다음 역 이름 리스트(방향 그래프)와 역 -> 노선 매핑으로
경로 탐색에 사용할 인접 구조를 구축합니다.
구축 이후에는 읽기 전용(construct-then-freeze)
"""

import logging
from types import MappingProxyType
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from accessroute.core.config import UNKNOWN_LINE
from accessroute.models.domain import Coordinate, Station

logger = logging.getLogger(__name__)

LineLookup = Union[Mapping[str, str], Callable[[str], str]]


class StationGraph:
    """읽기 전용 역 그래프"""

    def __init__(
        self,
        stations: Dict[str, Station],
        adjacency: Dict[str, Tuple[str, ...]],
    ):
        self._stations = MappingProxyType(dict(stations))
        self._adjacency = MappingProxyType(dict(adjacency))

    def station(self, name: str) -> Station:
        """역 조회 => 그래프에 없는 역은 out-edge가 없는 고립 역으로 취급"""
        station = self._stations.get(name)
        if station is None:
            return Station(name=name, line=UNKNOWN_LINE)
        return station

    def neighbors(self, name: str) -> Tuple[str, ...]:
        return self._adjacency.get(name, ())

    def line_of(self, name: str) -> str:
        return self.station(name).line

    def stations(self) -> List[Station]:
        return list(self._stations.values())

    def stations_with_coordinates(self) -> List[Station]:
        return [s for s in self._stations.values() if s.coordinate is not None]

    @property
    def edge_count(self) -> int:
        return sum(len(v) for v in self._adjacency.values())

    def __contains__(self, name: object) -> bool:
        return name in self._stations

    def __len__(self) -> int:
        return len(self._stations)


class StationGraphBuilder:
    """연결 정보(인접 리스트) + 노선/좌표 매핑 => StationGraph"""

    @staticmethod
    def build(
        connections: Mapping[str, Iterable[str]],
        line_of: LineLookup,
        coordinates: Optional[Mapping[str, Coordinate]] = None,
        codes: Optional[Mapping[str, str]] = None,
    ) -> StationGraph:
        lookup = _as_line_lookup(line_of)
        coordinates = coordinates or {}
        codes = codes or {}

        adjacency: Dict[str, Tuple[str, ...]] = {}
        # 삽입 순서 유지 => 키로 등장한 역 먼저, 이후 인접역으로만 등장한 역
        names: Dict[str, None] = {}

        for station_name, next_stations in connections.items():
            names.setdefault(station_name, None)
            seen = []
            for next_name in next_stations:
                # 시간표 데이터에는 자기 자신이 다음 역으로 나오는 경우가 있음
                if not next_name or next_name == station_name:
                    continue
                if next_name in seen:
                    continue
                seen.append(next_name)
                names.setdefault(next_name, None)
            # 역방향 엣지는 가정하지 않음
            adjacency[station_name] = tuple(seen)

        stations = {
            name: Station(
                name=name,
                line=lookup(name) or UNKNOWN_LINE,
                coordinate=coordinates.get(name),
                code=codes.get(name),
            )
            for name in names
        }

        graph = StationGraph(stations, adjacency)
        missing_coords = len(stations) - len(graph.stations_with_coordinates())
        logger.info(
            f"역 그래프 구축: 역 {len(graph)}개, 엣지 {graph.edge_count}개, "
            f"좌표 없는 역 {missing_coords}개"
        )
        return graph


def _as_line_lookup(line_of: LineLookup) -> Callable[[str], str]:
    if callable(line_of):
        return line_of
    return lambda name: line_of.get(name, UNKNOWN_LINE)
