import heapq
import logging
from typing import Dict, List, Optional

from accessroute.algorithms.distance_calculator import (
    DistanceCalculator,
    get_distance_calculator,
)
from accessroute.algorithms.station_graph import StationGraph
from accessroute.algorithms.transfer_table import TransferCostTable
from accessroute.core.config import BASE_EDGE_SECONDS
from accessroute.core.exceptions import UnreachableException
from accessroute.models.domain import PathResult, Station, TransferEvent

logger = logging.getLogger(__name__)


class ShortestPathEngine:
    """
    역 그래프 위의 다익스트라 최단 경로 탐색

    엣지 가중치 = 역간 기본 이동 시간 + (노선이 바뀌면) 환승 시간
    모든 가중치가 0 이상이므로 표준 다익스트라 성립
    """

    def __init__(
        self,
        graph: StationGraph,
        transfer_table: TransferCostTable,
        base_edge_seconds: float = BASE_EDGE_SECONDS,
        distance_calculator: Optional[DistanceCalculator] = None,
    ):
        self.graph = graph
        self.transfer_table = transfer_table
        self.base_edge_seconds = base_edge_seconds
        self.distance_calculator = distance_calculator or get_distance_calculator()

    def edge_weight(self, current: str, neighbor: str) -> float:
        weight = self.base_edge_seconds
        penalty = self._transfer_penalty(current, neighbor)
        if penalty is not None:
            weight += penalty
        return weight

    def _transfer_penalty(self, current: str, neighbor: str) -> Optional[float]:
        """노선 경계를 넘는 엣지면 환승 시간, 아니면 None"""
        from_line = self.graph.line_of(current)
        to_line = self.graph.line_of(neighbor)
        if from_line == to_line:
            return None
        return self.transfer_table.cost(current, from_line, to_line)

    def shortest_path(self, start: str, end: str) -> PathResult:
        """
        최단 경로 탐색

        Args:
            start: 출발역 이름
            end: 도착역 이름

        Returns:
            PathResult (출발역 -> 도착역 순서)

        Raises:
            UnreachableException: 도착역까지 경로가 없을 때
        """
        if start == end:
            return PathResult(
                stations=[self.graph.station(start)],
                total_duration=0,
                transfers=0,
                transfer_details=[],
            )

        distances: Dict[str, float] = {start: 0}
        previous: Dict[str, str] = {}
        visited = set()
        # (거리, 역 이름) => 동일 거리일 때 역 이름 사전순으로 선택
        heap = [(0, start)]

        while heap:
            current_dist, current = heapq.heappop(heap)

            if current in visited:
                continue
            visited.add(current)

            if current == end:
                break

            for neighbor in self.graph.neighbors(current):
                if neighbor in visited:
                    continue

                new_dist = current_dist + self.edge_weight(current, neighbor)
                if new_dist < distances.get(neighbor, float("inf")):
                    distances[neighbor] = new_dist
                    previous[neighbor] = current
                    heapq.heappush(heap, (new_dist, neighbor))

        if end not in visited:
            logger.info(f"경로 없음: {start} → {end} (방문 {len(visited)}개 역)")
            raise UnreachableException(
                f"{start}에서 {end}까지 경로를 찾을 수 없습니다"
            )

        return self._reconstruct(start, end, distances[end], previous)

    def _reconstruct(
        self, start: str, end: str, total: float, previous: Dict[str, str]
    ) -> PathResult:
        """도착역 -> 출발역 역추적 후 뒤집기"""
        names = [end]
        while names[-1] != start:
            names.append(previous[names[-1]])
        names.reverse()

        stations: List[Station] = [self.graph.station(n) for n in names]
        transfer_details: List[TransferEvent] = []
        total_distance = 0.0

        for prev, curr in zip(stations, stations[1:]):
            penalty = self._transfer_penalty(prev.name, curr.name)
            if penalty is not None:
                transfer_details.append(
                    TransferEvent(
                        station=prev.name,
                        from_line=prev.line,
                        to_line=curr.line,
                        duration=penalty,
                    )
                )
            if prev.coordinate is not None and curr.coordinate is not None:
                total_distance += self.distance_calculator.meters_between(
                    prev.coordinate, curr.coordinate
                )

        logger.debug(
            f"경로 탐색 완료: {' → '.join(names)}, {total}초, "
            f"환승 {len(transfer_details)}회"
        )

        return PathResult(
            stations=stations,
            total_duration=total,
            transfers=len(transfer_details),
            transfer_details=transfer_details,
            total_distance=total_distance,
        )
