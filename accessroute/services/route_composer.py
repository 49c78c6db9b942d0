"""
복합 경로(도보 + 지하철/버스) 구성 서비스

지하철/버스 후보를 병렬로 계산하고 더 빠른 수단을 선택하여
출발지 -> 도착지까지 끊김 없는 구간(leg) 리스트를 만든다
"""

import json
import logging
import math
import time
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from functools import lru_cache
from typing import List, Optional

from accessroute.algorithms.dijkstra import ShortestPathEngine
from accessroute.algorithms.distance_calculator import get_distance_calculator
from accessroute.algorithms.nearest import find_nearest, find_nearest_within
from accessroute.algorithms.station_graph import StationGraph
from accessroute.algorithms.transfer_table import TransferCostTable
from accessroute.core.config import (
    MAX_WALKING_DISTANCE_M,
    STATION_SEARCH_RADIUS_M,
    WALKING_SPEED_MPS,
    settings,
)
from accessroute.core.exceptions import (
    AccessRouteException,
    CollaboratorUnavailableException,
    InvalidLocationException,
    NotFoundException,
)
from accessroute.data import cache
from accessroute.data.provider import DataProvider
from accessroute.models.domain import (
    BusDetail,
    BusRouteResult,
    BusStop,
    CombinedRoute,
    Coordinate,
    PathResult,
    RouteLeg,
    RoutePoint,
    Station,
    SubwayDetail,
    TransportMode,
    WalkDetail,
)
from accessroute.services.accessibility_service import AccessibilityService
from accessroute.services.bus_routing_service import BusRoutingService

logger = logging.getLogger(__name__)

ORIGIN_NAME = "출발지"
DESTINATION_NAME = "도착지"

_executor: Optional[ThreadPoolExecutor] = None


def get_thread_pool() -> ThreadPoolExecutor:
    global _executor
    if _executor is None:
        # 요청당 후보 2개 => 워커 수 제한 (config에서 설정)
        _executor = ThreadPoolExecutor(
            max_workers=settings.COMPOSER_MAX_WORKERS,
            thread_name_prefix="route_worker_",
        )
    return _executor


def station_point(station: Station) -> RoutePoint:
    return RoutePoint(name=station.name, coordinate=station.coordinate)


def stop_point(stop: BusStop) -> RoutePoint:
    return RoutePoint(name=stop.name, coordinate=stop.coordinate)


class RouteComposer:
    def __init__(
        self,
        provider: DataProvider,
        graph: Optional[StationGraph] = None,
        transfer_table: Optional[TransferCostTable] = None,
        bus_service: Optional[BusRoutingService] = None,
        accessibility_service: Optional[AccessibilityService] = None,
        subway_timeout: float = settings.SUBWAY_SEARCH_TIMEOUT_SECONDS,
        bus_timeout: float = settings.BUS_SEARCH_TIMEOUT_SECONDS,
    ):
        self.provider = provider
        self._graph = graph
        self._transfer_table = transfer_table
        self._engine: Optional[ShortestPathEngine] = None
        self.bus_service = bus_service or BusRoutingService(provider)
        self.accessibility_service = accessibility_service or AccessibilityService(
            provider
        )
        self.subway_timeout = subway_timeout
        self.bus_timeout = bus_timeout
        self.distance_calculator = get_distance_calculator()

    @property
    def engine(self) -> ShortestPathEngine:
        """
        지하철 경로 엔진
        역 그래프가 없으면 이 composer의 provider로 캐시를 구축한다
        구축에 실패하면 다음 요청에서 다시 시도

        Raises:
            CollaboratorUnavailableException: 역 그래프/환승 정보 로드 실패
        """
        if self._engine is None:
            try:
                graph = (
                    self._graph
                    if self._graph is not None
                    else cache.get_station_graph(self.provider)
                )
                transfer_table = (
                    self._transfer_table
                    if self._transfer_table is not None
                    else cache.get_transfer_table(self.provider)
                )
            except CollaboratorUnavailableException:
                logger.warning("역 그래프 로드 실패 => 지하철 경로 사용 불가")
                raise
            except Exception as e:
                logger.error(f"역 그래프 로드 중 예상치 못한 오류: {e}", exc_info=True)
                raise CollaboratorUnavailableException(f"역 그래프 로드 실패: {e}")

            self._engine = ShortestPathEngine(graph, transfer_table)
        return self._engine

    @property
    def graph(self) -> StationGraph:
        return self.engine.graph

    def compose_route(
        self,
        origin: Coordinate,
        destination: Coordinate,
        include_accessibility: bool = True,
    ) -> CombinedRoute:
        """
        좌표 -> 좌표 복합 경로 계산

        Args:
            origin: 출발지 좌표
            destination: 도착지 좌표
            include_accessibility: 경로 주변 접근성 시설 포함 여부

        Returns:
            CombinedRoute (구간 최소 1개)

        Raises:
            InvalidLocationException: 좌표가 없거나 범위를 벗어날 때
        """
        self._validate(origin, ORIGIN_NAME)
        self._validate(destination, DESTINATION_NAME)

        start_time = time.time()

        # 1. 지하철/버스 후보 병렬 계산
        executor = get_thread_pool()
        submitted_at = time.monotonic()
        subway_future = executor.submit(self._subway_candidate, origin, destination)
        bus_future = executor.submit(self.bus_service.find_bus_route, origin, destination)

        subway = self._await_candidate(
            subway_future, submitted_at + self.subway_timeout, "지하철"
        )
        bus = self._await_candidate(bus_future, submitted_at + self.bus_timeout, "버스")

        # 2. 수단 선택 => 지하철이 더 빠를 때만 지하철 (동률이면 버스)
        subway_duration = subway.total_duration if subway else math.inf
        bus_duration = bus.total_duration if bus else math.inf

        origin_point = RoutePoint(ORIGIN_NAME, origin)
        destination_point = RoutePoint(DESTINATION_NAME, destination)

        if subway is None and bus is None:
            logger.info("대중교통 경로 없음 => 도보 경로")
            route = CombinedRoute(
                legs=[self._walk_leg(origin_point, destination_point)],
                transfers=0,
                selected_mode=TransportMode.WALK,
            )
            points = [origin, destination]
        elif subway_duration < bus_duration:
            route = self._subway_route(subway, origin_point, destination_point)
            points = [s.coordinate for s in subway.stations]
        else:
            route = self._bus_route(bus, origin_point, destination_point)
            points = [s.coordinate for s in bus.stops]

        # 3. 접근성 시설
        if include_accessibility:
            route.facilities = self.accessibility_service.collect_facilities(points)

        calculation_time_ms = (time.time() - start_time) * 1000
        logger.info(
            f"복합 경로 계산 완료: mode={route.selected_mode.value}, "
            f"legs={len(route.legs)}, {route.total_duration:.0f}초, "
            f"{calculation_time_ms:.2f}ms"
        )
        self._log_metrics(route, subway_duration, bus_duration, calculation_time_ms)

        return route

    def plan_subway_between(self, origin_name: str, destination_name: str) -> PathResult:
        """역 이름 -> 역 이름 지하철 최단 경로"""
        origin_name = origin_name.strip()
        destination_name = destination_name.strip()

        for name in (origin_name, destination_name):
            if name not in self.graph:
                raise NotFoundException(f"'{name}' 역을 찾을 수 없습니다")

        logger.info(f"지하철 경로 탐색: {origin_name} → {destination_name}")
        return self.engine.shortest_path(origin_name, destination_name)

    def nearest_station(self, coordinate: Coordinate) -> Station:
        self._validate(coordinate, "좌표")
        return find_nearest(coordinate, self.graph.stations_with_coordinates())

    # 후보 계산
    def _subway_candidate(
        self, origin: Coordinate, destination: Coordinate
    ) -> Optional[PathResult]:
        stations = self.graph.stations_with_coordinates()
        start = find_nearest_within(origin, stations, STATION_SEARCH_RADIUS_M)
        end = find_nearest_within(destination, stations, STATION_SEARCH_RADIUS_M)

        path = self.engine.shortest_path(start.name, end.name)
        if path.is_trivial:
            logger.info(f"출발/도착 역 동일: {start.name} => 지하철 후보 제외")
            return None
        return path

    def _await_candidate(self, future: Future, deadline: float, label: str):
        try:
            return future.result(timeout=max(0.0, deadline - time.monotonic()))
        except FuturesTimeoutError:
            future.cancel()
            logger.warning(f"{label} 경로 탐색 timeout => 후보 제외")
        except AccessRouteException as e:
            logger.info(f"{label} 경로 없음 ({e.code}): {e.message}")
        except Exception as e:
            logger.error(f"{label} 경로 탐색 중 예상치 못한 오류: {e}", exc_info=True)
        return None

    # 구간 구성
    def _walk_leg(self, start: RoutePoint, end: RoutePoint) -> RouteLeg:
        straight = self.distance_calculator.meters_between(
            start.coordinate, end.coordinate
        )
        # 도보 거리 제한 => 그 이상은 현실적인 도보 구간이 아님
        distance = min(straight, MAX_WALKING_DISTANCE_M)

        return RouteLeg(
            mode=TransportMode.WALK,
            start=start,
            end=end,
            duration=distance / WALKING_SPEED_MPS,
            distance=distance,
            detail=WalkDetail(
                walking_speed=WALKING_SPEED_MPS,
                straight_distance=straight,
                capped=straight > MAX_WALKING_DISTANCE_M,
            ),
        )

    def _subway_route(
        self, path: PathResult, origin: RoutePoint, destination: RoutePoint
    ) -> CombinedRoute:
        board = station_point(path.origin)
        alight = station_point(path.destination)

        legs = [
            self._walk_leg(origin, board),
            RouteLeg(
                mode=TransportMode.SUBWAY,
                start=board,
                end=alight,
                duration=path.total_duration,
                distance=path.total_distance,
                detail=SubwayDetail(path=path),
            ),
            self._walk_leg(alight, destination),
        ]
        return CombinedRoute(
            legs=legs, transfers=path.transfers, selected_mode=TransportMode.SUBWAY
        )

    def _bus_route(
        self, bus: BusRouteResult, origin: RoutePoint, destination: RoutePoint
    ) -> CombinedRoute:
        legs: List[RouteLeg] = [self._walk_leg(origin, stop_point(bus.start_stop))]

        previous_stop: Optional[BusStop] = None
        for segment in bus.segments:
            # 하차 정류장과 다음 승차 정류장이 다르면 도보 연결
            if previous_stop is not None and previous_stop.id != segment.start_stop.id:
                legs.append(
                    self._walk_leg(stop_point(previous_stop), stop_point(segment.start_stop))
                )

            legs.append(
                RouteLeg(
                    mode=TransportMode.BUS,
                    start=stop_point(segment.start_stop),
                    end=stop_point(segment.end_stop),
                    duration=segment.duration,
                    distance=segment.distance,
                    detail=BusDetail(
                        route_id=segment.route_id,
                        route=segment.route,
                        stops=(segment.start_stop, segment.end_stop),
                    ),
                )
            )
            previous_stop = segment.end_stop

        legs.append(self._walk_leg(stop_point(bus.end_stop), destination))
        return CombinedRoute(
            legs=legs, transfers=bus.transfers, selected_mode=TransportMode.BUS
        )

    @staticmethod
    def _validate(coordinate: Optional[Coordinate], label: str):
        if coordinate is None or not coordinate.is_valid():
            raise InvalidLocationException(f"{label} 좌표가 올바르지 않습니다")

    def _log_metrics(
        self,
        route: CombinedRoute,
        subway_duration: float,
        bus_duration: float,
        calculation_time_ms: float,
    ) -> None:
        """
        경로 선택 메트릭 로깅 => ELK Stack, CloudWatch 등에서 분석하기
        """
        if not settings.ENABLE_ROUTE_METRICS:
            return

        metrics = {
            "event": "route_composition",
            "provider": self.provider.name,
            "selected_mode": route.selected_mode.value,
            "subway_duration": None if math.isinf(subway_duration) else subway_duration,
            "bus_duration": None if math.isinf(bus_duration) else bus_duration,
            "legs": len(route.legs),
            "facilities": len(route.facilities),
            "calculation_time_ms": round(calculation_time_ms, 2),
        }

        logger.info(f"METRICS: {json.dumps(metrics, ensure_ascii=False)}")


@lru_cache()
def get_route_composer() -> RouteComposer:
    from accessroute.data.factory import get_data_provider

    return RouteComposer(get_data_provider())
