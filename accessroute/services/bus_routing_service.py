import logging
from typing import List, Optional

from accessroute.algorithms.distance_calculator import get_distance_calculator
from accessroute.core.config import (
    BUS_DIRECT_SECONDS,
    BUS_DISTANCE_FACTOR,
    BUS_STOP_SEARCH_RADIUS_M,
    BUS_TRANSFER_FIRST_LEG_SECONDS,
    BUS_TRANSFER_SECOND_LEG_SECONDS,
)
from accessroute.data.provider import DataProvider
from accessroute.models.domain import (
    BusRouteResult,
    BusSegment,
    BusStop,
    Coordinate,
)

logger = logging.getLogger(__name__)


class BusRoutingService:
    """
    버스 경로 탐색

    1. 출발지/도착지 주변 정류장 (가장 가까운 정류장 사용)
    2. 공통 노선이 있으면 직행
    3. 없으면 환승 거점 정류장을 거쳐 1회 환승
    소요시간은 실시간 정보 없이 고정 추정치 사용
    """

    def __init__(
        self,
        provider: DataProvider,
        stop_radius_m: float = BUS_STOP_SEARCH_RADIUS_M,
    ):
        self.provider = provider
        self.stop_radius_m = stop_radius_m
        self.distance_calculator = get_distance_calculator()

    def find_bus_route(
        self, origin: Coordinate, destination: Coordinate
    ) -> Optional[BusRouteResult]:
        """
        Returns:
            BusRouteResult 또는 경로가 없으면 None

        Raises:
            CollaboratorUnavailableException: 제공자 조회 실패
        """
        start_stops = self.provider.find_nearby_bus_stops(origin, self.stop_radius_m)
        end_stops = self.provider.find_nearby_bus_stops(destination, self.stop_radius_m)

        if not start_stops or not end_stops:
            logger.info(
                f"주변 정류장 없음: 출발 {len(start_stops)}개, 도착 {len(end_stops)}개"
            )
            return None

        start_stop = start_stops[0]
        end_stop = end_stops[0]
        if start_stop.id == end_stop.id:
            logger.info(f"출발/도착 정류장 동일: {start_stop.name}")
            return None

        start_routes = self.provider.bus_route_ids_at(start_stop)
        end_routes = self.provider.bus_route_ids_at(end_stop)

        common = [r for r in start_routes if r in end_routes]
        if common:
            return self._direct_route(common[0], start_stop, end_stop)

        return self._transfer_route(start_stop, end_stop, start_routes, end_routes)

    def _bus_distance(self, a: BusStop, b: BusStop) -> float:
        """직선거리 x 1.3 (실제 도로 주행 거리 근사)"""
        straight = self.distance_calculator.meters_between(
            a.coordinate, b.coordinate
        )
        return straight * BUS_DISTANCE_FACTOR

    def _segment(
        self, route_id: str, start: BusStop, end: BusStop, duration: float
    ) -> BusSegment:
        return BusSegment(
            route_id=route_id,
            route=self.provider.get_bus_route(route_id),
            start_stop=start,
            end_stop=end,
            duration=duration,
            distance=self._bus_distance(start, end),
        )

    def _direct_route(
        self, route_id: str, start_stop: BusStop, end_stop: BusStop
    ) -> BusRouteResult:
        logger.info(f"직행 버스: {route_id} ({start_stop.name} → {end_stop.name})")
        return BusRouteResult(
            kind="direct",
            segments=[self._segment(route_id, start_stop, end_stop, BUS_DIRECT_SECONDS)],
            transfers=0,
        )

    def _transfer_route(
        self,
        start_stop: BusStop,
        end_stop: BusStop,
        start_routes: List[str],
        end_routes: List[str],
    ) -> Optional[BusRouteResult]:
        if not start_routes or not end_routes:
            logger.info("정류장 경유 노선 정보 없음 => 버스 경로 없음")
            return None

        hub = self.provider.bus_hub_stop()
        if hub is None or hub.id in (start_stop.id, end_stop.id):
            logger.info("사용할 수 있는 환승 정류장 없음")
            return None

        hub_routes = self.provider.bus_route_ids_at(hub)

        # 환승 정류장을 지나는 노선 우선
        first_route = next((r for r in start_routes if r in hub_routes), start_routes[0])
        second_route = next((r for r in hub_routes if r in end_routes), end_routes[0])

        logger.info(
            f"환승 버스: {first_route} ({start_stop.name} → {hub.name}), "
            f"{second_route} ({hub.name} → {end_stop.name})"
        )

        return BusRouteResult(
            kind="transfer",
            segments=[
                self._segment(first_route, start_stop, hub, BUS_TRANSFER_FIRST_LEG_SECONDS),
                self._segment(second_route, hub, end_stop, BUS_TRANSFER_SECOND_LEG_SECONDS),
            ],
            transfers=1,
        )
