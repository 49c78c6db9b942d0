import logging
from typing import Dict, Iterable, List, Optional

from accessroute.algorithms.nearest import filter_within_radius
from accessroute.algorithms.transfer_table import TransferCostTable
from accessroute.core.config import BUS_HUB_STOP_NAME, UNKNOWN_LINE
from accessroute.data import fixtures
from accessroute.data.provider import DataProvider
from accessroute.data.reference_data import (
    STATION_COORDINATES,
    STATION_LINES,
    station_codes_by_name,
)
from accessroute.models.domain import (
    AccessibilityFacility,
    BusRoute,
    BusStop,
    Coordinate,
    FacilityType,
)

logger = logging.getLogger(__name__)


class FixtureDataProvider(DataProvider):
    """내장 샘플 데이터 제공자 (네트워크 호출 없음)"""

    name = "fixture"

    def __init__(
        self,
        connections: Optional[Dict[str, List[str]]] = None,
        bus_stops: Optional[List[BusStop]] = None,
        bus_routes: Optional[Dict[str, BusRoute]] = None,
        facilities: Optional[List[AccessibilityFacility]] = None,
    ):
        self._connections = (
            connections
            if connections is not None
            else fixtures.build_fixture_connections()
        )
        self._bus_stops = bus_stops if bus_stops is not None else fixtures.BUS_STOPS
        self._bus_routes = (
            bus_routes if bus_routes is not None else fixtures.BUS_ROUTES
        )
        self._facilities = (
            facilities if facilities is not None else fixtures.FACILITIES
        )

    def load_connections(self) -> Dict[str, List[str]]:
        return {k: list(v) for k, v in self._connections.items()}

    def line_of(self, station_name: str) -> str:
        return STATION_LINES.get(station_name, UNKNOWN_LINE)

    def station_coordinates(self) -> Dict[str, Coordinate]:
        return dict(STATION_COORDINATES)

    def station_codes(self) -> Dict[str, str]:
        return station_codes_by_name()

    def load_transfer_table(self) -> TransferCostTable:
        return TransferCostTable(fixtures.FALLBACK_TRANSFERS)

    def find_nearby_bus_stops(
        self, coordinate: Coordinate, radius_m: float
    ) -> List[BusStop]:
        return filter_within_radius(coordinate, self._bus_stops, radius_m)

    def bus_route_ids_at(self, stop: BusStop) -> List[str]:
        return list(stop.route_ids)

    def get_bus_route(self, route_id: str) -> Optional[BusRoute]:
        return self._bus_routes.get(route_id)

    def bus_hub_stop(self) -> Optional[BusStop]:
        for stop in self._bus_stops:
            if stop.name == BUS_HUB_STOP_NAME:
                return stop
        return None

    def facilities_near(
        self,
        coordinate: Coordinate,
        radius_m: float,
        types: Optional[Iterable[FacilityType]] = None,
    ) -> List[AccessibilityFacility]:
        candidates = self._facilities
        if types:
            wanted = set(types)
            candidates = [f for f in candidates if f.type in wanted]
        return filter_within_radius(coordinate, candidates, radius_m)
