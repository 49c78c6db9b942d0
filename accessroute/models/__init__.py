"""
pydantic models for 요청, 응답, 도메인 객체
"""


from accessroute.models.requests import CombinedRouteRequest, SubwayRouteRequest
from accessroute.models.responses import (
    CombinedRouteResponse,
    SubwayRouteResponse,
    NearestStationResponse,
)
from accessroute.models.domain import (
    Coordinate,
    Station,
    TransferEvent,
    PathResult,
    BusRouteType,
    BusStop,
    BusRoute,
    BusSegment,
    BusRouteResult,
    FacilityType,
    AccessibilityFacility,
    TransportMode,
    RoutePoint,
    WalkDetail,
    SubwayDetail,
    BusDetail,
    RouteLeg,
    CombinedRoute,
)

__all__ = [
    "CombinedRouteRequest",
    "SubwayRouteRequest",
    "CombinedRouteResponse",
    "SubwayRouteResponse",
    "NearestStationResponse",
    "Coordinate",
    "Station",
    "TransferEvent",
    "PathResult",
    "BusRouteType",
    "BusStop",
    "BusRoute",
    "BusSegment",
    "BusRouteResult",
    "FacilityType",
    "AccessibilityFacility",
    "TransportMode",
    "RoutePoint",
    "WalkDetail",
    "SubwayDetail",
    "BusDetail",
    "RouteLeg",
    "CombinedRoute",
]
