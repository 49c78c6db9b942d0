# 도메인 객체 => API 응답 dict 변환

from typing import Dict, List

from accessroute.models.domain import (
    AccessibilityFacility,
    BusDetail,
    CombinedRoute,
    PathResult,
    RouteLeg,
    RoutePoint,
    SubwayDetail,
    WalkDetail,
)


def _point(point: RoutePoint) -> Dict:
    return {
        "name": point.name,
        "lat": point.coordinate.lat,
        "lng": point.coordinate.lng,
    }


def format_subway_path(path: PathResult) -> Dict:
    return {
        "origin": path.origin.name,
        "destination": path.destination.name,
        "route_sequence": path.station_names,
        "route_lines": path.lines,
        "total_time": round(path.total_duration, 1),
        "total_distance": round(path.total_distance, 1),
        "transfers": path.transfers,
        "transfer_details": [
            {
                "station": t.station,
                "from_line": t.from_line,
                "to_line": t.to_line,
                "duration": t.duration,
            }
            for t in path.transfer_details
        ],
    }


def _leg_details(leg: RouteLeg) -> Dict:
    detail = leg.detail
    result = {"kind": detail.kind.value}

    if isinstance(detail, WalkDetail):
        result.update(
            walking_speed=detail.walking_speed,
            straight_distance=round(detail.straight_distance, 1),
            capped=detail.capped,
        )
    elif isinstance(detail, SubwayDetail):
        result.update(format_subway_path(detail.path))
    elif isinstance(detail, BusDetail):
        route = detail.route
        result.update(
            route_id=detail.route_id,
            route_name=route.name if route else detail.route_id,
            route_type=route.type.value if route else None,
            first_bus_time=route.first_bus_time if route else None,
            last_bus_time=route.last_bus_time if route else None,
            headway_minutes=route.headway_minutes if route else None,
            stops=[
                {
                    "id": s.id,
                    "name": s.name,
                    "ars_id": s.ars_id,
                    "lat": s.coordinate.lat,
                    "lng": s.coordinate.lng,
                }
                for s in detail.stops
            ],
        )
    return result


def format_facility(facility: AccessibilityFacility) -> Dict:
    return {
        "id": facility.id,
        "type": facility.type.value,
        "name": facility.name,
        "lat": facility.coordinate.lat,
        "lng": facility.coordinate.lng,
        "description": facility.description,
        "is_operational": facility.is_operational,
        "operating_hours": facility.operating_hours,
        "station_name": facility.station_name,
        "line": facility.line,
        "exit_number": facility.exit_number,
    }


def format_combined_route(route: CombinedRoute) -> Dict:
    legs: List[Dict] = [
        {
            "mode": leg.mode.value,
            "start": _point(leg.start),
            "end": _point(leg.end),
            "duration": round(leg.duration, 1),
            "distance": round(leg.distance, 1),
            "details": _leg_details(leg),
        }
        for leg in route.legs
    ]
    facilities = [format_facility(f) for f in route.facilities]

    return {
        "selected_mode": route.selected_mode.value,
        "legs": legs,
        "total_duration": round(route.total_duration, 1),
        "total_distance": round(route.total_distance, 1),
        "transfers": route.transfers,
        "accessibility": {"facilities": facilities, "count": len(facilities)},
    }
