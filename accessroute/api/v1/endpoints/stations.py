"""
역 조회 REST API 엔드포인트
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from accessroute.algorithms.distance_calculator import get_distance_calculator
from accessroute.core.exceptions import AccessRouteException, NotFoundException
from accessroute.models.domain import Coordinate
from accessroute.models.responses import NearestStationResponse
from accessroute.services.route_composer import RouteComposer, get_route_composer

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/nearest", response_model=NearestStationResponse)
def get_nearest_station(
    lat: float = Query(..., ge=-90, le=90, description="위도"),
    lng: float = Query(..., ge=-180, le=180, description="경도"),
    composer: RouteComposer = Depends(get_route_composer),
):
    """
    좌표에서 가장 가까운 지하철역

    Example:
        GET /v1/stations/nearest?lat=37.4979&lng=127.0276
    """
    coordinate = Coordinate(lat, lng)
    try:
        station = composer.nearest_station(coordinate)
    except NotFoundException as e:
        raise HTTPException(
            status_code=404, detail={"message": e.message, "code": e.code}
        )
    except AccessRouteException as e:
        raise HTTPException(
            status_code=400, detail={"message": e.message, "code": e.code}
        )

    distance = get_distance_calculator().meters_between(
        coordinate, station.coordinate
    )
    logger.info(f"최근접 역: ({lat}, {lng}) → {station.name} ({distance:.0f}m)")

    return {
        "name": station.name,
        "line": station.line,
        "lat": station.coordinate.lat,
        "lng": station.coordinate.lng,
        "distance": round(distance, 1),
    }
