"""
REST API 경로 계산 엔드포인트
"""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException

from accessroute.core.exceptions import (
    AccessRouteException,
    NotFoundException,
    UnreachableException,
)
from accessroute.models.domain import Coordinate
from accessroute.models.requests import CombinedRouteRequest, SubwayRouteRequest
from accessroute.models.responses import CombinedRouteResponse, SubwayRouteResponse
from accessroute.services.route_composer import RouteComposer, get_route_composer
from accessroute.services.route_formatter import (
    format_combined_route,
    format_subway_path,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/combined", response_model=CombinedRouteResponse)
def calculate_combined_route(
    request: CombinedRouteRequest,
    composer: RouteComposer = Depends(get_route_composer),
):
    """
    좌표 기반 복합 경로 계산 (도보 + 지하철/버스)

    - **origin_lat / origin_lng**: 출발지 좌표
    - **destination_lat / destination_lng**: 목적지 좌표
    - **include_accessibility**: 경로 주변 접근성 시설 포함 여부

    Example:
        POST /v1/routes/combined
        {
            "origin_lat": 37.4979,
            "origin_lng": 127.0276,
            "destination_lat": 37.5550,
            "destination_lng": 126.9707
        }
    """
    try:
        logger.info(
            f"복합 경로 계산: ({request.origin_lat}, {request.origin_lng}) → "
            f"({request.destination_lat}, {request.destination_lng})"
        )

        route = composer.compose_route(
            Coordinate(request.origin_lat, request.origin_lng),
            Coordinate(request.destination_lat, request.destination_lng),
            include_accessibility=request.include_accessibility,
        )

        result = format_combined_route(route)
        result["route_id"] = str(uuid.uuid4())

        logger.info(f"복합 경로 계산 완료: {result['route_id']}")
        return result

    except AccessRouteException as e:
        logger.error(f"경로 계산 실패: {e.message}")
        raise HTTPException(
            status_code=400, detail={"message": e.message, "code": e.code}
        )
    except Exception as e:
        logger.error(f"예상치 못한 오류: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"경로 계산 중 오류 발생: {str(e)}")


@router.post("/subway", response_model=SubwayRouteResponse)
def calculate_subway_route(
    request: SubwayRouteRequest,
    composer: RouteComposer = Depends(get_route_composer),
):
    """
    역 이름 기반 지하철 최단 경로

    Example:
        POST /v1/routes/subway
        {
            "origin": "강남",
            "destination": "서울역"
        }
    """
    try:
        path = composer.plan_subway_between(request.origin, request.destination)
        return format_subway_path(path)

    except (NotFoundException, UnreachableException) as e:
        logger.info(f"지하철 경로 없음: {request.origin} → {request.destination}")
        raise HTTPException(
            status_code=404, detail={"message": e.message, "code": e.code}
        )
    except AccessRouteException as e:
        logger.error(f"지하철 경로 계산 실패: {e.message}")
        raise HTTPException(
            status_code=400, detail={"message": e.message, "code": e.code}
        )
