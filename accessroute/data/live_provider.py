"""
서울 열린데이터 광장 / 서울 버스 정보 API 기반 데이터 제공자

- 지하철 시간표(SearchSTNTimeTableByIDService) NEXT_STN => 역간 연결
- 교통약자 이용시설 승강기 가동현황(SeoulMetroFaciInfo) => 접근성 시설
- 버스 정류소/노선 정보(ws.bus.go.kr) => 정류장, 노선

모든 전송/응답 형식 오류는 CollaboratorUnavailableException으로 변환
"""

import logging
import re
from threading import Lock
from typing import Any, Dict, Iterable, List, Optional

import httpx

from accessroute.algorithms.nearest import filter_within_radius
from accessroute.algorithms.transfer_table import TransferCostTable
from accessroute.core.config import BUS_HUB_STOP_NAME, UNKNOWN_LINE, settings
from accessroute.core.exceptions import CollaboratorUnavailableException
from accessroute.data.provider import DataProvider
from accessroute.data.reference_data import (
    STATION_CODES,
    STATION_COORDINATES,
    STATION_LINES,
    station_codes_by_name,
)
from accessroute.data.transfer_loader import load_transfer_table
from accessroute.models.domain import (
    AccessibilityFacility,
    BusRoute,
    BusRouteType,
    BusStop,
    Coordinate,
    FacilityType,
)

logger = logging.getLogger(__name__)

TIMETABLE_SERVICE = "SearchSTNTimeTableByIDService"
FACILITY_SERVICE = "SeoulMetroFaciInfo"
FACILITY_PAGE_SIZE = 1000

# 서울 열린데이터 "해당하는 데이터가 없습니다"
NO_DATA_CODE = "INFO-200"

# 승강기 구분 코드
ELEVATOR_TYPES = {
    "EL": FacilityType.ELEVATOR,
    "ES": FacilityType.ESCALATOR,
    "WL": FacilityType.WHEELCHAIR_LIFT,
}

_EXIT_PATTERN = re.compile(r"(\d+)번 출입구")
_LINE_SUFFIX_PATTERN = re.compile(r"\(\d+\)$")


def clean_station_name(raw: str) -> str:
    """'시청(1)' -> '시청'"""
    return _LINE_SUFFIX_PATTERN.sub("", (raw or "").strip())


def convert_facility_row(row: Dict[str, Any]) -> Optional[AccessibilityFacility]:
    """SeoulMetroFaciInfo row => AccessibilityFacility (좌표를 알 수 없는 역은 None)"""
    station_name = clean_station_name(row.get("STN_NM", ""))
    coordinate = STATION_COORDINATES.get(station_name)
    if coordinate is None:
        return None

    name = row.get("ELVTR_NM") or "승강기"
    position = row.get("INSTL_PSTN") or ""
    exit_match = _EXIT_PATTERN.search(position)

    return AccessibilityFacility(
        id=f"{row.get('STN_CD', '')}-{name}",
        type=ELEVATOR_TYPES.get(row.get("ELVTR_SE"), FacilityType.WHEELCHAIR_RAMP),
        coordinate=coordinate,
        name=name,
        description=(
            f"{station_name}의 {name}. 위치: {position or '정보 없음'}, "
            f"운행구간: {row.get('OPR_SEC') or '정보 없음'}"
        ),
        is_operational=row.get("USE_YN") == "사용가능",
        # API에서 운영 시간을 제공하지 않음
        operating_hours="05:30 - 24:00",
        station_name=station_name,
        line=STATION_LINES.get(station_name),
        exit_number=f"{exit_match.group(1)}번 출구" if exit_match else None,
    )


class LiveDataProvider(DataProvider):
    name = "live"

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        api_key: Optional[str] = None,
        bus_api_key: Optional[str] = None,
        transfer_csv_path: Optional[str] = None,
    ):
        self.client = client or httpx.Client(timeout=settings.HTTP_TIMEOUT_SECONDS)
        self.api_key = api_key if api_key is not None else settings.SEOUL_API_KEY
        self.bus_api_key = (
            bus_api_key if bus_api_key is not None else settings.SEOUL_BUS_API_KEY
        )
        self.transfer_csv_path = transfer_csv_path or settings.TRANSFER_CSV_PATH
        self.openapi_base = settings.SEOUL_OPENAPI_BASE_URL.rstrip("/")
        self.bus_base = settings.SEOUL_BUS_API_BASE_URL.rstrip("/")

        self._facility_lock = Lock()
        self._facilities: Optional[List[AccessibilityFacility]] = None

    # 공통
    def _get_json(self, url: str, params: Optional[Dict[str, Any]] = None) -> Dict:
        try:
            response = self.client.get(url, params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.error(f"외부 API 호출 실패: {url} ({e})")
            raise CollaboratorUnavailableException(f"외부 API 호출 실패: {e}")
        except ValueError as e:
            logger.error(f"외부 API 응답 파싱 실패: {url} ({e})")
            raise CollaboratorUnavailableException("외부 API 응답 형식이 올바르지 않습니다")

        if not isinstance(payload, dict):
            raise CollaboratorUnavailableException("외부 API 응답 형식이 올바르지 않습니다")
        return payload

    def _openapi_rows(self, service: str, *path: Any) -> List[Dict]:
        segments = "/".join(str(p) for p in path)
        url = f"{self.openapi_base}/{self.api_key}/json/{service}/{segments}/"
        payload = self._get_json(url)

        body = payload.get(service)
        if body is None:
            result = payload.get("RESULT") or {}
            if result.get("CODE") == NO_DATA_CODE:
                return []
            raise CollaboratorUnavailableException(
                f"{service} 응답 오류: {result.get('MESSAGE', '알 수 없는 응답')}"
            )

        rows = body.get("row") or []
        if not isinstance(rows, list):
            rows = [rows]
        return [row for row in rows if isinstance(row, dict)]

    def _bus_items(self, path: str, **params) -> List[Dict]:
        payload = self._get_json(
            f"{self.bus_base}/{path}",
            params={"serviceKey": self.bus_api_key, "resultType": "json", **params},
        )
        body = payload.get("msgBody")
        if body is None:
            raise CollaboratorUnavailableException(f"버스 API 응답 오류: {path}")

        items = body.get("itemList") or []
        if not isinstance(items, list):
            items = [items]
        # null 항목 등 dict가 아닌 항목은 무시
        return [item for item in items if isinstance(item, dict)]

    # 지하철
    def fetch_next_stations(self, station_code: str, station_name: str) -> List[str]:
        """평일(1) 상행(1) 시간표의 NEXT_STN 목록"""
        rows = self._openapi_rows(TIMETABLE_SERVICE, 1, 1000, station_code, 1, 1)
        next_stations: List[str] = []
        for row in rows:
            next_name = (row.get("NEXT_STN") or "").strip()
            if next_name and next_name != station_name and next_name not in next_stations:
                next_stations.append(next_name)
        return next_stations

    def load_connections(self) -> Dict[str, List[str]]:
        """
        역별 시간표 조회 => 역간 연결
        한 역의 조회 실패는 해당 역을 연결 없음으로 두고 계속 진행
        """
        connections: Dict[str, List[str]] = {}
        failed: List[str] = []
        for code, name in STATION_CODES.items():
            if name in connections:
                continue
            try:
                connections[name] = self.fetch_next_stations(code, name)
            except CollaboratorUnavailableException as e:
                logger.warning(f"{name}({code}) 시간표 조회 실패 => 연결 없음 처리: {e.message}")
                connections[name] = []
                failed.append(name)

        if failed:
            logger.warning(f"⚠️ 시간표 조회 실패 역 {len(failed)}개: {', '.join(failed)}")
        logger.info(f"✓ 시간표 기반 역 연결 정보 조회 완료: {len(connections)}개 역")
        return connections

    def line_of(self, station_name: str) -> str:
        return STATION_LINES.get(station_name, UNKNOWN_LINE)

    def station_coordinates(self) -> Dict[str, Coordinate]:
        return dict(STATION_COORDINATES)

    def station_codes(self) -> Dict[str, str]:
        return station_codes_by_name()

    def load_transfer_table(self) -> TransferCostTable:
        return load_transfer_table(self.transfer_csv_path)

    # 버스
    def _to_bus_stop(self, item: Dict) -> Optional[BusStop]:
        try:
            coordinate = Coordinate(lat=float(item["gpsY"]), lng=float(item["gpsX"]))
        except (KeyError, TypeError, ValueError):
            logger.debug(f"좌표 없는 정류장 무시: {item.get('stationNm')}")
            return None

        return BusStop(
            id=str(item.get("stationId") or item.get("station") or ""),
            name=item.get("stationNm") or "",
            coordinate=coordinate,
            ars_id=item.get("arsId") or None,
        )

    def find_nearby_bus_stops(
        self, coordinate: Coordinate, radius_m: float
    ) -> List[BusStop]:
        items = self._bus_items(
            "stationinfo/getStationByPos",
            tmX=coordinate.lng,
            tmY=coordinate.lat,
            radius=int(radius_m),
        )
        stops = [s for s in (self._to_bus_stop(item) for item in items) if s]
        return filter_within_radius(coordinate, stops, radius_m)

    def bus_route_ids_at(self, stop: BusStop) -> List[str]:
        if stop.route_ids:
            return list(stop.route_ids)
        if not stop.ars_id:
            return []

        items = self._bus_items("stationinfo/getStationByUid", arsId=stop.ars_id)
        route_ids: List[str] = []
        for item in items:
            route_id = str(item.get("busRouteId") or "")
            if route_id and route_id not in route_ids:
                route_ids.append(route_id)
        return route_ids

    def get_bus_route(self, route_id: str) -> Optional[BusRoute]:
        items = self._bus_items("busRouteInfo/getRouteInfo", busRouteId=route_id)
        if not items:
            return None

        item = items[0]
        try:
            headway = int(item.get("term") or 10)
        except ValueError:
            headway = 10

        return BusRoute(
            id=route_id,
            name=item.get("busRouteNm") or route_id,
            type=BusRouteType.from_code(item.get("routeType")),
            start_stop_name=item.get("stStationNm") or "기점",
            end_stop_name=item.get("edStationNm") or "종점",
            first_bus_time=item.get("firstBusTm") or "05:00",
            last_bus_time=item.get("lastBusTm") or "23:00",
            headway_minutes=headway,
        )

    def bus_hub_stop(self) -> Optional[BusStop]:
        hub_coordinate = STATION_COORDINATES["시청"]
        stops = self.find_nearby_bus_stops(hub_coordinate, 300)
        for stop in stops:
            if stop.name == BUS_HUB_STOP_NAME:
                return stop
        return stops[0] if stops else None

    # 접근성 시설
    def _facility_total_count(self) -> int:
        """첫 페이지(1/1) 조회로 전체 건수 확인"""
        url = f"{self.openapi_base}/{self.api_key}/json/{FACILITY_SERVICE}/1/1/"
        payload = self._get_json(url)
        body = payload.get(FACILITY_SERVICE)
        if body is None:
            result = payload.get("RESULT") or {}
            if result.get("CODE") == NO_DATA_CODE:
                return 0
            raise CollaboratorUnavailableException(
                f"{FACILITY_SERVICE} 응답 오류: {result.get('MESSAGE', '알 수 없는 응답')}"
            )
        try:
            return int(body.get("list_total_count") or 0)
        except (TypeError, ValueError):
            raise CollaboratorUnavailableException(
                f"{FACILITY_SERVICE} 전체 건수 형식 오류"
            )

    def _load_facilities(self) -> List[AccessibilityFacility]:
        with self._facility_lock:
            if self._facilities is not None:
                return self._facilities

            total_count = self._facility_total_count()

            rows: List[Dict] = []
            start = 1
            while start <= total_count:
                end = min(start + FACILITY_PAGE_SIZE - 1, total_count)
                page = self._openapi_rows(FACILITY_SERVICE, start, end)
                if not page:
                    break
                rows.extend(page)
                start += FACILITY_PAGE_SIZE

            facilities: List[AccessibilityFacility] = []
            seen = set()
            for row in rows:
                facility = convert_facility_row(row)
                if facility is None or facility.id in seen:
                    continue
                seen.add(facility.id)
                facilities.append(facility)

            logger.info(
                f"✓ 승강기 시설 정보 로드 완료: {len(facilities)}개 (원본 {len(rows)}행)"
            )
            self._facilities = facilities
            return facilities

    def facilities_near(
        self,
        coordinate: Coordinate,
        radius_m: float,
        types: Optional[Iterable[FacilityType]] = None,
    ) -> List[AccessibilityFacility]:
        candidates = self._load_facilities()
        if types:
            wanted = set(types)
            candidates = [f for f in candidates if f.type in wanted]
        return filter_within_radius(coordinate, candidates, radius_m)

    def close(self):
        self.client.close()
