"""
내장 샘플 데이터

서울 도심 일부 구간(1호선 서울역~동대문, 2호선 을지로입구~교대, 4호선 혜화)
버스 정류장/노선, 접근성 시설
외부 API 없이 동일한 입력에 항상 동일한 결과를 내기 위한 고정 데이터
"""

from typing import Dict, List, Tuple

from accessroute.algorithms.transfer_table import TransferInfo
from accessroute.models.domain import (
    AccessibilityFacility,
    BusRoute,
    BusRouteType,
    BusStop,
    Coordinate,
    FacilityType,
)

# 노선별 역 순서 => 인접 역끼리 양방향 연결
LINE_SEQUENCES: Dict[str, List[str]] = {
    "1호선": ["서울역", "시청", "종각", "종로3가", "동대문"],
    "2호선": [
        "을지로입구",
        "을지로3가",
        "동대문역사문화공원",
        "왕십리",
        "삼성",
        "선릉",
        "역삼",
        "강남",
        "교대",
    ],
}

# 노선 간 연결 (환승 통로)
CROSS_LINE_LINKS: List[Tuple[str, str]] = [
    ("시청", "을지로입구"),
    ("종로3가", "을지로3가"),
    ("동대문", "동대문역사문화공원"),
    ("동대문", "혜화"),
]


def build_fixture_connections() -> Dict[str, List[str]]:
    connections: Dict[str, List[str]] = {}

    def link(a: str, b: str):
        connections.setdefault(a, [])
        connections.setdefault(b, [])
        if b not in connections[a]:
            connections[a].append(b)
        if a not in connections[b]:
            connections[b].append(a)

    for stations in LINE_SEQUENCES.values():
        for prev, curr in zip(stations, stations[1:]):
            link(prev, curr)

    for a, b in CROSS_LINE_LINKS:
        link(a, b)

    return connections


# 환승역거리 소요시간 CSV를 읽지 못할 때 사용하는 기본 환승 정보
FALLBACK_TRANSFERS: List[TransferInfo] = [
    TransferInfo("시청", "1호선", "2호선", 200, 180),
    TransferInfo("종로3가", "1호선", "3호선", 150, 150),
    TransferInfo("종로3가", "1호선", "5호선", 250, 210),
    TransferInfo("동대문역사문화공원", "2호선", "4호선", 180, 160),
    TransferInfo("동대문역사문화공원", "2호선", "5호선", 220, 190),
    TransferInfo("왕십리", "2호선", "5호선", 160, 140),
    TransferInfo("왕십리", "2호선", "경의중앙선", 230, 200),
    TransferInfo("강남", "2호선", "신분당선", 270, 230),
    TransferInfo("교대", "2호선", "3호선", 140, 120),
]


BUS_STOPS: List[BusStop] = [
    BusStop(
        id="23285",
        name="강남역",
        coordinate=Coordinate(37.4979, 127.0276),
        ars_id="22341",
        route_ids=("3412", "4412", "140"),
    ),
    BusStop(
        id="23286",
        name="강남역12번출구",
        coordinate=Coordinate(37.4982, 127.0282),
        ars_id="22342",
        route_ids=("3412", "140", "147"),
    ),
    BusStop(
        id="23001",
        name="시청앞",
        coordinate=Coordinate(37.5665, 126.9784),
        ars_id="01015",
        route_ids=("103", "150", "401"),
    ),
    BusStop(
        id="23002",
        name="시청역",
        coordinate=Coordinate(37.5660, 126.9780),
        ars_id="01016",
        route_ids=("103", "150", "401", "402"),
    ),
    BusStop(
        id="23100",
        name="서울역버스환승센터",
        coordinate=Coordinate(37.5550, 126.9707),
        ars_id="01140",
        route_ids=("150", "401", "402", "M4101"),
    ),
]


BUS_ROUTES: Dict[str, BusRoute] = {
    route.id: route
    for route in [
        BusRoute(
            id="3412",
            name="3412",
            type=BusRouteType.BRANCH,
            start_stop_name="강동공영차고지",
            end_stop_name="강남역",
            first_bus_time="04:30",
            last_bus_time="23:30",
            headway_minutes=10,
        ),
        BusRoute(
            id="140",
            name="140",
            type=BusRouteType.TRUNK,
            start_stop_name="도봉산역",
            end_stop_name="강남역",
            first_bus_time="04:00",
            last_bus_time="23:00",
            headway_minutes=8,
        ),
        BusRoute(
            id="401",
            name="401",
            type=BusRouteType.TRUNK,
            start_stop_name="상계동",
            end_stop_name="서울역",
            first_bus_time="04:30",
            last_bus_time="22:30",
            headway_minutes=7,
        ),
        BusRoute(
            id="M4101",
            name="M4101",
            type=BusRouteType.EXPRESS,
            start_stop_name="상계동",
            end_stop_name="강남역",
            first_bus_time="05:30",
            last_bus_time="23:00",
            headway_minutes=15,
        ),
    ]
}


def _elevator(id, coordinate, name, description, station, line, exit_number=None,
              hours="24시간"):
    return AccessibilityFacility(
        id=id,
        type=FacilityType.ELEVATOR,
        coordinate=coordinate,
        name=name,
        description=description,
        operating_hours=hours,
        station_name=station,
        line=line,
        exit_number=exit_number,
    )


def _escalator(id, coordinate, name, station, line, exit_number):
    return AccessibilityFacility(
        id=id,
        type=FacilityType.ESCALATOR,
        coordinate=coordinate,
        name=name,
        description=(
            f"{name.rsplit(' ', 1)[0]}에 위치한 에스컬레이터입니다. "
            "지하철 승강장에서 지상까지 연결됩니다."
        ),
        operating_hours="05:30 - 24:00",
        station_name=station,
        line=line,
        exit_number=exit_number,
    )


def _exit_elevator(id, coordinate, station, line, exit_number):
    name = f"{station} {exit_number} 엘리베이터"
    return _elevator(
        id,
        coordinate,
        name,
        f"{station} {exit_number}에 위치한 엘리베이터입니다. "
        "지하철 승강장에서 지상까지 연결됩니다.",
        station,
        line,
        exit_number,
    )


def _station_elevator(id, coordinate, station, line):
    return _elevator(
        id,
        coordinate,
        f"{station} 엘리베이터",
        f"{station}에 위치한 엘리베이터입니다.",
        station,
        line,
    )


def _low_floor_bus_stop(id, coordinate, stop_name):
    return AccessibilityFacility(
        id=id,
        type=FacilityType.LOW_FLOOR_BUS,
        coordinate=coordinate,
        name=f"{stop_name} 저상버스 정류장",
        description=f"{stop_name} 버스정류장에서 저상버스 운행. 휠체어 이용 가능.",
        operating_hours="05:00 - 23:00",
    )


GANGNAM = "강남역"
CITY_HALL = "시청역"

FACILITIES: List[AccessibilityFacility] = [
    # 강남역
    _exit_elevator("elev-001", Coordinate(37.4979, 127.0276), GANGNAM, "2호선", "2번 출구"),
    _exit_elevator("elev-002", Coordinate(37.4975, 127.0270), GANGNAM, "2호선", "5번 출구"),
    _exit_elevator("elev-003", Coordinate(37.4982, 127.0282), GANGNAM, "2호선", "11번 출구"),
    _escalator(
        "esc-001", Coordinate(37.4980, 127.0278),
        "강남역 3번 출구 에스컬레이터", GANGNAM, "2호선", "3번 출구",
    ),
    _escalator(
        "esc-002", Coordinate(37.4977, 127.0274),
        "강남역 7번 출구 에스컬레이터", GANGNAM, "2호선", "7번 출구",
    ),
    AccessibilityFacility(
        id="ramp-001",
        type=FacilityType.WHEELCHAIR_RAMP,
        coordinate=Coordinate(37.4978, 127.0275),
        name="강남역 1번 출구 휠체어 경사로",
        description="강남역 1번 출구에 위치한 휠체어 경사로입니다.",
        station_name=GANGNAM,
        line="2호선",
        exit_number="1번 출구",
    ),
    AccessibilityFacility(
        id="toilet-001",
        type=FacilityType.ACCESSIBLE_TOILET,
        coordinate=Coordinate(37.4979, 127.0277),
        name="강남역 장애인 화장실",
        description="강남역 대합실에 위치한 장애인 화장실입니다.",
        operating_hours="05:30 - 24:00",
        station_name=GANGNAM,
        line="2호선",
    ),
    AccessibilityFacility(
        id="tactile-001",
        type=FacilityType.TACTILE_PAVING,
        coordinate=Coordinate(37.4979, 127.0276),
        name="강남역 점자 블록",
        description="강남역 내부 및 출구로 이어지는 점자 블록입니다.",
        station_name=GANGNAM,
        line="2호선",
    ),
    # 시청역
    _exit_elevator("elev-011", Coordinate(37.5665, 126.9784), CITY_HALL, "1호선, 2호선", "1번 출구"),
    _exit_elevator("elev-004", Coordinate(37.5668, 126.9788), CITY_HALL, "1호선, 2호선", "4번 출구"),
    _elevator(
        "elev-005",
        Coordinate(37.5662, 126.9780),
        "시청역 환승 엘리베이터",
        "시청역 1호선과 2호선 사이 환승을 위한 엘리베이터입니다.",
        CITY_HALL,
        "1호선, 2호선",
        hours="05:30 - 24:00",
    ),
    _escalator(
        "esc-004", Coordinate(37.5660, 126.9780),
        "시청역 2번 출구 에스컬레이터", CITY_HALL, "1호선, 2호선", "2번 출구",
    ),
    _escalator(
        "esc-003", Coordinate(37.5667, 126.9786),
        "시청역 5번 출구 에스컬레이터", CITY_HALL, "1호선, 2호선", "5번 출구",
    ),
    AccessibilityFacility(
        id="toilet-002",
        type=FacilityType.ACCESSIBLE_TOILET,
        coordinate=Coordinate(37.5663, 126.9782),
        name="시청역 장애인 화장실",
        description="시청역 대합실에 위치한 장애인 화장실입니다.",
        operating_hours="05:30 - 24:00",
        station_name=CITY_HALL,
        line="1호선, 2호선",
    ),
    AccessibilityFacility(
        id="tactile-002",
        type=FacilityType.TACTILE_PAVING,
        coordinate=Coordinate(37.5664, 126.9783),
        name="시청역 점자 블록",
        description="시청역 내부 및 출구로 이어지는 점자 블록입니다.",
        station_name=CITY_HALL,
        line="1호선, 2호선",
    ),
    # 경로 중간 역
    _station_elevator("elev-006", Coordinate(37.5660, 126.9822), "을지로입구역", "2호선"),
    _station_elevator("elev-007", Coordinate(37.5662, 126.9917), "을지로3가역", "2호선"),
    _station_elevator(
        "elev-008", Coordinate(37.5647, 127.0058), "동대문역사문화공원역", "2호선, 4호선, 5호선"
    ),
    _station_elevator("elev-009", Coordinate(37.5547, 127.0101), "약수역", "3호선, 6호선"),
    _station_elevator("elev-010", Coordinate(37.5270, 127.0280), "압구정역", "3호선"),
    # 저상버스 정류장
    _low_floor_bus_stop("bus-001", Coordinate(37.5670, 126.9784), "시청앞"),
    _low_floor_bus_stop("bus-002", Coordinate(37.4985, 127.0276), "강남역"),
    _low_floor_bus_stop("bus-003", Coordinate(37.5650, 127.0058), "동대문역사문화공원"),
]
