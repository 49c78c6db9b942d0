import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

# domain 정의


@dataclass(frozen=True)
class Coordinate:
    lat: float
    lng: float

    def as_tuple(self) -> Tuple[float, float]:
        """(위도, 경도) 튜플 => DistanceCalculator 입력 형식"""
        return (self.lat, self.lng)

    def is_valid(self) -> bool:
        if self.lat is None or self.lng is None:
            return False
        try:
            lat, lng = float(self.lat), float(self.lng)
        except (TypeError, ValueError):
            return False
        if not (math.isfinite(lat) and math.isfinite(lng)):
            return False
        return -90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0


@dataclass(frozen=True)
class Station:
    name: str  # 그래프 내에서 유일
    line: str
    coordinate: Optional[Coordinate] = None
    code: Optional[str] = None


@dataclass(frozen=True)
class TransferEvent:
    station: str  # 노선이 바뀌는 구간의 출발역
    from_line: str
    to_line: str
    duration: float  # 적용된 환승 시간(초)


@dataclass
class PathResult:
    stations: List[Station]
    total_duration: float  # 초
    transfers: int
    transfer_details: List[TransferEvent] = field(default_factory=list)
    total_distance: float = 0.0  # 미터, 좌표가 있는 구간만 합산

    @property
    def origin(self) -> Station:
        return self.stations[0]

    @property
    def destination(self) -> Station:
        return self.stations[-1]

    @property
    def station_names(self) -> List[str]:
        return [s.name for s in self.stations]

    @property
    def lines(self) -> List[str]:
        return [s.line for s in self.stations]

    @property
    def is_trivial(self) -> bool:
        """출발역 == 도착역"""
        return len(self.stations) < 2


# 버스 노선 유형
class BusRouteType(str, Enum):
    TRUNK = "간선버스"  # 파란색
    BRANCH = "지선버스"  # 초록색
    CIRCULAR = "순환버스"  # 노란색
    EXPRESS = "광역버스"  # 빨간색
    AIRPORT = "공항버스"
    NIGHT = "심야버스"
    TOWN = "마을버스"
    REGULAR = "일반버스"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "BusRouteType":
        """서울시 버스 API 노선 유형 코드 변환"""
        return _BUS_ROUTE_TYPE_CODES.get(str(code or "").strip(), cls.BRANCH)


_BUS_ROUTE_TYPE_CODES = {
    "1": BusRouteType.TRUNK,
    "2": BusRouteType.BRANCH,
    "3": BusRouteType.CIRCULAR,
    "4": BusRouteType.EXPRESS,
    "5": BusRouteType.TOWN,
    "6": BusRouteType.AIRPORT,
    "7": BusRouteType.NIGHT,
}


@dataclass(frozen=True)
class BusStop:
    id: str
    name: str
    coordinate: Coordinate
    ars_id: Optional[str] = None  # 정류소 고유번호
    route_ids: Tuple[str, ...] = ()  # 정류장을 지나는 노선 ID


@dataclass(frozen=True)
class BusRoute:
    id: str
    name: str
    type: BusRouteType
    start_stop_name: str
    end_stop_name: str
    first_bus_time: str
    last_bus_time: str
    headway_minutes: int  # 배차 간격 (분)


@dataclass
class BusSegment:
    route_id: str
    route: Optional[BusRoute]
    start_stop: BusStop
    end_stop: BusStop
    duration: float  # 초
    distance: float  # 미터


@dataclass
class BusRouteResult:
    kind: str  # "direct" | "transfer"
    segments: List[BusSegment]
    transfers: int

    @property
    def total_duration(self) -> float:
        return sum(s.duration for s in self.segments)

    @property
    def total_distance(self) -> float:
        return sum(s.distance for s in self.segments)

    @property
    def start_stop(self) -> BusStop:
        return self.segments[0].start_stop

    @property
    def end_stop(self) -> BusStop:
        return self.segments[-1].end_stop

    @property
    def stops(self) -> List[BusStop]:
        """승차 정류장 + 환승 정류장 + 하차 정류장 (중복 제거, 순서 유지)"""
        stops: List[BusStop] = []
        for segment in self.segments:
            for stop in (segment.start_stop, segment.end_stop):
                if not stops or stops[-1].id != stop.id:
                    stops.append(stop)
        return stops


# 접근성 시설 유형 정의
class FacilityType(str, Enum):
    ELEVATOR = "elevator"
    ESCALATOR = "escalator"
    WHEELCHAIR_RAMP = "wheelchair_ramp"
    ACCESSIBLE_TOILET = "accessible_toilet"
    TACTILE_PAVING = "tactile_paving"
    LOW_FLOOR_BUS = "low_floor_bus"
    WHEELCHAIR_LIFT = "wheelchair_lift"
    ACCESSIBLE_ENTRANCE = "accessible_entrance"
    BRAILLE_SIGNAGE = "braille_signage"
    AUDIO_GUIDANCE = "audio_guidance"


@dataclass(frozen=True)
class AccessibilityFacility:
    id: str
    type: FacilityType
    coordinate: Coordinate
    name: str
    description: str = ""
    is_operational: bool = True
    operating_hours: Optional[str] = None
    station_name: Optional[str] = None
    line: Optional[str] = None
    exit_number: Optional[str] = None


# 교통 수단 유형
class TransportMode(str, Enum):
    WALK = "walk"
    SUBWAY = "subway"
    BUS = "bus"


@dataclass(frozen=True)
class RoutePoint:
    name: str
    coordinate: Coordinate


# 구간별 상세 정보 => 수단마다 하나의 variant
@dataclass(frozen=True)
class WalkDetail:
    walking_speed: float
    straight_distance: float  # 제한 적용 전 직선거리
    capped: bool
    kind: TransportMode = field(default=TransportMode.WALK, init=False)


@dataclass(frozen=True)
class SubwayDetail:
    path: PathResult
    kind: TransportMode = field(default=TransportMode.SUBWAY, init=False)


@dataclass(frozen=True)
class BusDetail:
    route_id: str
    route: Optional[BusRoute]
    stops: Tuple[BusStop, ...]
    kind: TransportMode = field(default=TransportMode.BUS, init=False)


LegDetail = Union[WalkDetail, SubwayDetail, BusDetail]


@dataclass
class RouteLeg:
    mode: TransportMode
    start: RoutePoint
    end: RoutePoint
    duration: float  # 초
    distance: float  # 미터
    detail: LegDetail


@dataclass
class CombinedRoute:
    legs: List[RouteLeg]
    transfers: int
    selected_mode: TransportMode
    facilities: List[AccessibilityFacility] = field(default_factory=list)

    @property
    def total_duration(self) -> float:
        return sum(leg.duration for leg in self.legs)

    @property
    def total_distance(self) -> float:
        return sum(leg.distance for leg in self.legs)
