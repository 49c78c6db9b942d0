from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field

# service 별 응답 구조 정의


class PointInfo(BaseModel):
    name: str = Field(..., description="지점 이름")
    lat: float = Field(..., description="위도")
    lng: float = Field(..., description="경도")


class TransferDetail(BaseModel):
    station: str = Field(..., description="환승 구간 출발역")
    from_line: str = Field(..., description="환승 전 노선")
    to_line: str = Field(..., description="환승 후 노선")
    duration: float = Field(..., description="환승 시간 (초)")


class SubwayRouteResponse(BaseModel):
    origin: str = Field(..., description="출발역")
    destination: str = Field(..., description="도착역")
    route_sequence: List[str] = Field(..., description="역 이름 순서")
    route_lines: List[str] = Field(..., description="노선 순서")
    total_time: float = Field(..., description="총 소요시간 (초)")
    total_distance: float = Field(..., description="총 이동거리 (미터)")
    transfers: int = Field(..., description="환승 횟수")
    transfer_details: List[TransferDetail] = Field(default_factory=list)


# 개별 구간 정보
class RouteLegInfo(BaseModel):
    mode: str = Field(..., description="이동 수단 (walk/subway/bus)")
    start: PointInfo
    end: PointInfo
    duration: float = Field(..., description="소요시간 (초)")
    distance: float = Field(..., description="이동거리 (미터)")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="수단별 상세 정보 (kind 태그 포함)"
    )


class FacilityInfo(BaseModel):
    id: str
    type: str
    name: str
    lat: float
    lng: float
    description: str = ""
    is_operational: bool = True
    operating_hours: Optional[str] = None
    station_name: Optional[str] = None
    line: Optional[str] = None
    exit_number: Optional[str] = None


class AccessibilityInfo(BaseModel):
    facilities: List[FacilityInfo] = Field(default_factory=list)
    count: int = Field(0, description="시설 수")


class CombinedRouteResponse(BaseModel):
    route_id: Optional[str] = Field(None, description="경로 ID")
    selected_mode: str = Field(..., description="선택된 주 이동 수단")
    legs: List[RouteLegInfo] = Field(..., description="구간 리스트")
    total_duration: float = Field(..., description="총 소요시간 (초)")
    total_distance: float = Field(..., description="총 이동거리 (미터)")
    transfers: int = Field(..., description="환승 횟수")
    accessibility: AccessibilityInfo = Field(default_factory=AccessibilityInfo)


class NearestStationResponse(BaseModel):
    name: str = Field(..., description="역 이름")
    line: str = Field(..., description="노선")
    lat: float
    lng: float
    distance: float = Field(..., description="직선거리 (미터)")
