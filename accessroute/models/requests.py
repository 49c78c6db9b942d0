from pydantic import BaseModel, Field

# service별 requests 구조 정의


# 좌표 기반 복합 경로(지하철 + 버스 + 도보) 요청
class CombinedRouteRequest(BaseModel):
    origin_lat: float = Field(..., ge=-90, le=90, description="출발지 위도")
    origin_lng: float = Field(..., ge=-180, le=180, description="출발지 경도")
    destination_lat: float = Field(..., ge=-90, le=90, description="목적지 위도")
    destination_lng: float = Field(..., ge=-180, le=180, description="목적지 경도")
    include_accessibility: bool = Field(
        default=True, description="접근성 시설 정보 포함 여부"
    )


# 역 이름 기반 지하철 경로 요청
class SubwayRouteRequest(BaseModel):
    origin: str = Field(..., min_length=1, description="출발역 이름")
    destination: str = Field(..., min_length=1, description="도착역 이름")
