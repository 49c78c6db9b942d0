import os
from dotenv import load_dotenv

load_dotenv()  # 환경변수 읽어오기


class Settings:
    PROJECT_NAME: str = "AccessRoute Backend"
    VERSION: str = "1.0.0"

    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    PORT: int = int(os.getenv("PORT", 8001))

    # 데이터 제공자 선택 => fixture(내장 샘플) / live(서울 열린데이터 API)
    DATA_PROVIDER: str = os.getenv("DATA_PROVIDER", "fixture").lower()

    SEOUL_API_KEY: str = os.getenv("SEOUL_API_KEY", "")
    SEOUL_BUS_API_KEY: str = os.getenv("SEOUL_BUS_API_KEY", "")

    SEOUL_OPENAPI_BASE_URL: str = os.getenv(
        "SEOUL_OPENAPI_BASE_URL", "http://openapi.seoul.go.kr:8088"
    )
    SEOUL_BUS_API_BASE_URL: str = os.getenv(
        "SEOUL_BUS_API_BASE_URL", "http://ws.bus.go.kr/api/rest"
    )

    # 서울교통공사 환승역거리 소요시간 정보 CSV
    TRANSFER_CSV_PATH: str = os.getenv(
        "TRANSFER_CSV_PATH", "data/서울교통공사_환승역거리 소요시간 정보.csv"
    )

    # 외부 호출 timeout (초)
    HTTP_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_TIMEOUT_SECONDS", 5.0))
    SUBWAY_SEARCH_TIMEOUT_SECONDS: float = float(
        os.getenv("SUBWAY_SEARCH_TIMEOUT_SECONDS", 10.0)
    )
    BUS_SEARCH_TIMEOUT_SECONDS: float = float(
        os.getenv("BUS_SEARCH_TIMEOUT_SECONDS", 10.0)
    )
    COMPOSER_MAX_WORKERS: int = int(os.getenv("COMPOSER_MAX_WORKERS", 8))

    # 경로 선택 메트릭 로깅 플래그
    ENABLE_ROUTE_METRICS: bool = (
        os.getenv("ENABLE_ROUTE_METRICS", "true").lower() == "true"
    )

    ALLOWED_ORIGINS: list[str] = os.getenv(
        "ALLOWED_ORIGINS",
        "http://localhost:3000,http://localhost:5173,http://127.0.0.1:3000",
    ).split(",")


settings = Settings()  # 모듈화


# 노선 정보가 없는 역의 기본 노선 라벨
UNKNOWN_LINE = "unknown"

# 역간 기본 이동 시간(초) <- 역간 2분 가정
BASE_EDGE_SECONDS = 120

# 환승 정보가 없을 때의 기본 환승 시간(초) => 3분
DEFAULT_TRANSFER_SECONDS = 180

# 평균 보행 속도(m/s)
WALKING_SPEED_MPS = 1.4

# 도보 구간 최대 거리(m) <- 실제 도보로 이동 가능한 현실적인 거리
MAX_WALKING_DISTANCE_M = 2000.0

# 탐색 반경(m)
STATION_SEARCH_RADIUS_M = 3000.0
BUS_STOP_SEARCH_RADIUS_M = 500.0
FACILITY_SEARCH_RADIUS_M = 200.0

# 버스 소요시간 추정치(초)
BUS_DIRECT_SECONDS = 30 * 60
BUS_TRANSFER_FIRST_LEG_SECONDS = 20 * 60
BUS_TRANSFER_SECOND_LEG_SECONDS = 25 * 60

# 버스 주행 거리 = 직선거리 x 1.3
BUS_DISTANCE_FACTOR = 1.3

# 직행 노선이 없을 때 환승 거점으로 쓰는 정류장
BUS_HUB_STOP_NAME = "시청앞"
