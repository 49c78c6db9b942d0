"""
AccessRoute Backend - FastAPI Application

교통약자를 위한 복합(도보 + 지하철 + 버스) 경로 안내 시스템
경로 주변 접근성 시설(엘리베이터, 경사로, 저상버스 등) 제공
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from accessroute.api.v1.router import api_router
from accessroute.core.config import settings
from accessroute.core.exceptions import (
    AccessRouteException,
    CollaboratorUnavailableException,
)
from accessroute.data import cache
from accessroute.data.factory import get_data_provider

# 로깅 설정
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    애플리케이션 생명주기 관리

    서버 시작 시 실행:
    - 데이터 제공자 선택 (fixture / live)
    - 역 그래프 + 환승 정보 캐시 초기화
    """
    # ========== Startup ==========
    logger.info("=" * 60)
    logger.info("AccessRoute Backend 시작 중...")
    logger.info("=" * 60)

    try:
        logger.info(f"1/2 데이터 제공자 초기화 중... (DATA_PROVIDER={settings.DATA_PROVIDER})")
        provider = get_data_provider()

        logger.info("2/2 역 그래프 캐시 초기화 중...")
        try:
            cache.initialize_cache(provider)
        except CollaboratorUnavailableException as e:
            # 지하철 경로만 사용 불가, 첫 경로 요청에서 다시 구축 시도
            logger.warning(f"⚠️ 역 그래프 초기화 실패 => 버스/도보 경로만 제공: {e.message}")

        logger.info("=" * 60)
        logger.info("AccessRoute Backend 시작 완료!")
        logger.info("=" * 60)

    except Exception as e:
        logger.error(f"❌ 초기화 실패: {e}", exc_info=True)
        raise

    # application 실행 <- yield로 제어 반환
    yield

    # ========== Shutdown ==========
    provider.close()
    logger.info("✓ AccessRoute Backend 종료 완료")


# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="""
    ## 교통약자를 위한 복합 경로 안내 시스템

    ### 주요 기능
    - 🚇 지하철 최단 경로 (환승 시간 반영)
    - 🚌 버스 직행/환승 경로
    - 🚶 도보 구간 연결
    - ♿ 경로 주변 접근성 시설 정보
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS 설정
# allow_credentials=True일 때는 allow_origins에 ["*"]를 사용할 수 없음
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API 라우터 등록
app.include_router(api_router, prefix="/v1")


# ========== Health Check Endpoints ==========


@app.get("/")
async def root():
    """
    루트 엔드포인트

    서비스 기본 정보 반환
    """
    return {
        "service": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "status": "running",
        "features": [
            "지하철 최단 경로",
            "버스 경로",
            "복합 경로 구성",
            "접근성 시설 안내",
        ],
        "docs": "/docs",
    }


@app.get("/health")
async def health_check():
    """
    헬스 체크 엔드포인트

    - 데이터 제공자 종류
    - 역 그래프 캐시 상태
    """
    graph_status = "healthy" if cache.is_initialized() else "unhealthy"
    status_code = 200 if graph_status == "healthy" else 503

    content = {
        "status": graph_status,
        "version": settings.VERSION,
        "timestamp": time.time(),
        "components": {
            "data_provider": settings.DATA_PROVIDER,
            "station_graph": graph_status,
        },
    }

    if cache.is_initialized():
        graph = cache.get_station_graph()
        content["graph"] = {"stations": len(graph), "edges": graph.edge_count}

    return JSONResponse(status_code=status_code, content=content)


# ========== Exception Handlers ==========


@app.exception_handler(AccessRouteException)
async def access_route_exception_handler(request, exc: AccessRouteException):
    logger.error(f"요청 처리 실패: {exc.message} ({exc.code})")
    return JSONResponse(
        status_code=400,
        content={"message": exc.message, "code": exc.code},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """
    전역 예외 핸들러

    예상치 못한 오류 처리
    """
    logger.error(f"예상치 못한 오류: {exc}", exc_info=True)

    return JSONResponse(
        status_code=500,
        content={
            "message": "서버 내부 오류가 발생했습니다",
            "detail": str(exc) if settings.DEBUG else "Internal Server Error",
        },
    )


# ========== Development Server ==========

if __name__ == "__main__":
    import uvicorn

    logger.info("개발 서버 시작...")

    uvicorn.run(
        "accessroute.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level="debug" if settings.DEBUG else "info",
        access_log=True,
    )
