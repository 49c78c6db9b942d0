"""
singleton caching 전략 사용
Thread Lock으로 서버 시작 시 한 번만 역 그래프/환승 정보를 구축하여 메모리에 유지
구축 이후에는 읽기 전용 => 여러 요청이 동시에 참조해도 안전
"""

import logging
from threading import Lock
from typing import Optional

from accessroute.algorithms.station_graph import StationGraph, StationGraphBuilder
from accessroute.algorithms.transfer_table import TransferCostTable
from accessroute.data.provider import DataProvider

logger = logging.getLogger(__name__)

_cache_lock = Lock()
_cache_init = False

# cache data
_station_graph: Optional[StationGraph] = None
_transfer_table: Optional[TransferCostTable] = None


def initialize_cache(provider: Optional[DataProvider] = None):
    """
    역 그래프 + 환승 정보 로드
    Thread-safe singleton pattern
    """
    global _cache_init, _station_graph, _transfer_table

    with _cache_lock:
        if _cache_init:
            logger.info("캐시가 이미 초기화되었습니다.")
            return

        if provider is None:
            from accessroute.data.factory import get_data_provider

            provider = get_data_provider()

        logger.info(f"데이터 캐시 초기화 시작 (provider={provider.name})")

        # 1. 역간 연결 정보 => 역 그래프
        connections = provider.load_connections()
        _station_graph = StationGraphBuilder.build(
            connections,
            provider.line_of,
            coordinates=provider.station_coordinates(),
            codes=provider.station_codes(),
        )
        logger.info(f"✓ 역 그래프 로드 완료: {len(_station_graph)}개 역")

        # 2. 환승 정보
        _transfer_table = provider.load_transfer_table()
        logger.info(f"✓ 환승 정보 로드 완료: {len(_transfer_table)}개 항목")

        _cache_init = True
        logger.info("데이터 캐시 초기화 완료")


def get_station_graph(provider: Optional[DataProvider] = None) -> StationGraph:
    """캐시가 비어 있으면 provider(없으면 설정된 제공자)로 구축"""
    if not _cache_init:
        initialize_cache(provider)
    return _station_graph


def get_transfer_table(provider: Optional[DataProvider] = None) -> TransferCostTable:
    if not _cache_init:
        initialize_cache(provider)
    return _transfer_table


def is_initialized() -> bool:
    return _cache_init


def clear_cache():
    global _cache_init, _station_graph, _transfer_table

    with _cache_lock:
        _station_graph = None
        _transfer_table = None
        _cache_init = False
        logger.info("캐시 초기화됨")


def reload_cache(provider: Optional[DataProvider] = None):
    clear_cache()
    initialize_cache(provider)
