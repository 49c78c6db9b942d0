"""
Pytest 설정 및 공통 Fixture
"""

import os
import sys
from pathlib import Path

import pytest

# 테스트는 항상 내장 샘플 데이터 사용 (모듈 임포트 전에 설정해야 함)
os.environ["DATA_PROVIDER"] = "fixture"
os.environ["ENABLE_ROUTE_METRICS"] = "true"

# 프로젝트 루트를 sys.path에 추가
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from accessroute.algorithms.station_graph import StationGraphBuilder  # noqa: E402
from accessroute.algorithms.transfer_table import (  # noqa: E402
    TransferCostTable,
    TransferInfo,
)
from accessroute.data import cache  # noqa: E402
from accessroute.data.fixture_provider import FixtureDataProvider  # noqa: E402
from accessroute.data.reference_data import STATION_COORDINATES  # noqa: E402
from accessroute.models.domain import Coordinate  # noqa: E402


@pytest.fixture
def sample_connections():
    """서울역 -(1호선)- 시청 -(2호선)- 강남"""
    return {
        "서울역": ["시청"],
        "시청": ["강남"],
        "강남": [],
    }


@pytest.fixture
def sample_lines():
    return {"서울역": "1호선", "시청": "1호선", "강남": "2호선"}


@pytest.fixture
def sample_transfer_table():
    return TransferCostTable(
        [TransferInfo("시청", "1호선", "2호선", distance=200, duration=180)]
    )


@pytest.fixture
def sample_graph(sample_connections, sample_lines):
    return StationGraphBuilder.build(
        sample_connections,
        sample_lines,
        coordinates={
            "서울역": STATION_COORDINATES["서울역"],
            "시청": STATION_COORDINATES["시청"],
            "강남": STATION_COORDINATES["강남"],
        },
    )


@pytest.fixture
def fixture_provider():
    return FixtureDataProvider()


@pytest.fixture
def fixture_graph(fixture_provider):
    return StationGraphBuilder.build(
        fixture_provider.load_connections(),
        fixture_provider.line_of,
        coordinates=fixture_provider.station_coordinates(),
        codes=fixture_provider.station_codes(),
    )


@pytest.fixture
def fixture_transfer_table(fixture_provider):
    return fixture_provider.load_transfer_table()


@pytest.fixture
def gangnam():
    return Coordinate(37.4979, 127.0276)


@pytest.fixture
def seoul_station():
    return Coordinate(37.5550, 126.9707)


@pytest.fixture
def city_hall():
    return Coordinate(37.5665, 126.9784)


@pytest.fixture
def remote_location():
    """모든 역/정류장에서 멀리 떨어진 지점 (인천 앞바다)"""
    return Coordinate(37.4000, 126.4000)


@pytest.fixture
def clean_cache():
    """역 그래프 캐시를 fixture 제공자로 다시 구축"""
    cache.clear_cache()
    cache.initialize_cache(FixtureDataProvider())
    yield
    cache.clear_cache()
