"""
데이터 제공자 (fixture / live) 및 역 그래프 캐시
"""

from accessroute.data.provider import DataProvider
from accessroute.data.fixture_provider import FixtureDataProvider
from accessroute.data.factory import get_data_provider

__all__ = [
    "DataProvider",
    "FixtureDataProvider",
    "get_data_provider",
]
