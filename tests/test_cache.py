"""
역 그래프 캐시 테스트
"""

from accessroute.data import cache
from accessroute.data.fixture_provider import FixtureDataProvider


class TestCache:
    def test_initialize_once(self, mocker):
        cache.clear_cache()
        provider = FixtureDataProvider()
        spy = mocker.spy(provider, "load_connections")

        cache.initialize_cache(provider)
        cache.initialize_cache(provider)

        assert cache.is_initialized()
        assert spy.call_count == 1
        cache.clear_cache()

    def test_graph_and_transfer_table(self, clean_cache):
        graph = cache.get_station_graph()
        table = cache.get_transfer_table()

        assert "강남" in graph
        assert graph.station("강남").code == "0222"
        assert table.cost("시청", "1호선", "2호선") == 180

    def test_clear_cache(self, clean_cache):
        cache.clear_cache()

        assert not cache.is_initialized()

    def test_lazy_initialize_on_access(self):
        cache.clear_cache()

        graph = cache.get_station_graph()

        assert cache.is_initialized()
        assert len(graph) > 0
        cache.clear_cache()

    def test_reload_with_other_provider(self, clean_cache):
        provider = FixtureDataProvider(connections={"강남": ["역삼"], "역삼": ["강남"]})

        cache.reload_cache(provider)

        assert len(cache.get_station_graph()) == 2
