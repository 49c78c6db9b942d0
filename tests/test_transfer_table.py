"""
TransferCostTable 테스트
"""

from accessroute.algorithms.transfer_table import TransferCostTable, TransferInfo
from accessroute.core.config import DEFAULT_TRANSFER_SECONDS


class TestTransferCostTable:
    def test_exact_match(self, sample_transfer_table):
        assert sample_transfer_table.cost("시청", "1호선", "2호선") == 180

    def test_default_when_missing(self, sample_transfer_table):
        assert sample_transfer_table.cost("시청", "2호선", "1호선") == DEFAULT_TRANSFER_SECONDS
        assert sample_transfer_table.cost("없는역", "1호선", "2호선") == DEFAULT_TRANSFER_SECONDS

    def test_custom_default(self):
        table = TransferCostTable([], default_duration=240)

        assert table.cost("강남", "2호선", "신분당선") == 240

    def test_first_duplicate_wins(self):
        table = TransferCostTable(
            [
                TransferInfo("왕십리", "2호선", "5호선", 160, 140),
                TransferInfo("왕십리", "2호선", "5호선", 999, 999),
            ]
        )

        assert len(table) == 1
        assert table.cost("왕십리", "2호선", "5호선") == 140

    def test_station_transfers(self, fixture_transfer_table):
        transfers = fixture_transfer_table.station_transfers("종로3가")

        assert [t.to_line for t in transfers] == ["3호선", "5호선"]

    def test_contains(self, sample_transfer_table):
        assert ("시청", "1호선", "2호선") in sample_transfer_table
        assert ("시청", "2호선", "1호선") not in sample_transfer_table
