"""
다익스트라 최단 경로 + 역 그래프 및 유틸리티 함수
"""

from accessroute.algorithms.dijkstra import ShortestPathEngine
from accessroute.algorithms.station_graph import StationGraph, StationGraphBuilder
from accessroute.algorithms.transfer_table import TransferCostTable, TransferInfo
from accessroute.algorithms.distance_calculator import DistanceCalculator
from accessroute.algorithms.nearest import (
    find_nearest,
    find_nearest_within,
    filter_within_radius,
)

__all__ = [
    "ShortestPathEngine",
    "StationGraph",
    "StationGraphBuilder",
    "TransferCostTable",
    "TransferInfo",
    "DistanceCalculator",
    "find_nearest",
    "find_nearest_within",
    "filter_within_radius",
]
