from abc import ABC, abstractmethod
from typing import Dict, Iterable, List, Optional

from accessroute.algorithms.transfer_table import TransferCostTable
from accessroute.models.domain import (
    AccessibilityFacility,
    BusRoute,
    BusStop,
    Coordinate,
    FacilityType,
)


class DataProvider(ABC):
    """
    경로 탐색에 필요한 외부 데이터 공급 인터페이스

    - FixtureDataProvider: 내장 샘플 데이터 (결정적, 테스트용)
    - LiveDataProvider: 서울 열린데이터 광장 / 서울 버스 API

    live 제공자는 실패 시 CollaboratorUnavailableException을 던지며
    샘플 데이터로 대체하지 않는다
    """

    name: str = "abstract"

    # 지하철
    @abstractmethod
    def load_connections(self) -> Dict[str, List[str]]:
        """역 이름 -> 다음 역 이름 리스트"""

    @abstractmethod
    def line_of(self, station_name: str) -> str:
        pass

    @abstractmethod
    def station_coordinates(self) -> Dict[str, Coordinate]:
        pass

    def station_codes(self) -> Dict[str, str]:
        """역 이름 -> 역 코드 (없으면 빈 dict)"""
        return {}

    @abstractmethod
    def load_transfer_table(self) -> TransferCostTable:
        pass

    # 버스
    @abstractmethod
    def find_nearby_bus_stops(
        self, coordinate: Coordinate, radius_m: float
    ) -> List[BusStop]:
        """반경 내 정류장, 가까운 순"""

    @abstractmethod
    def bus_route_ids_at(self, stop: BusStop) -> List[str]:
        pass

    @abstractmethod
    def get_bus_route(self, route_id: str) -> Optional[BusRoute]:
        pass

    @abstractmethod
    def bus_hub_stop(self) -> Optional[BusStop]:
        """직행 노선이 없을 때 사용할 환승 거점 정류장"""

    # 접근성 시설
    @abstractmethod
    def facilities_near(
        self,
        coordinate: Coordinate,
        radius_m: float,
        types: Optional[Iterable[FacilityType]] = None,
    ) -> List[AccessibilityFacility]:
        pass

    def close(self):
        """외부 연결 정리 (기본 없음)"""
