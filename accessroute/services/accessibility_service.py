import logging
from typing import Dict, Iterable, List, Optional

from accessroute.core.config import FACILITY_SEARCH_RADIUS_M
from accessroute.core.exceptions import CollaboratorUnavailableException
from accessroute.data.provider import DataProvider
from accessroute.models.domain import AccessibilityFacility, Coordinate, FacilityType

logger = logging.getLogger(__name__)


class AccessibilityService:
    """경로 위 지점들 주변의 접근성 시설 수집"""

    def __init__(self, provider: DataProvider):
        self.provider = provider

    def collect_facilities(
        self,
        points: Iterable[Optional[Coordinate]],
        radius_m: float = FACILITY_SEARCH_RADIUS_M,
        types: Optional[Iterable[FacilityType]] = None,
    ) -> List[AccessibilityFacility]:
        """
        지점 순서대로 조회 후 시설 ID 기준 병합 (처음 등장한 순서 유지)
        한 지점의 조회 실패는 건너뛰고 나머지 결과를 반환
        """
        types = list(types) if types else None
        merged: Dict[str, AccessibilityFacility] = {}

        for point in points:
            if point is None:
                continue
            try:
                nearby = self.provider.facilities_near(point, radius_m, types)
            except CollaboratorUnavailableException as e:
                logger.warning(
                    f"접근성 시설 조회 실패 (계속 진행): {point.as_tuple()} ({e.message})"
                )
                continue

            for facility in nearby:
                merged.setdefault(facility.id, facility)

        logger.debug(f"접근성 시설 {len(merged)}개 수집")
        return list(merged.values())
