from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, List, Tuple

from accessroute.core.config import DEFAULT_TRANSFER_SECONDS


# 환승 정보 (같은 역 내 노선 변경)
@dataclass(frozen=True)
class TransferInfo:
    station: str
    from_line: str
    to_line: str
    distance: float  # 미터
    duration: float  # 초


class TransferCostTable:
    """
    (역, 승차노선, 하차노선) -> 환승 소요시간(초)

    정확히 일치하는 항목이 없으면 기본값(180초) 반환
    """

    def __init__(
        self,
        transfers: Iterable[TransferInfo],
        default_duration: float = DEFAULT_TRANSFER_SECONDS,
    ):
        entries: Dict[Tuple[str, str, str], TransferInfo] = {}
        for info in transfers:
            # 중복 키 => 먼저 나온 항목 유지
            entries.setdefault((info.station, info.from_line, info.to_line), info)
        self._entries = MappingProxyType(entries)
        self.default_duration = default_duration

    def cost(self, station: str, from_line: str, to_line: str) -> float:
        info = self._entries.get((station, from_line, to_line))
        return info.duration if info else self.default_duration

    def station_transfers(self, station: str) -> List[TransferInfo]:
        """특정 역의 환승 정보 조회"""
        return [info for key, info in self._entries.items() if key[0] == station]

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
