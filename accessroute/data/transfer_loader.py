"""
서울교통공사 환승역거리 소요시간 정보 CSV 로더

컬럼: 환승역명, 승차노선, 하차노선, 환승거리(m), 환승소요시간(초)
파일이 없거나 읽을 수 없으면 내장 기본 환승 정보 사용 (경고 로그만 남김)
"""

import csv
import logging
from pathlib import Path
from typing import List, Optional, Union

from accessroute.algorithms.transfer_table import TransferCostTable, TransferInfo
from accessroute.data.fixtures import FALLBACK_TRANSFERS

logger = logging.getLogger(__name__)

COL_STATION = "환승역명"
COL_FROM_LINE = "승차노선"
COL_TO_LINE = "하차노선"
COL_DISTANCE = "환승거리(m)"
COL_DURATION = "환승소요시간(초)"


def parse_transfer_rows(rows) -> List[TransferInfo]:
    transfers: List[TransferInfo] = []
    for line_no, row in enumerate(rows, start=2):
        station = (row.get(COL_STATION) or "").strip()
        from_line = (row.get(COL_FROM_LINE) or "").strip()
        to_line = (row.get(COL_TO_LINE) or "").strip()
        if not station or not from_line or not to_line:
            continue

        try:
            distance = float(row.get(COL_DISTANCE) or 0)
            duration = float(row.get(COL_DURATION) or 0)
        except ValueError:
            logger.warning(f"환승 정보 파싱 실패 (행 {line_no}): {row}")
            continue

        transfers.append(
            TransferInfo(
                station=station,
                from_line=from_line,
                to_line=to_line,
                distance=distance,
                duration=duration,
            )
        )
    return transfers


def read_transfer_csv(csv_path: Union[str, Path]) -> Optional[List[TransferInfo]]:
    """CSV 읽기 => 실패 시 None"""
    path = Path(csv_path)
    if not path.exists():
        logger.warning(f"환승 정보 CSV 파일 없음: {path}")
        return None

    try:
        # 공공데이터 CSV는 BOM이 붙어 있는 경우가 많음
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            transfers = parse_transfer_rows(csv.DictReader(f))
    except (OSError, UnicodeDecodeError, csv.Error) as e:
        logger.warning(f"환승 정보 CSV 읽기 실패: {path} ({e})")
        return None

    if not transfers:
        logger.warning(f"환승 정보 CSV에 사용할 수 있는 행이 없음: {path}")
        return None

    return transfers


def load_transfer_table(csv_path: Optional[Union[str, Path]] = None) -> TransferCostTable:
    transfers = read_transfer_csv(csv_path) if csv_path else None

    if transfers is None:
        logger.warning(
            f"⚠️ 기본 환승 정보로 대체: {len(FALLBACK_TRANSFERS)}개 항목"
        )
        return TransferCostTable(FALLBACK_TRANSFERS)

    logger.info(f"✓ 환승 정보 로드 완료: {len(transfers)}개 항목")
    return TransferCostTable(transfers)
