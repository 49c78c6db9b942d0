"""
서울 지하철 기준 정보 (역 코드, 노선, 좌표)

live / fixture 제공자가 공통으로 참조하는 정적 테이블
좌표는 (경도, 위도) 원본 순서가 아닌 Coordinate(lat, lng)로 보관
"""

from typing import Dict

from accessroute.models.domain import Coordinate

# 서울교통공사 역 코드 -> 역 이름 (시간표 API 조회용)
STATION_CODES: Dict[str, str] = {
    "0150": "서울역",
    "0151": "시청",
    "0152": "종각",
    "0153": "종로3가",
    "0154": "동대문",
    "0201": "신도림",
    "0202": "영등포",
    "0222": "강남",
    "0221": "역삼",
    "0309": "지축",
    "0342": "왕십리",
    "0409": "당고개",
    "0426": "혜화",
    "0433": "삼성",
    "4126": "언주",
    "2561": "마천",
}

STATION_LINES: Dict[str, str] = {
    "서울역": "1호선",
    "시청": "1호선",
    "종각": "1호선",
    "종로3가": "1호선",
    "동대문": "1호선",
    "영등포": "1호선",
    "신도림": "2호선",
    "을지로입구": "2호선",
    "을지로3가": "2호선",
    "동대문역사문화공원": "2호선",
    "왕십리": "2호선",
    "삼성": "2호선",
    "선릉": "2호선",
    "역삼": "2호선",
    "강남": "2호선",
    "교대": "2호선",
    "지축": "3호선",
    "당고개": "4호선",
    "혜화": "4호선",
    "마천": "5호선",
    "언주": "9호선",
}

STATION_COORDINATES: Dict[str, Coordinate] = {
    "서울역": Coordinate(37.5550, 126.9707),
    "시청": Coordinate(37.5665, 126.9784),
    "종각": Coordinate(37.5700, 126.9810),
    "종로3가": Coordinate(37.5710, 126.9920),
    "동대문": Coordinate(37.5710, 127.0090),
    "신도림": Coordinate(37.5090, 126.8910),
    "영등포": Coordinate(37.5160, 126.9070),
    "을지로입구": Coordinate(37.5660, 126.9822),
    "을지로3가": Coordinate(37.5662, 126.9917),
    "동대문역사문화공원": Coordinate(37.5647, 127.0058),
    "왕십리": Coordinate(37.5610, 127.0370),
    "삼성": Coordinate(37.5080, 127.0630),
    "선릉": Coordinate(37.5045, 127.0490),
    "역삼": Coordinate(37.5000, 127.0360),
    "강남": Coordinate(37.4979, 127.0276),
    "교대": Coordinate(37.4934, 127.0140),
    "지축": Coordinate(37.6480, 126.9150),
    "당고개": Coordinate(37.6700, 127.0790),
    "혜화": Coordinate(37.5820, 127.0020),
    "언주": Coordinate(37.5070, 127.0340),
    "마천": Coordinate(37.4950, 127.1430),
}


def station_codes_by_name() -> Dict[str, str]:
    """역 이름 -> 역 코드"""
    return {name: code for code, name in STATION_CODES.items()}
