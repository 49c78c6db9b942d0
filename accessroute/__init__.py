"""
AccessRoute - 교통약자를 위한 복합 경로 안내 백엔드
"""

__version__ = "1.0.0"
