"""
Core 설정 및 utilities, 커스텀 예외
"""

from accessroute.core.config import settings

from accessroute.core.exceptions import (
    AccessRouteException,
    NotFoundException,
    UnreachableException,
    CollaboratorUnavailableException,
    InvalidLocationException,
)

__all__ = [
    "settings",
    "AccessRouteException",
    "NotFoundException",
    "UnreachableException",
    "CollaboratorUnavailableException",
    "InvalidLocationException",
]
