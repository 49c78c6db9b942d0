"""
Business logic services
"""

from accessroute.services.route_composer import RouteComposer, get_route_composer
from accessroute.services.bus_routing_service import BusRoutingService
from accessroute.services.accessibility_service import AccessibilityService

__all__ = [
    "RouteComposer",
    "get_route_composer",
    "BusRoutingService",
    "AccessibilityService",
]
