"""Data model classes for relay routing.

- Relay: Protocol shared by every routable point (name, visible, distance)
- Location: Named geographic point with a fixed Cartesian position
- RouteResult: Path, hop count and distance returned by the routers
"""

from relay_router.model.location import Location
from relay_router.model.relay import Relay
from relay_router.model.route_result import RouteResult

__all__ = [
    "Relay",
    "Location",
    "RouteResult",
]
