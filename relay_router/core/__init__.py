"""Core geometry for line-of-sight routing.

This module provides the mathematical backbone for relay routing:
- Geometry: Spherical to Cartesian conversion, visibility and distance
- ORIGIN: Center of the obstructing sphere
"""

from relay_router.core.geometry import EARTH_RADIUS_KM, ORIGIN, Geometry, Vector

__all__ = [
    "Geometry",
    "ORIGIN",
    "EARTH_RADIUS_KM",
    "Vector",
]
