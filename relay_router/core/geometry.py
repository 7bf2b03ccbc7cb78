"""Line-of-sight calculations around a spherical obstruction.

Provides the geometric helpers used by every router:
- Spherical to Cartesian conversion (latitude, longitude, altitude)
- Vector arithmetic (difference, dot and cross products, squared length)
- Visibility test between two points around a sphere centered at the origin
- Euclidean distance between two points

Coordinates are in a right-handed Cartesian frame with:
- the sphere's center as origin
- X pointing at latitude 0°, longitude 0°
- Y pointing at latitude 0°, longitude 90°E
- Z pointing at the North pole

All distances are in kilometers.
"""

from math import cos, radians, sin, sqrt
from typing import Sequence

import numpy as np

from relay_router.constants import GeometryConfig

Vector = tuple[float, float, float]

EARTH_RADIUS_KM = GeometryConfig.EARTH_RADIUS_KM


class Geometry:
    """Static methods for line-of-sight geometry around a sphere.

    The obstructing sphere is always centered at the origin. Points passed to
    visible() must lie strictly outside it; Location guarantees this at
    construction time by lifting ground level points by the accuracy offset.
    """

    EARTH_RADIUS_KM = EARTH_RADIUS_KM

    @staticmethod
    def to_cartesian(
        latitude: float,
        longitude: float,
        altitude: float = 0.0,
        surface_radius: float = EARTH_RADIUS_KM,
        accuracy_offset: float = 0.0,
    ) -> Vector:
        """Convert geographic coordinates to Cartesian coordinates.

        Longitude is used as the azimuth and (90° - latitude) as the polar
        angle. Points without altitude are placed accuracy_offset above the
        surface.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees
            altitude: Height above the surface (km)
            surface_radius: Radius of the sphere (km)
            accuracy_offset: Height used instead of a zero altitude (km)

        Returns:
            Tuple (x, y, z) in kilometers.
        """
        theta = radians(longitude)
        phi = radians(90 - latitude)
        r = surface_radius + (altitude or accuracy_offset)

        return (
            r * sin(phi) * cos(theta),
            r * sin(phi) * sin(theta),
            r * cos(phi),
        )

    @staticmethod
    def difference(u: Sequence[float], v: Sequence[float]) -> np.ndarray:
        """Return u - v."""
        return np.subtract(u, v, dtype=np.float64)

    @staticmethod
    def dot_product(u: Sequence[float], v: Sequence[float]) -> float:
        return float(np.dot(np.asarray(u, dtype=np.float64), np.asarray(v, dtype=np.float64)))

    @staticmethod
    def cross_product(u: Sequence[float], v: Sequence[float]) -> np.ndarray:
        return np.cross(np.asarray(u, dtype=np.float64), np.asarray(v, dtype=np.float64))

    @staticmethod
    def length_squared(u: Sequence[float]) -> float:
        return Geometry.dot_product(u, u)

    @staticmethod
    def visible(
        u: Sequence[float],
        v: Sequence[float],
        obstructing_radius: float = EARTH_RADIUS_KM,
    ) -> bool:
        """Tell if the segment between u and v clears a sphere at the origin.

        Uses the point-line distance with the origin as the external point,
        keeping the line parameter t without negation or division:
        - t > 0: the closest approach lies behind u
        - t < -|d|²: the closest approach lies beyond v
        - otherwise the segment is clear only if the line's distance from the
          origin exceeds the radius, i.e. |u × v|² > |d|² · r²

        Points at or within the sphere are not accounted for.

        Reference: http://mathworld.wolfram.com/Point-LineDistance3-Dimensional.html

        Args:
            u: First endpoint (x, y, z)
            v: Second endpoint (x, y, z)
            obstructing_radius: Radius of the sphere (km)

        Returns:
            True if the segment does not touch or cross the sphere.
        """
        d = Geometry.difference(v, u)
        d_length_2 = Geometry.length_squared(d)
        t = Geometry.dot_product(d, u)

        if t > 0 or t < -d_length_2:
            return True

        cross_length_2 = Geometry.length_squared(Geometry.cross_product(u, v))
        return bool(cross_length_2 > d_length_2 * obstructing_radius * obstructing_radius)

    @staticmethod
    def distance(u: Sequence[float], v: Sequence[float]) -> float:
        """Euclidean distance between two points (km)."""
        return sqrt(Geometry.length_squared(Geometry.difference(u, v)))


# Center of the obstructing sphere
ORIGIN: Vector = Geometry.to_cartesian(latitude=0.0, longitude=0.0, surface_radius=0.0)
