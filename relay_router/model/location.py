"""Location - A named point on or above the Earth's surface.

A Location is the geometry atom for routing. Its Cartesian position is
computed once from latitude, longitude and altitude and never changes.

Used by:
- Challenge parser (source, target and relays)
- Routers (through the Relay protocol)
"""

from dataclasses import dataclass, field
from math import isfinite

from relay_router.constants import GeometryConfig
from relay_router.core.geometry import Geometry, Vector


@dataclass(frozen=True)
class Location:
    """A named location with geographic coordinates and altitude.

    Invariant: the position lies strictly outside the Earth's sphere.
    Coordinates must be finite and the altitude non-negative; ground level
    locations are lifted by GeometryConfig.ACCURACY_OFFSET_KM so that lines of
    sight starting at them never graze the sphere at their own endpoint.

    Attributes:
        name: Display name (e.g. "SAT7", "SOURCE")
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        altitude: Height above the surface in kilometers
        position: Cartesian (x, y, z) in kilometers, derived

    Example:
        satellite = Location(name="SAT0", latitude=60.1, longitude=24.9, altitude=450.0)
        ground = Location(name="SOURCE", latitude=60.2, longitude=25.0)
        ground.visible(satellite)  # True
    """

    name: str
    latitude: float
    longitude: float
    altitude: float = 0.0
    position: Vector = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Validate coordinates and compute the Cartesian position."""
        for label, value in (
            ("latitude", self.latitude),
            ("longitude", self.longitude),
            ("altitude", self.altitude),
        ):
            if not isfinite(value):
                raise ValueError(f"Location {self.name!r} has non-finite {label}: {value}")
        if self.altitude < 0:
            raise ValueError(f"Location {self.name!r} is below the surface (altitude={self.altitude} km)")

        position = Geometry.to_cartesian(
            latitude=self.latitude,
            longitude=self.longitude,
            altitude=self.altitude,
            surface_radius=GeometryConfig.EARTH_RADIUS_KM,
            accuracy_offset=GeometryConfig.ACCURACY_OFFSET_KM,
        )
        object.__setattr__(self, "position", position)

    def visible(self, other: "Location") -> bool:
        """Tell if the line of sight to other clears the Earth."""
        return Geometry.visible(self.position, other.position, GeometryConfig.EARTH_RADIUS_KM)

    def distance(self, other: "Location") -> float:
        """Straight-line distance to other in kilometers."""
        return Geometry.distance(self.position, other.position)

    def __repr__(self) -> str:
        return f"Location({self.name}, lat={self.latitude:.3f}, lon={self.longitude:.3f}, alt={self.altitude:.1f}km)"
