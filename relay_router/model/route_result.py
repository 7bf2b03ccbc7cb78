"""RouteResult - Outcome of a single route() call.

Either a complete path from source to target (both inclusive) with its hop
count and total distance, or an explicit "no route" value.
"""

from dataclasses import dataclass
from typing import Optional, Sequence

from relay_router.model.relay import Relay


@dataclass(frozen=True)
class RouteResult:
    """Immutable routing outcome.

    Attributes:
        path: Points from source to target inclusive, or None if no route exists
        hops: Number of relays used (path length minus source and target)
        distance: Sum of consecutive point-to-point distances along path (km)
    """

    path: Optional[tuple[Relay, ...]]
    hops: int
    distance: float

    @classmethod
    def no_route(cls) -> "RouteResult":
        """The result when source and target cannot be connected."""
        return cls(path=None, hops=0, distance=0.0)

    @classmethod
    def from_path(cls, points: Sequence[Relay]) -> "RouteResult":
        """Build a result from a full path, normalizing a single point to no route.

        A path of one point means the search never found a connecting edge.

        Args:
            points: Source, zero or more relays, and target in travel order

        Returns:
            RouteResult with hops and distance computed along points.
        """
        if len(points) < 2:
            return cls.no_route()

        distance = 0.0
        for previous, point in zip(points, points[1:]):
            distance += point.distance(previous)

        return cls(path=tuple(points), hops=len(points) - 2, distance=distance)

    @property
    def found(self) -> bool:
        return self.path is not None

    @property
    def relays(self) -> tuple[Relay, ...]:
        """Intermediate points of the route, endpoints excluded."""
        if self.path is None:
            return ()
        return self.path[1:-1]

    @property
    def names(self) -> Optional[list[str]]:
        """Names of all points on the route, or None if there is no route."""
        if self.path is None:
            return None
        return [point.name for point in self.path]

    def __repr__(self) -> str:
        if self.path is None:
            return "RouteResult(no route)"
        return f"RouteResult({' > '.join(self.names)}, hops={self.hops}, distance={self.distance:.3f}km)"
