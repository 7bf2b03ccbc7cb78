"""Relay - The capability set every routable point shares.

Source, target and relays are interchangeable as far as the routers are
concerned: each needs a name, a visibility test and a distance measure.
Location implements this for real coordinates; tests use simpler stand-ins.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Relay(Protocol):
    """A point a route may start at, pass through, or end at.

    visible() must be commutative: a.visible(b) == b.visible(a).
    """

    name: str

    def visible(self, other: "Relay") -> bool:
        """Tell if there is a direct line of sight to other."""
        ...

    def distance(self, other: "Relay") -> float:
        """Distance to other (km)."""
        ...
