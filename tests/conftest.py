"""Shared pytest fixtures for relay_router tests.

Provides stand-in relays with simple, hand-checkable visibility rules so the
routing algorithms can be tested without spherical geometry.

COORDINATE SYSTEM:
    DummyRelay lives on a flat plane. Two relays see each other when their X
    coordinates differ by less than 2, unless a relay lists the exact X
    coordinates it can see. Distances are plain Euclidean distances in the
    plane, so most expected route lengths are small integers.
"""

from math import hypot
from typing import Callable, Optional

import pytest

from relay_router.model.route_result import RouteResult


# =============================================================================
# STAND-IN RELAYS
# =============================================================================


class DummyRelay:
    """Relay on a plane with a simple visibility rule.

    Default rule: visible iff |Δx| < 2.

    With reachable X coordinates given, the relay sees exactly the relays
    standing at those X coordinates (the other side defers to this list, so
    the relation stays commutative).
    """

    def __init__(self, name: str, x: float, y: float, *reachable: float) -> None:
        self.name = name
        self.x = x
        self.y = y
        self.reachable = frozenset(reachable) if reachable else None

    def visible(self, other: "DummyRelay") -> bool:
        if self.reachable is not None:
            return other.x in self.reachable
        if other.reachable is not None:
            return other.visible(self)
        return -2 < self.x - other.x < 2

    def distance(self, other: "DummyRelay") -> float:
        return hypot(self.x - other.x, self.y - other.y)

    def __repr__(self) -> str:
        return f"DummyRelay({self.name}, {self.x}, {self.y})"


class TablePoint:
    """Relay whose visibility and distances come from an explicit table.

    The table maps frozenset({name_a, name_b}) to the distance between two
    points that see each other; pairs missing from the table are not visible.
    Distances need not obey the triangle inequality.
    """

    def __init__(self, name: str, table: dict[frozenset[str], float]) -> None:
        self.name = name
        self.table = table

    def visible(self, other: "TablePoint") -> bool:
        return frozenset((self.name, other.name)) in self.table

    def distance(self, other: "TablePoint") -> float:
        return self.table[frozenset((self.name, other.name))]

    def __repr__(self) -> str:
        return f"TablePoint({self.name})"


def route_names(result: RouteResult) -> Optional[list[str]]:
    """Names along a route, None if there is no route."""
    return result.names


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def relay() -> Callable[..., DummyRelay]:
    """Factory: relay("name", x, y, *reachable_x)."""
    return DummyRelay


@pytest.fixture
def names() -> Callable[[RouteResult], Optional[list[str]]]:
    """Extract point names from a RouteResult."""
    return route_names


@pytest.fixture
def detour_table() -> dict[str, TablePoint]:
    """Direct SOURCE-TARGET link that is longer than a two relay detour.

    Links (distance):
        SOURCE-TARGET (10), SOURCE-A (1), A-B (1), B-TARGET (1)

    Fewest hops: [SOURCE, TARGET] at 10 km. Shortest: [SOURCE, A, B, TARGET] at 3 km.
    """
    table = {
        frozenset(("SOURCE", "TARGET")): 10.0,
        frozenset(("SOURCE", "A")): 1.0,
        frozenset(("A", "B")): 1.0,
        frozenset(("B", "TARGET")): 1.0,
    }
    return {name: TablePoint(name, table) for name in ("SOURCE", "TARGET", "A", "B")}
