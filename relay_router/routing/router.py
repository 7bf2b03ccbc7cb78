"""Router - Strategy selection and a uniform route() entry point.

Example:
    router = Router(relays=satellites, strategy=Strategy.SHORTEST_PATH)
    result = router.route(source, target)
    if result.found:
        print(result.names, result.hops, result.distance)
"""

import logging
from enum import Enum
from typing import Sequence, Union

from relay_router.constants import RouterConfig
from relay_router.model.relay import Relay
from relay_router.model.route_result import RouteResult
from relay_router.routing.strategies import (
    FastRouter,
    FewestHopsRouter,
    RelayRouter,
    ShortestPathRouter,
)

logger = logging.getLogger(__name__)


class Strategy(Enum):
    """Selectable route search strategies."""

    FAST = "fast"
    FEWEST_HOPS = "fewestHops"
    SHORTEST_PATH = "shortestPath"

    @property
    def router_class(self) -> type[RelayRouter]:
        return ROUTER_CLASSES[self]

    @property
    def label(self) -> str:
        """Display name like 'Fewest Hops'."""
        return self.router_class.label

    @classmethod
    def parse(cls, value: Union["Strategy", str]) -> "Strategy":
        """Accept a Strategy member or its string value.

        Raises:
            ValueError: If value names no known strategy.
        """
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown routing strategy '{value}', expected one of: {choices}") from None


ROUTER_CLASSES: dict[Strategy, type[RelayRouter]] = {
    Strategy.FAST: FastRouter,
    Strategy.FEWEST_HOPS: FewestHopsRouter,
    Strategy.SHORTEST_PATH: ShortestPathRouter,
}


def create_router(strategy: Union[Strategy, str], relays: Sequence[Relay] = ()) -> RelayRouter:
    """Construct the router for strategy over relays."""
    return Strategy.parse(strategy).router_class(relays)


class Router:
    """Facade owning one strategy instance over a fixed relay set.

    The same Router may route any number of source/target pairs.
    """

    def __init__(
        self,
        relays: Sequence[Relay] = (),
        strategy: Union[Strategy, str] = RouterConfig.DEFAULT_STRATEGY,
    ) -> None:
        self.strategy = Strategy.parse(strategy)
        self._router = create_router(strategy=self.strategy, relays=relays)
        logger.debug(f"Router: {self.strategy.label} over {len(self._router.relays)} relay(s)")

    @property
    def relays(self) -> tuple[Relay, ...]:
        return self._router.relays

    def route(self, source: Relay, target: Relay) -> RouteResult:
        """Find a route from source to target with the selected strategy."""
        return self._router.route(source=source, target=target)

    def __repr__(self) -> str:
        return f"Router({self.strategy.value}, {len(self.relays)} relays)"
