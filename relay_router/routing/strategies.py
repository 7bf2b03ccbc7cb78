"""Route search strategies over the visibility relation.

Three interchangeable routers share one interface, route(source, target):

**FastRouter:**
    Builds the layered visibility graph, then walks back from the target,
    always stepping to the closest node that sees the current one. Fewest
    hops guaranteed, distance only greedily optimized.

**FewestHopsRouter:**
    Builds the same layered graph, then finds the globally shortest path
    among all fewest-hop paths with a layer-by-layer shortest distance pass.

**ShortestPathRouter:**
    Ignores layering and searches every simple path over the full visibility
    relation depth first, starting at the target. Shortest total distance wins
    regardless of hop count. Exponential in the worst case, fine for tens of
    relays.

Route comparison (all strategies): a strictly shorter distance wins; a route longer
by at most RouterConfig.DISTANCE_TOLERANCE wins if it has fewer hops;
otherwise the route found first is kept.

Routers are stateless with respect to a route: every call builds its own
nodes, edges and visibility memo, so one instance can serve many calls.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from relay_router.constants import RouterConfig
from relay_router.model.relay import Relay
from relay_router.model.route_result import RouteResult
from relay_router.routing.visibility_graph import (
    GraphNode,
    VisibilityCache,
    VisibilityGraph,
    create_nodes,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Candidate:
    """A complete route seen during a search.

    Attributes:
        nodes: Nodes from source to target inclusive
        distance: Total route distance (km)
    """

    nodes: tuple[GraphNode, ...]
    distance: float

    @property
    def hops(self) -> int:
        return len(self.nodes) - 2


def improves(distance: float, hops: int, best: Optional[Candidate]) -> bool:
    """Tell if a route with distance and hops beats best.

    Args:
        distance: Total distance of the new route (km)
        hops: Relays used by the new route
        best: Best route so far, None if nothing was found yet

    Returns:
        True if the new route should replace best.
    """
    if best is None:
        return True
    if distance < best.distance:
        return True
    return abs(distance - best.distance) <= RouterConfig.DISTANCE_TOLERANCE and hops < best.hops


def to_result(nodes: Sequence[GraphNode]) -> RouteResult:
    """Convert nodes from source to target into a RouteResult."""
    return RouteResult.from_path([node.point for node in nodes])


class RelayRouter(ABC):
    """Base class for routers over a fixed set of relays.

    All points passed to a router must satisfy the Relay protocol: a name,
    a commutative visible() and a distance().
    """

    label = "Relay Router"

    def __init__(self, relays: Sequence[Relay] = ()) -> None:
        self.relays: tuple[Relay, ...] = tuple(relays)

    @abstractmethod
    def route(self, source: Relay, target: Relay) -> RouteResult:
        """Find a route from source to target over the relays.

        Returns:
            RouteResult with path None if source and target cannot be connected.
        """
        raise NotImplementedError

    def _log_result(self, result: RouteResult) -> RouteResult:
        logger.debug(f"{self.label}: {result}")
        return result

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self.relays)} relays)"


class FastRouter(RelayRouter):
    """Fewest hops, distance chosen greedily one hop at a time.

    Phase 1 builds the layered visibility graph (see VisibilityGraph.build).

    Phase 2 computes the route:
    1. Set node to the target and path to [node].
    2. While node has edges:
       a. Select the edge closest to node (first one on ties).
       b. Set node to it and prepend it to path.
    """

    label = "Fast"

    def route(self, source: Relay, target: Relay) -> RouteResult:
        graph = VisibilityGraph.build(source=source, target=target, relays=self.relays)

        node = graph.target
        path = [node]
        while node.edges:
            node = min(node.edges, key=node.distance)
            path.append(node)

        path.reverse()
        return self._log_result(to_result(path))


class FewestHopsRouter(RelayRouter):
    """Shortest route among those with the fewest hops.

    Phase 1 builds the layered visibility graph (see VisibilityGraph.build).

    Phase 2 visits the layers in build order (a topological order of the
    graph) and records for each node the shortest distance from the source
    and the edge it was reached through, then backtracks from the target.
    Every edge joins consecutive layers, so all candidate routes share the
    same hop count and the comparison reduces to distance, then first found.
    """

    label = "Fewest Hops"

    def route(self, source: Relay, target: Relay) -> RouteResult:
        graph = VisibilityGraph.build(source=source, target=target, relays=self.relays)
        if not graph.reached:
            return self._log_result(RouteResult.no_route())

        best: dict[int, Candidate] = {
            graph.source.index: Candidate(nodes=(graph.source,), distance=0.0),
        }

        for layer in [*graph.layers[1:], [graph.target]]:
            for node in layer:
                choice: Optional[Candidate] = None
                for edge in node.edges:
                    previous = best[edge.index]
                    distance = previous.distance + edge.distance(node)
                    # all predecessors sit on the same layer, hop counts are equal
                    if improves(distance, previous.hops + 1, choice):
                        choice = Candidate(nodes=(*previous.nodes, node), distance=distance)
                best[node.index] = choice

        return self._log_result(to_result(best[graph.target.index].nodes))


class ShortestPathRouter(RelayRouter):
    """Shortest total distance over the full visibility relation.

    Starting at the target, the search recursively advances one hop at a time
    to every relay visible from the current node that is not already on the
    current path, and checks at each node whether the source is visible (a
    complete route). Relays on the path are kept in a set that is unwound on
    the way back, so sibling branches never see each other's state.

    Branches whose partial distance already exceeds the best complete route
    by more than the tolerance are cut; they could only produce longer routes.
    """

    label = "Shortest Path"

    def route(self, source: Relay, target: Relay) -> RouteResult:
        source_node, target_node, relay_nodes = create_nodes(source=source, target=target, relays=self.relays)
        cache = VisibilityCache()
        tolerance = RouterConfig.DISTANCE_TOLERANCE

        best: Optional[Candidate] = None
        trail: list[GraphNode] = []
        on_path: set[int] = set()

        def descend(node: GraphNode, length: float) -> None:
            nonlocal best

            if best is not None and length > best.distance + tolerance:
                return

            if cache.visible(node, source_node):
                distance = length + node.distance(source_node)
                if improves(distance, len(trail), best):
                    best = Candidate(nodes=(source_node, *reversed(trail), target_node), distance=distance)
                    logger.debug(f"= {distance:.3f} via {[relay.name for relay in best.nodes[1:-1]]}")

            for relay in relay_nodes:
                if relay.index in on_path or not cache.visible(node, relay):
                    continue

                on_path.add(relay.index)
                trail.append(relay)
                descend(relay, length + node.distance(relay))
                trail.pop()
                on_path.discard(relay.index)

        descend(target_node, 0.0)
        logger.debug(f"{len(cache)} visibility pair(s) evaluated")

        if best is None:
            return self._log_result(RouteResult.no_route())
        return self._log_result(to_result(best.nodes))
