"""Layered visibility graph between a source and a target.

The graph is built outward from the source one layer at a time:
1. Set frontier to the source and outskirts to all relays.
2. Connect the target to every frontier node that can see it.
   If any was found, stop: the target is reached.
3. Split outskirts into the relays visible from any frontier node (the next
   frontier, each connected to the frontier nodes that see it) and the rest
   (the remaining outskirts).
4. Repeat from 2 while the frontier is not empty.

The result is a directed acyclic graph layered by hop count from the source:
every node's edges point back to the nodes of the previous layer that can see
it. Every path from the target back to the source therefore has the fewest
possible hops.

Per-call state (nodes, edges, memoized visibility) is private to one build;
the relay points themselves are never modified.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Sequence

from relay_router.model.relay import Relay

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class GraphNode:
    """A point in the visibility graph.

    Attributes:
        point: The wrapped source, target or relay
        index: Identity used to memoize visibility (relays 0..n-1, source n, target n+1)
        edges: Nodes this node is directly reachable from, in discovery order
    """

    point: Relay
    index: int
    edges: list["GraphNode"] = field(default_factory=list)

    @property
    def name(self) -> str:
        return self.point.name

    def connect(self, other: "GraphNode") -> "GraphNode":
        """Record other as a node this one is reachable from."""
        self.edges.append(other)
        return other

    def distance(self, other: "GraphNode") -> float:
        return self.point.distance(other.point)

    def __repr__(self) -> str:
        return f"GraphNode({self.name}, edges={[edge.name for edge in self.edges]})"


class VisibilityCache:
    """Memoized visibility per unordered pair of node indices.

    Visibility is commutative, so each pair is evaluated in one direction
    only. Storing the same answer twice is harmless.
    """

    def __init__(self) -> None:
        self._known: dict[tuple[int, int], bool] = {}
        self.evaluations = 0

    def visible(self, a: GraphNode, b: GraphNode) -> bool:
        key = (a.index, b.index) if a.index < b.index else (b.index, a.index)
        cached = self._known.get(key)
        if cached is None:
            cached = bool(a.point.visible(b.point))
            self._known[key] = cached
            self.evaluations += 1
        return cached

    def __len__(self) -> int:
        return len(self._known)


def create_nodes(
    source: Relay,
    target: Relay,
    relays: Sequence[Relay],
) -> tuple[GraphNode, GraphNode, list[GraphNode]]:
    """Wrap source, target and relays into fresh graph nodes.

    Returns:
        Tuple (source_node, target_node, relay_nodes) with relay nodes in input order.
    """
    relay_nodes = [GraphNode(point=point, index=index) for index, point in enumerate(relays)]
    source_node = GraphNode(point=source, index=len(relays))
    target_node = GraphNode(point=target, index=len(relays) + 1)
    return source_node, target_node, relay_nodes


@dataclass
class VisibilityGraph:
    """Result of a layered build from source toward target.

    Attributes:
        source: Source node (first and only node of layer 0)
        target: Target node, its edges are the last layer's nodes that see it
        layers: Frontier layers in build order, layers[0] == [source]
    """

    source: GraphNode
    target: GraphNode
    layers: list[list[GraphNode]]

    @property
    def reached(self) -> bool:
        """True if at least one node connects to the target."""
        return bool(self.target.edges)

    @property
    def hops(self) -> Optional[int]:
        """Relays on any route through this graph, or None if the target was not reached."""
        if not self.reached:
            return None
        return len(self.layers) - 1

    @classmethod
    def build(
        cls,
        source: Relay,
        target: Relay,
        relays: Sequence[Relay],
    ) -> "VisibilityGraph":
        """Build the layered visibility graph from source toward target over relays.

        Args:
            source: Route start
            target: Route end
            relays: Intermediate points available for the route

        Returns:
            VisibilityGraph, check reached to know whether a route exists.
        """
        cache = VisibilityCache()
        source_node, target_node, outskirts = create_nodes(source=source, target=target, relays=relays)

        frontier = [source_node]
        layers = [frontier]

        def reachable(node: GraphNode) -> int:
            """Connect node to every frontier node that sees it, returning the hit count."""
            hits = [node.connect(other) for other in frontier if cache.visible(node, other)]
            if hits:
                logger.debug(f"{node.name} < {[hit.name for hit in hits]}")
            return len(hits)

        while frontier:
            if reachable(target_node):
                break

            next_frontier: list[GraphNode] = []
            remaining: list[GraphNode] = []
            for node in outskirts:
                (next_frontier if reachable(node) else remaining).append(node)

            frontier, outskirts = next_frontier, remaining
            if frontier:
                layers.append(frontier)
            logger.debug(f"--- layer {len(layers) - 1}: {len(frontier)} node(s), {len(outskirts)} left")

        graph = cls(source=source_node, target=target_node, layers=layers)
        logger.debug(
            f"Visibility graph: {len(layers)} layer(s), reached={graph.reached}, "
            f"{cache.evaluations} visibility test(s)"
        )
        return graph
