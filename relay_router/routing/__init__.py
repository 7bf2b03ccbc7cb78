"""Route search over line-of-sight relays.

Provides the layered visibility graph and three interchangeable routers:
- FastRouter: fewest hops, greedy distance
- FewestHopsRouter: fewest hops, shortest distance among them
- ShortestPathRouter: shortest distance, fewer hops on ties

Router selects one of them by Strategy and exposes route(source, target).
"""

from relay_router.routing.router import ROUTER_CLASSES, Router, Strategy, create_router
from relay_router.routing.strategies import (
    FastRouter,
    FewestHopsRouter,
    RelayRouter,
    ShortestPathRouter,
)
from relay_router.routing.visibility_graph import GraphNode, VisibilityCache, VisibilityGraph

__all__ = [
    # Visibility graph
    "GraphNode",
    "VisibilityCache",
    "VisibilityGraph",
    # Strategies
    "RelayRouter",
    "FastRouter",
    "FewestHopsRouter",
    "ShortestPathRouter",
    # Facade
    "Router",
    "Strategy",
    "ROUTER_CLASSES",
    "create_router",
]
