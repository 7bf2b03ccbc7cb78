"""Relay Router - Line-of-sight routing between two points around the Earth.

Finds a chain of relays (e.g. satellites) connecting a source and a target,
where two points can communicate only if the segment between them clears the
Earth's sphere. Features:
- Exact line-of-sight test around a sphere centered at the origin
- Layered visibility graph built outward from the source
- Three interchangeable search strategies (fast, fewest hops, shortest path)
- Reader and parser for the line-oriented challenge format, and a CLI

Modules:
    core: Geometry (coordinate conversion, visibility, distance)
    model: Data structures (Relay protocol, Location, RouteResult)
    routing: Visibility graph, routers and the Router facade
    challenge: Challenge input reading and parsing

Example:
    from relay_router.model import Location
    from relay_router.routing import Router, Strategy

    router = Router(relays=satellites, strategy=Strategy.SHORTEST_PATH)
    result = router.route(source, target)
"""
