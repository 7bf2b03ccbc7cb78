"""Configuration constants for Relay Router.

All configurable parameters are centralized here for easy tuning.

Classes:
    GeometryConfig: Obstructing sphere and coordinate projection parameters
    RouterConfig: Route comparison and strategy defaults
    ChallengeConfig: Challenge text format and input sources
    OutputConfig: Command line report formatting
"""

import re


class GeometryConfig:
    """Obstructing sphere and coordinate projection parameters."""

    # Earth's mean radius in kilometers (spherical approximation)
    EARTH_RADIUS_KM = 6371.0

    # Ground level points are lifted by this much (km) so a line of sight
    # starting at the surface never touches the sphere at its own endpoint
    ACCURACY_OFFSET_KM = 0.001


class RouterConfig:
    """Route comparison and strategy defaults."""

    # A route longer than the best by at most this (km) still wins with fewer
    # hops; a strictly shorter route always wins
    DISTANCE_TOLERANCE = 1e-9

    DEFAULT_STRATEGY = "fewestHops"


class ChallengeConfig:
    """Challenge text format and input sources."""

    COMMENT_MARKER = "#"
    ROUTE_RECORD = "ROUTE"
    FIELD_SEPARATOR = re.compile(r",\s*")

    SOURCE_NAME = "SOURCE"
    TARGET_NAME = "TARGET"

    # ROUTE,<lat1>,<lon1>,<lat2>,<lon2>
    ROUTE_FIELDS = 5
    # <name>,<lat>,<lon>,<altitude>
    RELAY_FIELDS = 4

    STDIN_MARKER = "-"
    URL_SCHEMES = ("http://", "https://")
    DOWNLOAD_TIMEOUT_S = 30

    # Random challenge generator
    GENERATOR_URL = "https://space-fast-track.herokuapp.com/generate"


class OutputConfig:
    """Command line report formatting."""

    NO_ROUTE = "#NO ROUTE"
    ALGORITHM_PREFIX = "#ALGORITHM: "
    METRICS_TEMPLATE = "#METRICS: {distance:.3f} km over {hops} hops"
    RELAY_SEPARATOR = ","
