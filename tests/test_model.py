"""Tests for relay_router data model.

Tests: Location (construction invariant, line of sight around the Earth),
RouteResult (normalization of paths, hops and distance).
"""

import dataclasses
import math
from typing import TYPE_CHECKING, Callable

import pytest

from relay_router.constants import GeometryConfig
from relay_router.model.location import Location
from relay_router.model.relay import Relay
from relay_router.model.route_result import RouteResult

if TYPE_CHECKING:
    from conftest import DummyRelay


# =============================================================================
# LOCATION
# =============================================================================


class TestLocation:
    """Location - named point on or above the Earth."""

    def test_ground_location_is_lifted_by_accuracy_offset(self) -> None:
        ground = Location(name="SOURCE", latitude=12.0, longitude=-45.0)
        radius = math.sqrt(sum(c * c for c in ground.position))
        assert radius == pytest.approx(GeometryConfig.EARTH_RADIUS_KM + GeometryConfig.ACCURACY_OFFSET_KM, abs=1e-9)

    def test_altitude_adds_to_earth_radius(self) -> None:
        satellite = Location(name="SAT0", latitude=0.0, longitude=0.0, altitude=500.0)
        assert satellite.position == pytest.approx((6871.0, 0.0, 0.0), abs=1e-9)

    @pytest.mark.parametrize(
        "latitude, longitude, altitude",
        [
            (math.nan, 0.0, 0.0),
            (0.0, math.inf, 0.0),
            (0.0, 0.0, -math.inf),
            (0.0, 0.0, -1.0),
        ],
    )
    def test_rejects_invalid_coordinates(self, latitude: float, longitude: float, altitude: float) -> None:
        with pytest.raises(ValueError):
            Location(name="BAD", latitude=latitude, longitude=longitude, altitude=altitude)

    def test_is_immutable(self) -> None:
        location = Location(name="SAT0", latitude=1.0, longitude=2.0, altitude=300.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            location.altitude = 0.0  # type: ignore[misc]

    def test_satisfies_relay_protocol(self) -> None:
        assert isinstance(Location(name="SAT0", latitude=0.0, longitude=0.0, altitude=1.0), Relay)

    def test_satellite_overhead_is_visible(self) -> None:
        ground = Location(name="SOURCE", latitude=0.0, longitude=0.0)
        satellite = Location(name="SAT0", latitude=0.0, longitude=0.0, altitude=500.0)
        assert ground.visible(satellite) is True
        assert satellite.visible(ground) is True

    def test_satellite_on_far_side_is_hidden(self) -> None:
        ground = Location(name="SOURCE", latitude=0.0, longitude=180.0)
        satellite = Location(name="SAT0", latitude=0.0, longitude=0.0, altitude=500.0)
        assert ground.visible(satellite) is False

    def test_satellites_above_horizon(self) -> None:
        """Two satellites at 1000 km see each other 60° apart, not 70° apart.

        The chord midpoint lies at 7371·cos(θ/2) km from the center:
        6383 km for 60° (clear), 6038 km for 70° (through the Earth).
        """
        a = Location(name="SAT0", latitude=0.0, longitude=0.0, altitude=1000.0)
        b = Location(name="SAT1", latitude=0.0, longitude=60.0, altitude=1000.0)
        c = Location(name="SAT2", latitude=0.0, longitude=70.0, altitude=1000.0)
        assert a.visible(b) is True
        assert a.visible(c) is False

    def test_nearby_ground_points_see_each_other(self) -> None:
        a = Location(name="A", latitude=0.0, longitude=0.0)
        near = Location(name="B", latitude=0.0, longitude=0.01)
        far = Location(name="C", latitude=0.0, longitude=1.0)
        assert a.visible(near) is True
        assert a.visible(far) is False

    def test_distance(self) -> None:
        ground = Location(name="SOURCE", latitude=10.0, longitude=20.0)
        satellite = Location(name="SAT0", latitude=10.0, longitude=20.0, altitude=100.0)
        assert ground.distance(satellite) == pytest.approx(100.0 - GeometryConfig.ACCURACY_OFFSET_KM)
        assert satellite.distance(ground) == pytest.approx(ground.distance(satellite))


# =============================================================================
# ROUTE RESULT
# =============================================================================


class TestRouteResult:
    """RouteResult - normalization of found paths."""

    def test_single_point_path_is_no_route(self, relay: "Callable[..., DummyRelay]") -> None:
        result = RouteResult.from_path([relay("target", 2, 0)])
        assert result.path is None
        assert result.found is False
        assert result.names is None
        assert result.relays == ()

    def test_empty_path_is_no_route(self) -> None:
        assert RouteResult.from_path([]) == RouteResult.no_route()

    def test_direct_link(self, relay: "Callable[..., DummyRelay]") -> None:
        source, target = relay("source", 0, 0), relay("target", 1, 0)
        result = RouteResult.from_path([source, target])
        assert result.found is True
        assert result.hops == 0
        assert result.distance == pytest.approx(1.0)
        assert result.path == (source, target)
        assert result.relays == ()

    def test_hops_exclude_endpoints_and_distance_sums_legs(self, relay: "Callable[..., DummyRelay]") -> None:
        points = [relay("source", 0, 0), relay("a", 1, 0), relay("b", 1, 1), relay("target", 2, 1)]
        result = RouteResult.from_path(points)
        assert result.hops == 2
        assert result.distance == pytest.approx(3.0)
        assert result.names == ["source", "a", "b", "target"]
        assert [point.name for point in result.relays] == ["a", "b"]

    def test_distance_is_exact_sum_of_legs(self, relay: "Callable[..., DummyRelay]") -> None:
        points = [relay("source", 0, 0), relay("a", 1, 3), relay("target", 1.5, -2)]
        expected = points[0].distance(points[1]) + points[1].distance(points[2])
        assert RouteResult.from_path(points).distance == expected

    def test_is_immutable(self, relay: "Callable[..., DummyRelay]") -> None:
        result = RouteResult.from_path([relay("source", 0, 0), relay("target", 1, 0)])
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.hops = 5  # type: ignore[misc]
