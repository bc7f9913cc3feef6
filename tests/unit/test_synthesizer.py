"""
Unit Tests for route_scanner.synthesizer

Service name handling and controller route synthesis.
"""

import pytest

from route_scanner.inventory import ControllerInventory, build_inventory
from route_scanner.mapping import get_mapping
from route_scanner.protocols import RouteSynthesisError
from route_scanner.synthesizer import (
    RouteOrder,
    ensure_unique_ids,
    full_service_name,
    load_balanced_uri,
    normalize_service_name,
    synthesize_controller_route,
    synthesize_controller_routes,
    wildcard_pattern,
)
from tests.fixtures.route_fixtures import make_controller, make_route

pytestmark = pytest.mark.unit


class TestServiceNames:
    """Test service name normalization"""

    @pytest.mark.parametrize("raw,expected", [
        ("order-service", "order"),
        ("order_service", "order"),
        ("Order-SERVICE", "Order"),
        ("order", "order"),
        ("service", "service"),
        ("my-service-api", "my-service-api"),
        ("", "unknown"),
        (None, "unknown"),
        ("   ", "unknown"),
    ])
    def test_normalize_service_name(self, raw, expected):
        assert normalize_service_name(raw) == expected

    def test_full_service_name_appends_suffix(self):
        assert full_service_name("user") == "user-service"

    def test_full_service_name_never_doubles(self):
        assert full_service_name("user-service") == "user-service"

    def test_load_balanced_uri_same_for_both_spellings(self):
        assert load_balanced_uri("user") == load_balanced_uri("user-service") == "lb://user-service"

    @pytest.mark.parametrize("base,expected", [
        ("/", "/**"),
        ("/api/users", "/api/users/**"),
    ])
    def test_wildcard_pattern(self, base, expected):
        assert wildcard_pattern(base) == expected


class TestRouteOrder:
    """Test RouteOrder"""

    def test_counts_from_start(self):
        order = RouteOrder(5)
        assert [order.next(), order.next(), order.next()] == [5, 6, 7]
        assert order.value == 8


class TestSynthesizeControllerRoute:
    """Test single controller route synthesis"""

    def test_route_fields(self):
        entry = ControllerInventory("UserController", "/api/users", ("/api/users", "/api/users/{id}"))

        route = synthesize_controller_route("user", entry, RouteOrder())

        assert route.route_id == "user-usercontroller"
        assert route.uri == "lb://user-service"
        assert route.predicates == ("Path=/api/users/**",)
        assert route.filters == ("StripPrefix=0",)
        assert route.order_num == 0
        assert route.description == "Auto-generated route for user service - UserController"
        assert route.enabled is True
        assert route.service_name == "user"

    def test_empty_controller_skipped_without_consuming_order(self):
        order = RouteOrder()
        entry = ControllerInventory("EmptyController", "/api/empty", ())

        assert synthesize_controller_route("user", entry, order) is None
        assert order.value == 0


class TestSynthesizeControllerRoutes:
    """Test batch synthesis"""

    def _controllers(self):
        return [
            make_controller("OrderController", "/api/orders", [("list", get_mapping), ("get", get_mapping("/{id}"))]),
            make_controller("HelperController", "/api/helpers", [("helper", None)]),
            make_controller("PaymentController", "/api/payments", [("pay", get_mapping)]),
        ]

    def test_one_route_per_non_empty_controller(self, assertions):
        routes = synthesize_controller_routes("order", build_inventory(self._controllers()))

        assert [r.route_id for r in routes] == ["order-ordercontroller", "order-paymentcontroller"]
        assert [r.order_num for r in routes] == [0, 1]
        assertions.assert_unique_route_ids(routes)

    def test_deterministic(self):
        inventory = build_inventory(self._controllers())

        first = synthesize_controller_routes("order", inventory)
        second = synthesize_controller_routes("order", inventory)

        assert [r.to_json() for r in first] == [r.to_json() for r in second]

    def test_shared_order_accumulator(self):
        order = RouteOrder(3)

        routes = synthesize_controller_routes("order", build_inventory(self._controllers()), order)

        assert [r.order_num for r in routes] == [3, 4]
        assert order.value == 5

    def test_duplicate_ids_rejected(self):
        a = make_controller("SameController", "/a", [("x", get_mapping)], module="pkg.a")
        b = make_controller("SameController", "/b", [("x", get_mapping)], module="pkg.b")

        with pytest.raises(RouteSynthesisError):
            synthesize_controller_routes("order", build_inventory([a, b]))

    def test_no_controllers(self):
        assert synthesize_controller_routes("order", []) == []


class TestEnsureUniqueIds:
    """Test ensure_unique_ids"""

    def test_accepts_distinct(self):
        ensure_unique_ids([make_route(route_id="a"), make_route(route_id="b")])

    def test_rejects_duplicate(self):
        with pytest.raises(RouteSynthesisError, match="dup"):
            ensure_unique_ids([make_route(route_id="dup"), make_route(route_id="dup")])
