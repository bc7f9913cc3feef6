"""
Route Synthesizer

Turns controller inventory entries into gateway route records. Each
controller with at least one mapped handler becomes exactly one route that
matches everything under its base path.
"""

import logging
import re
from typing import Iterable, List, Optional

from .inventory import ControllerInventory
from .models import LOAD_BALANCER_SCHEME, RouteConfigMessage
from .protocols import RouteSynthesisError

logger = logging.getLogger(__name__)

SERVICE_SUFFIX = "-service"
_SERVICE_SUFFIX_PATTERN = re.compile(r"[-_]service$", re.IGNORECASE)

CONTROLLER_FILTERS = ("StripPrefix=0",)


class RouteOrder:
    """Priority accumulator threaded through one scan"""

    def __init__(self, start: int = 0):
        self.value = start

    def next(self) -> int:
        current = self.value
        self.value += 1
        return current


def normalize_service_name(raw: Optional[str]) -> str:
    """Short service name: trailing '-service' / '_service' stripped, any case"""
    if not raw or not raw.strip():
        return "unknown"
    return _SERVICE_SUFFIX_PATTERN.sub("", raw.strip())


def full_service_name(service_name: str) -> str:
    """Discovery name of a service; never doubles the suffix"""
    if service_name.endswith(SERVICE_SUFFIX):
        return service_name
    return service_name + SERVICE_SUFFIX


def load_balanced_uri(service_name: str) -> str:
    return LOAD_BALANCER_SCHEME + full_service_name(service_name)


def wildcard_pattern(base_path: str) -> str:
    """'/' -> '/**', '/api/users' -> '/api/users/**'"""
    if base_path == "/":
        return "/**"
    return base_path + "/**"


def ensure_unique_ids(routes: Iterable[RouteConfigMessage]) -> None:
    """Raise if two routes of one batch share an id"""
    seen = set()
    for route in routes:
        if route.route_id in seen:
            raise RouteSynthesisError(f"Duplicate route id in batch: {route.route_id}")
        seen.add(route.route_id)


def synthesize_controller_route(
    service_name: str,
    entry: ControllerInventory,
    order: RouteOrder,
) -> Optional[RouteConfigMessage]:
    """Route for one controller, or None when it has no mapped handlers"""
    if not entry.has_endpoints:
        logger.debug(f"Skipping {entry.name}: no mapped handlers")
        return None

    pattern = wildcard_pattern(entry.base_path)
    route = RouteConfigMessage(
        route_id=f"{service_name}-{entry.name.lower()}",
        uri=load_balanced_uri(service_name),
        predicates=(f"Path={pattern}",),
        filters=CONTROLLER_FILTERS,
        order_num=order.next(),
        description=f"Auto-generated route for {service_name} service - {entry.name}",
        enabled=True,
        service_name=service_name,
    )
    logger.debug(f"Generated route: {route.route_id} -> {pattern}")
    return route


def synthesize_controller_routes(
    service_name: str,
    inventory: Iterable[ControllerInventory],
    order: Optional[RouteOrder] = None,
) -> List[RouteConfigMessage]:
    """
    Routes for every controller with mapped handlers, in discovery order.

    Args:
        service_name: Short service name (routing key, id prefix)
        inventory: Controller entries in discovery order
        order: Priority accumulator; a fresh one starting at 0 if omitted

    Returns:
        One route per non-empty controller

    Raises:
        RouteSynthesisError: two controllers produced the same route id
    """
    order = order or RouteOrder()
    routes = []
    for entry in inventory:
        route = synthesize_controller_route(service_name, entry, order)
        if route is not None:
            routes.append(route)

    ensure_unique_ids(routes)
    return routes
