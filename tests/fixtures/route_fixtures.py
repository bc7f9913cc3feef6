"""
Route Scanner Fixtures

Factories for route records and controller classes.
"""
from typing import Callable, List, Optional, Sequence, Tuple

from route_scanner.mapping import request_mapping
from route_scanner.models import RouteConfigMessage


def make_route(**overrides) -> RouteConfigMessage:
    """Valid route record; any field can be overridden"""
    data = {
        "route_id": "test-testcontroller",
        "uri": "lb://test-service",
        "predicates": ("Path=/api/test/**",),
        "filters": ("StripPrefix=0",),
        "order_num": 0,
        "description": "Auto-generated route for test service - TestController",
        "enabled": True,
        "service_name": "test",
    }
    data.update(overrides)
    return RouteConfigMessage(**data)


def make_routes(count: int, service_name: str = "test") -> List[RouteConfigMessage]:
    """Distinct routes for one service"""
    return [
        make_route(
            route_id=f"{service_name}-controller{i}",
            predicates=(f"Path=/api/r{i}/**",),
            order_num=i,
            service_name=service_name,
        )
        for i in range(count)
    ]


def make_controller(
    name: str,
    base_path: Optional[str] = None,
    handlers: Sequence[Tuple[str, Optional[Callable]]] = (),
    module: str = "tests.fixtures.controllers",
) -> type:
    """
    Build a controller class.

    Args:
        name: Class name
        base_path: Class-level request_mapping value (None: no class mapping)
        handlers: (method name, mapping decorator or None) in definition order
        module: Value for __module__ (namespace filtering)
    """
    namespace = {"__module__": module}
    for handler_name, decorator in handlers:
        async def handler(self):
            return None
        handler.__name__ = handler_name
        handler.__qualname__ = f"{name}.{handler_name}"
        namespace[handler_name] = decorator(handler) if decorator else handler

    cls = type(name, (), namespace)
    if base_path is not None:
        cls = request_mapping(base_path)(cls)
    return cls
