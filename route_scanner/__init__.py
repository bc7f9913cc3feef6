#!/usr/bin/env python3
"""
Gateway Route Scanner

Discovers the HTTP endpoints a service declares and publishes gateway route
records for them, so the gateway can build its routing table dynamically.

COMPONENTS:
    - mapping.py: Controller mapping decorators and registry
    - inventory.py: Normalized endpoint paths per controller
    - synthesizer.py: Controller -> route record conversion
    - documentation.py: API documentation routes (per service and aggregated)
    - publisher.py: Serialization and hand-off to the message sink
    - scanner.py: Scan orchestration (failure-proof entry points)
    - nats_sink.py: NATS JetStream sink
    - catalog.py: Consul service catalog for aggregated documentation
    - lifespan.py: FastAPI startup integration

USAGE:
    from route_scanner import rest_controller, request_mapping, get_mapping
    from route_scanner.lifespan import route_scanner_lifespan
"""

from .mapping import (
    ControllerRegistry,
    delete_mapping,
    get_controller_registry,
    get_mapping,
    patch_mapping,
    post_mapping,
    put_mapping,
    request_mapping,
    rest_controller,
)
from .models import RouteConfigMessage
from .protocols import (
    RouteScannerError,
    RouteSerializationError,
    RouteSinkProtocol,
    RouteSynthesisError,
    SinkError,
    SinkNotConnectedError,
)
from .scanner import RouteScanner, ScanResult

__all__ = [
    "ControllerRegistry",
    "RouteConfigMessage",
    "RouteScanner",
    "RouteScannerError",
    "RouteSerializationError",
    "RouteSinkProtocol",
    "RouteSynthesisError",
    "ScanResult",
    "SinkError",
    "SinkNotConnectedError",
    "delete_mapping",
    "get_controller_registry",
    "get_mapping",
    "patch_mapping",
    "post_mapping",
    "put_mapping",
    "request_mapping",
    "rest_controller",
]

__version__ = "1.0.0"
