"""
Route Scanner Factory

Factory functions for creating scanner instances with real dependencies.
This is the ONLY place that imports the message bus client.

Usage:
    from route_scanner.factory import create_route_scanner
    scanner = create_route_scanner(app=app)
"""
from typing import Callable, Optional

from .config.infra_config import InfraConfig
from .config.scanner_config import ScannerConfig
from .documentation import documentation_supported
from .mapping import ControllerRegistry
from .protocols import RouteSinkProtocol
from .scanner import RouteScanner
from .synthesizer import normalize_service_name


def create_route_scanner(
    app=None,
    sink: Optional[RouteSinkProtocol] = None,
    registry: Optional[ControllerRegistry] = None,
    config_loader: Optional[Callable[[], ScannerConfig]] = None,
    infra_config: Optional[InfraConfig] = None,
) -> RouteScanner:
    """
    Create RouteScanner with real dependencies.

    Args:
        app: FastAPI application; its OpenAPI setting decides whether the
            documentation routes are published
        sink: Message sink (defaults to a NATS JetStream sink)
        registry: Controller registry (defaults to the process registry)
        config_loader: ScannerConfig source (defaults to the environment)
        infra_config: NATS settings for the default sink

    Returns:
        Configured RouteScanner instance
    """
    config_loader = config_loader or ScannerConfig.from_env

    if sink is None:
        # Import real sink here (not at module level)
        from .nats_sink import NATSRouteSink

        config = config_loader()
        sink = NATSRouteSink(
            config=infra_config,
            topic=config.topic,
            client_name=normalize_service_name(config.service_name),
        )

    return RouteScanner(
        sink=sink,
        registry=registry,
        config_loader=config_loader,
        documentation_available=documentation_supported(app) if app is not None else False,
    )
