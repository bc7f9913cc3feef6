"""
Route Scanner

Orchestrates one scan: inventory the service's controllers, synthesize
their routes, publish them; then, when the host serves API documentation,
publish the documentation routes too.

Every public entry point is failure-proof: errors are logged with traceback
and reported in the ScanResult, never raised to the caller. A scan must not
take the host service down.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional

from .config.scanner_config import ScannerConfig
from .documentation import (
    GATEWAY_SERVICE_NAME,
    synthesize_aggregated_documentation_routes,
    synthesize_documentation_routes,
)
from .inventory import build_inventory
from .mapping import ControllerRegistry, get_controller_registry
from .protocols import RouteSinkProtocol
from .publisher import RoutePublisher
from .synthesizer import RouteOrder, normalize_service_name, synthesize_controller_routes

logger = logging.getLogger(__name__)

CONTROLLER_STAGE = "controller"
DOCUMENTATION_STAGE = "documentation"
AGGREGATED_STAGE = "aggregated-documentation"


@dataclass
class ScanResult:
    """What one scan stage did"""
    stage: str
    service_name: str = ""
    generated: int = 0
    sent: int = 0
    failed: int = 0
    skipped: bool = False
    error: Optional[str] = None
    route_ids: List[str] = field(default_factory=list)
    # Route ids dropped because an earlier stage of the same scan used them
    conflicts: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None and self.failed == 0 and not self.conflicts


class RouteScanner:
    """
    Publishes the gateway routes of the running service.

    Args:
        sink: Message bus the records go to
        registry: Controller classes to scan (default: process registry)
        config_loader: Returns a fresh ScannerConfig; called once per scan
        documentation_available: Host capability flag, decided at startup;
            route.scanner.swagger.available overrides it when set
    """

    def __init__(
        self,
        sink: RouteSinkProtocol,
        registry: Optional[ControllerRegistry] = None,
        config_loader: Optional[Callable[[], ScannerConfig]] = None,
        documentation_available: bool = False,
    ):
        self.sink = sink
        self.registry = registry if registry is not None else get_controller_registry()
        self.config_loader = config_loader or ScannerConfig.from_env
        self.documentation_available = documentation_available

    def _documentation_detected(self, config: ScannerConfig) -> bool:
        if config.swagger_available is not None:
            return config.swagger_available
        return self.documentation_available

    async def scan_controllers(self, config: Optional[ScannerConfig] = None) -> ScanResult:
        """Publish one route per mapped controller"""
        result = ScanResult(stage=CONTROLLER_STAGE)
        try:
            config = config or self.config_loader()
            service_name = normalize_service_name(config.service_name)
            result.service_name = service_name

            if not config.controller_enabled:
                logger.info("Controller scanning is disabled")
                result.skipped = True
                return result

            controllers = self.registry.controllers(config.base_package)
            logger.info(f"Scanning controllers for service: {service_name}")

            routes = synthesize_controller_routes(service_name, build_inventory(controllers), RouteOrder())
            result.generated = len(routes)
            result.route_ids = [r.route_id for r in routes]

            report = await RoutePublisher(self.sink, config.topic).publish(service_name, routes)
            result.sent, result.failed = report.sent, report.failed

            logger.info(f"Completed scanning {len(controllers)} controllers for service: {service_name}")
        except Exception as e:
            result.error = str(e)
            logger.error(f"Error scanning controllers: {e}", exc_info=True)
        return result

    async def scan_documentation(
        self,
        config: Optional[ScannerConfig] = None,
        reserved_ids: Iterable[str] = (),
    ) -> ScanResult:
        """
        Publish the documentation routes when the host serves API docs.

        Routes whose id is in reserved_ids (already emitted by the controller
        stage of the same scan) are dropped and listed in result.conflicts.
        """
        result = ScanResult(stage=DOCUMENTATION_STAGE)
        try:
            config = config or self.config_loader()
            service_name = normalize_service_name(config.service_name)
            result.service_name = service_name

            if not config.swagger_enabled:
                logger.info("Swagger scanning is disabled")
                result.skipped = True
                return result

            logger.info(f"Scanning Swagger routes for service: {service_name}")
            if not self._documentation_detected(config):
                logger.info(f"Swagger/OpenAPI not detected for service: {service_name}")
                result.skipped = True
                return result

            routes = synthesize_documentation_routes(
                service_name,
                include_webjars=config.include_webjars,
                include_swagger_resources=config.include_swagger_resources,
            )
            reserved = set(reserved_ids)
            result.conflicts = [r.route_id for r in routes if r.route_id in reserved]
            for route_id in result.conflicts:
                logger.warning(f"Skipped Swagger route {route_id}: id already used by a controller route")
            routes = [r for r in routes if r.route_id not in reserved]
            result.generated = len(routes)
            result.route_ids = [r.route_id for r in routes]

            report = await RoutePublisher(self.sink, config.topic).publish(service_name, routes)
            result.sent, result.failed = report.sent, report.failed

            logger.info(f"Completed scanning {len(routes)} Swagger routes for service: {service_name}")
        except Exception as e:
            result.error = str(e)
            logger.error(f"Error scanning Swagger routes: {e}", exc_info=True)
        return result

    async def on_service_ready(self) -> List[ScanResult]:
        """Run both stages with a single configuration snapshot"""
        try:
            config = self.config_loader()
        except Exception as e:
            logger.error(f"Error loading route scanner configuration: {e}", exc_info=True)
            return [ScanResult(stage=CONTROLLER_STAGE, error=str(e))]

        logger.info(f"Starting route scanning for application: {config.service_name}")
        controller_result = await self.scan_controllers(config)
        results = [
            controller_result,
            await self.scan_documentation(config, reserved_ids=controller_result.route_ids),
        ]
        logger.info("Route scanning completed")
        return results

    async def publish_aggregated_documentation(self, service_names: Iterable[str]) -> ScanResult:
        """Publish gateway routes exposing each named service's docs under /docs/<name>"""
        result = ScanResult(stage=AGGREGATED_STAGE)
        try:
            config = self.config_loader()
            # Aggregated routes belong to the gateway, whoever publishes them
            key = GATEWAY_SERVICE_NAME
            result.service_name = key

            routes = synthesize_aggregated_documentation_routes(list(service_names))
            result.generated = len(routes)

            report = await RoutePublisher(self.sink, config.topic).publish(key, routes)
            result.sent, result.failed = report.sent, report.failed

            logger.info(f"Published {report.sent}/{len(routes)} aggregated documentation routes")
        except Exception as e:
            result.error = str(e)
            logger.error(f"Error publishing aggregated documentation routes: {e}", exc_info=True)
        return result
