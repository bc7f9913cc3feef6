"""
Documentation Route Synthesizer

Fixed catalog of routes exposing a service's API documentation (OpenAPI
schema and interactive UI) through the gateway, plus the gateway-owned
routes that aggregate several services' documentation under /docs/<name>.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import LOAD_BALANCER_SCHEME, RouteConfigMessage
from .protocols import RouteSynthesisError
from .synthesizer import CONTROLLER_FILTERS, SERVICE_SUFFIX, ensure_unique_ids, load_balanced_uri

logger = logging.getLogger(__name__)

GATEWAY_SERVICE_NAME = "gateway"
AGGREGATED_ORDER = 10


@dataclass(frozen=True)
class DocumentationRoute:
    """One entry of the documentation route table"""
    suffix: str
    pattern: str
    order: int
    label: str
    # None: always emitted; otherwise the ScannerConfig flag gating it
    gate: Optional[str] = None


DOCUMENTATION_ROUTES = (
    DocumentationRoute("swagger-ui", "/swagger-ui/**", 1, "Swagger UI"),
    DocumentationRoute("swagger-ui-index", "/swagger-ui.html", 2, "Swagger UI index page"),
    DocumentationRoute("api-docs", "/v3/api-docs/**", 3, "OpenAPI documentation"),
    DocumentationRoute("swagger-resources", "/swagger-resources/**", 4, "Swagger resources",
                       gate="include_swagger_resources"),
    DocumentationRoute("webjars", "/webjars/**", 5, "Webjars assets", gate="include_webjars"),
    DocumentationRoute("swagger-config", "/v3/api-docs/swagger-config", 6, "Swagger configuration"),
)


def synthesize_documentation_routes(
    service_name: str,
    include_webjars: bool = True,
    include_swagger_resources: bool = True,
) -> List[RouteConfigMessage]:
    """Documentation routes of one service, in table order"""
    flags = {
        "include_webjars": include_webjars,
        "include_swagger_resources": include_swagger_resources,
    }
    uri = load_balanced_uri(service_name)

    routes = []
    for entry in DOCUMENTATION_ROUTES:
        if entry.gate and not flags[entry.gate]:
            logger.debug(f"Skipped {entry.suffix} route for service: {service_name} (disabled via configuration)")
            continue
        routes.append(RouteConfigMessage(
            route_id=f"{service_name}-{entry.suffix}",
            uri=uri,
            predicates=(f"Path={entry.pattern}",),
            filters=CONTROLLER_FILTERS,
            order_num=entry.order,
            description=f"{entry.label} for {service_name} service",
            enabled=True,
            service_name=service_name,
        ))

    logger.debug(
        f"Generated {len(routes)} Swagger routes for service: {service_name} "
        f"(webjars: {include_webjars}, swagger-resources: {include_swagger_resources})"
    )
    return routes


def synthesize_aggregated_documentation_routes(service_names: Iterable[str]) -> List[RouteConfigMessage]:
    """
    Gateway-owned routes exposing each service's docs under /docs/<name>/**.

    All entries share order 10; the '-service' suffix is always appended to
    the target. Blank names raise RouteSynthesisError.
    """
    routes = []
    for name in service_names:
        if not name or not name.strip():
            raise RouteSynthesisError(f"Blank service name in aggregated documentation request: {name!r}")
        routes.append(RouteConfigMessage(
            route_id=f"{GATEWAY_SERVICE_NAME}-swagger-{name}",
            uri=f"{LOAD_BALANCER_SCHEME}{name}{SERVICE_SUFFIX}",
            predicates=(f"Path=/docs/{name}/**",),
            filters=("StripPrefix=2", f"AddRequestHeader=X-Service-Name,{name}"),
            order_num=AGGREGATED_ORDER,
            description=f"Gateway aggregated Swagger for {name} service",
            enabled=True,
            service_name=GATEWAY_SERVICE_NAME,
        ))

    ensure_unique_ids(routes)
    return routes


def documentation_supported(app) -> bool:
    """True when a FastAPI application serves an OpenAPI schema"""
    return bool(getattr(app, "openapi_url", None))
