#!/usr/bin/env python3
"""Route scanner configuration

Every setting has a dotted property name (the name used in service property
files) and an environment variable derived from it by upper-casing and
replacing '.' and '-' with '_':

    route.scanner.swagger.include-webjars -> ROUTE_SCANNER_SWAGGER_INCLUDE_WEBJARS
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_TOPIC = "gateway-route-config"

SERVICE_NAME = "service.name"
CONTROLLER_ENABLED = "route.scanner.controller.enabled"
SWAGGER_ENABLED = "route.scanner.swagger.enabled"
INCLUDE_WEBJARS = "route.scanner.swagger.include-webjars"
INCLUDE_SWAGGER_RESOURCES = "route.scanner.swagger.include-swagger-resources"
SWAGGER_AVAILABLE = "route.scanner.swagger.available"
BASE_PACKAGE = "route.scanner.base-package"
TOPIC = "route.scanner.topic"

PROPERTY_NAMES = (
    SERVICE_NAME,
    CONTROLLER_ENABLED,
    SWAGGER_ENABLED,
    INCLUDE_WEBJARS,
    INCLUDE_SWAGGER_RESOURCES,
    SWAGGER_AVAILABLE,
    BASE_PACKAGE,
    TOPIC,
)


def env_key(property_name: str) -> str:
    """Environment variable carrying a dotted property"""
    return property_name.upper().replace(".", "_").replace("-", "_")


def _bool(val: Optional[str], default: bool) -> bool:
    if val is None:
        return default
    return val.strip().lower() == "true"


def _optional_bool(val: Optional[str]) -> Optional[bool]:
    if val is None or not val.strip():
        return None
    return val.strip().lower() == "true"


@dataclass(frozen=True)
class ScannerConfig:
    """Route scanning switches, read once per scan"""

    service_name: str = "unknown"
    controller_enabled: bool = True
    swagger_enabled: bool = True
    include_webjars: bool = True
    include_swagger_resources: bool = True
    # None means "ask the host application"
    swagger_available: Optional[bool] = None
    base_package: Optional[str] = None
    topic: str = DEFAULT_TOPIC

    @classmethod
    def from_properties(cls, properties: Mapping[str, str]) -> 'ScannerConfig':
        """Build config from dotted property names; missing keys keep defaults"""
        return cls(
            service_name=properties.get(SERVICE_NAME) or "unknown",
            controller_enabled=_bool(properties.get(CONTROLLER_ENABLED), True),
            swagger_enabled=_bool(properties.get(SWAGGER_ENABLED), True),
            include_webjars=_bool(properties.get(INCLUDE_WEBJARS), True),
            include_swagger_resources=_bool(properties.get(INCLUDE_SWAGGER_RESOURCES), True),
            swagger_available=_optional_bool(properties.get(SWAGGER_AVAILABLE)),
            base_package=properties.get(BASE_PACKAGE) or None,
            topic=properties.get(TOPIC) or DEFAULT_TOPIC,
        )

    @classmethod
    def from_env(cls) -> 'ScannerConfig':
        """Load scanner config from environment variables"""
        properties = {}
        for name in PROPERTY_NAMES:
            value = os.getenv(env_key(name))
            if value is not None:
                properties[name] = value
        return cls.from_properties(properties)
