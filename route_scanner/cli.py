#!/usr/bin/env python3
"""
Route scanner command line tool

    route-scanner preview microservices.user_service.user_controller
    route-scanner aggregate-docs user order
    route-scanner aggregate-docs --from-consul
"""

import argparse
import asyncio
import importlib
import logging
import sys
from typing import List, Optional

from .catalog import ServiceCatalog
from .config import get_infra_config, get_scanner_config
from .documentation import synthesize_documentation_routes
from .factory import create_route_scanner
from .inventory import build_inventory
from .logger import setup_service_logger
from .mapping import get_controller_registry
from .synthesizer import normalize_service_name, synthesize_controller_routes

logger = logging.getLogger(__name__)


def preview_routes(modules: List[str], with_docs: bool = False) -> List[str]:
    """Import controller modules and return the routes a scan would publish, as JSON lines"""
    for module in modules:
        importlib.import_module(module)

    config = get_scanner_config()
    service_name = normalize_service_name(config.service_name)
    controllers = get_controller_registry().controllers(config.base_package)

    routes = synthesize_controller_routes(service_name, build_inventory(controllers))
    if with_docs:
        routes += synthesize_documentation_routes(
            service_name,
            include_webjars=config.include_webjars,
            include_swagger_resources=config.include_swagger_resources,
        )
    return [route.to_json().decode("utf-8") for route in routes]


async def publish_aggregated_docs(service_names: List[str], from_consul: bool = False) -> int:
    """Publish the gateway documentation routes; returns the number of failures"""
    names = list(service_names)
    if from_consul:
        names += ServiceCatalog(get_infra_config()).list_service_names()
    names = sorted(set(names))
    if not names:
        print("No services to aggregate")
        return 0

    scanner = create_route_scanner()
    await scanner.sink.connect()
    try:
        result = await scanner.publish_aggregated_documentation(names)
    finally:
        await scanner.sink.close()

    print(f"Published {result.sent}/{result.generated} aggregated documentation routes")
    if result.error:
        print(f"Error: {result.error}")
        return 1
    return result.failed


async def main(argv: Optional[List[str]] = None) -> int:
    """Entry point"""
    parser = argparse.ArgumentParser(description="Gateway route scanner tool")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    preview_parser = subparsers.add_parser("preview", help="Print the routes a scan would publish")
    preview_parser.add_argument("modules", nargs="+", help="Modules declaring controllers")
    preview_parser.add_argument("--with-docs", action="store_true", help="Include documentation routes")

    aggregate_parser = subparsers.add_parser("aggregate-docs", help="Publish gateway documentation routes")
    aggregate_parser.add_argument("services", nargs="*", help="Short service names")
    aggregate_parser.add_argument("--from-consul", action="store_true", help="Add every service registered in Consul")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    setup_service_logger("route-scanner")

    if args.command == "preview":
        for line in preview_routes(args.modules, args.with_docs):
            print(line)
        return 0

    return await publish_aggregated_docs(args.services, args.from_consul)


def run():
    try:
        sys.exit(asyncio.run(main()))
    except Exception as e:
        print(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    run()
