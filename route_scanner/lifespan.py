"""
FastAPI lifespan integration

Runs the route scan when the application starts and
releases the sink on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from .factory import create_route_scanner
from .protocols import ConnectableSinkProtocol
from .scanner import RouteScanner

logger = logging.getLogger(__name__)


async def _connect_sink(sink) -> bool:
    if not isinstance(sink, ConnectableSinkProtocol):
        return True
    try:
        await sink.connect()
        return True
    except Exception as e:
        logger.warning(f"Route sink unavailable, skipping route publication: {e}")
        return False


async def _close_sink(sink):
    if not isinstance(sink, ConnectableSinkProtocol):
        return
    try:
        await sink.close()
    except Exception as e:
        logger.warning(f"Error closing route sink: {e}")


@asynccontextmanager
async def route_scanner_lifespan(app, scanner: Optional[RouteScanner] = None, **factory_kwargs):
    """
    FastAPI lifespan context manager for route publication

    Usage:
        @asynccontextmanager
        async def lifespan(app):
            async with route_scanner_lifespan(app):
                yield

        app = FastAPI(lifespan=lifespan)

    Results of the startup scan are kept in app.state.route_scan_results.
    """
    # Startup
    scanner = scanner or create_route_scanner(app=app, **factory_kwargs)
    app.state.route_scanner = scanner
    app.state.route_scan_results = []

    if await _connect_sink(scanner.sink):
        app.state.route_scan_results = await scanner.on_service_ready()

    yield

    # Shutdown
    await _close_sink(scanner.sink)
