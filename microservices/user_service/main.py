"""
User Microservice

Sample service for the gateway route scanner.

Responsibilities:
- Serve the user management API declared by UserController
- Publish its gateway routes (controller + API documentation) on startup
"""

import dataclasses
import logging
import os
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI

from route_scanner.config import ScannerConfig
from route_scanner.lifespan import route_scanner_lifespan
from route_scanner.logger import setup_service_logger
from route_scanner.scanner import RouteScanner
from route_scanner.web import mount_controller

from .user_controller import UserController

SERVICE_NAME = "user_service"
SERVICE_PORT = int(os.getenv("USER_SERVICE_PORT", "8201"))

logger = logging.getLogger(__name__)


def load_scanner_config() -> ScannerConfig:
    """Environment settings, defaulting identity and scope to this service"""
    config = ScannerConfig.from_env()
    if config.service_name == "unknown":
        config = dataclasses.replace(config, service_name=SERVICE_NAME)
    if config.base_package is None:
        config = dataclasses.replace(config, base_package=__package__)
    return config


def create_app(scanner: Optional[RouteScanner] = None) -> FastAPI:
    """Build the application; pass a scanner to replace the NATS-backed one"""

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan management"""
        logger.info(f"Starting {SERVICE_NAME}")
        async with route_scanner_lifespan(app, scanner=scanner, config_loader=load_scanner_config):
            yield
        logger.info(f"{SERVICE_NAME} stopped")

    app = FastAPI(
        title="User Service",
        description="User management service",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.include_router(mount_controller(UserController()), tags=["User Management"])

    @app.get("/health")
    async def health_check():
        """Service health check"""
        return {
            "status": "healthy",
            "service": SERVICE_NAME,
            "port": SERVICE_PORT,
            "version": "1.0.0",
            "timestamp": datetime.utcnow().isoformat(),
        }

    return app


app = create_app()


if __name__ == "__main__":
    setup_service_logger(SERVICE_NAME)
    uvicorn.run(
        "microservices.user_service.main:app",
        host=os.getenv("USER_SERVICE_HOST", "0.0.0.0"),
        port=SERVICE_PORT,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )
