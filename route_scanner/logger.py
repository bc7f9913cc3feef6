"""
Service Logger Setup

Configures the root handlers for a service process from LoggingConfig.
Modules keep using logging.getLogger(__name__); this only decides where the
records go and how they look.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

from .config.logging_config import LoggingConfig


class JSONFormatter(logging.Formatter):
    """One JSON object per log record"""

    def __init__(self, service_name: str, environment: str):
        super().__init__()
        self.service_name = service_name
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "service": self.service_name,
            "environment": self.environment,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def setup_service_logger(
    service_name: str,
    config: Optional[LoggingConfig] = None,
) -> logging.Logger:
    """
    Configure logging for a service and return its logger.

    Args:
        service_name: Logger name, also stamped on structured records
        config: Logging settings (defaults to LoggingConfig.from_env())

    Returns:
        The service logger
    """
    config = config or LoggingConfig.from_env()

    if config.enable_structured:
        formatter: logging.Formatter = JSONFormatter(service_name, config.environment)
    else:
        formatter = logging.Formatter(config.log_format)

    handlers = []
    if config.enable_console:
        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(formatter)
        handlers.append(console)
    if config.log_file:
        file_handler = logging.FileHandler(config.log_file)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.setLevel(config.log_level.upper())
    for handler in list(root.handlers):
        # Replace handlers installed by a previous setup call
        if getattr(handler, "_route_scanner_handler", False):
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        handler._route_scanner_handler = True
        root.addHandler(handler)

    logger = logging.getLogger(service_name)
    logger.debug(f"Logging configured for {service_name} (level={config.log_level})")
    return logger
