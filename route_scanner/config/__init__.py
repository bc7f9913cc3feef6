#!/usr/bin/env python3
"""Modular configuration for the route scanner

Configuration hierarchy:
- scanner_config: scan switches, service identity, publish topic
- infra_config: message bus (NATS) and service catalog (Consul) endpoints
- logging_config: logging configuration
"""
import os
from dotenv import load_dotenv
from .logging_config import LoggingConfig
from .infra_config import InfraConfig
from .scanner_config import ScannerConfig, DEFAULT_TOPIC, env_key

# Load environment file based on ENV
env = os.getenv("ENV") or os.getenv("ENVIRONMENT", "development")
env_files = {
    "development": "deployment/environments/dev.env",
    "dev": "deployment/environments/dev.env",
    "testing": "deployment/environments/test.env",
    "test": "deployment/environments/test.env",
    "staging": "deployment/environments/staging.env",
    "production": "deployment/environments/production.env",
}
env_file = env_files.get(env, "deployment/environments/dev.env")
load_dotenv(env_file, override=False)


def get_scanner_config() -> ScannerConfig:
    """Read scanner settings from the current environment"""
    return ScannerConfig.from_env()


def get_infra_config() -> InfraConfig:
    """Read infrastructure settings from the current environment"""
    return InfraConfig.from_env()


__all__ = [
    'ScannerConfig',
    'InfraConfig',
    'LoggingConfig',
    'DEFAULT_TOPIC',
    'env_key',
    'get_scanner_config',
    'get_infra_config',
]
