"""
Component Test Layer Configuration

Structure:
    tests/component/
    ├── mocks/       Mock implementations (sink, NATS, Consul)
    └── test_*.py    Publisher, scanner, sink, catalog, service startup

Usage:
    pytest tests/component -v
"""
import os
import sys

import pytest

# Set testing environment BEFORE any imports
os.environ["ENV"] = "testing"
os.environ["ENVIRONMENT"] = "testing"

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))

from route_scanner.config import ScannerConfig
from route_scanner.mapping import ControllerRegistry
from tests.component.mocks import MockConsul, MockNATSConnection, MockRouteSink


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


# =============================================================================
# Sink Mocks
# =============================================================================

@pytest.fixture
def mock_sink() -> MockRouteSink:
    """In-memory route sink"""
    return MockRouteSink()


@pytest.fixture
def mock_nats() -> MockNATSConnection:
    """Mock nats-py connection with JetStream"""
    return MockNATSConnection()


@pytest.fixture
def mock_consul() -> MockConsul:
    """Mock Consul client"""
    return MockConsul()


# =============================================================================
# Scanner Inputs
# =============================================================================

@pytest.fixture
def registry() -> ControllerRegistry:
    """Empty controller registry"""
    return ControllerRegistry()


@pytest.fixture
def scanner_config() -> ScannerConfig:
    """Default switches for service 'order-service'"""
    return ScannerConfig(service_name="order-service")
