"""
Unit Test Layer Configuration

Structure:
    tests/unit/
    ├── test_mapping.py        Mapping decorators and registry
    ├── test_inventory.py      Path normalization and per-controller inventory
    ├── test_synthesizer.py    Controller routes
    ├── test_documentation.py  Documentation routes
    ├── test_models.py         Route record model and wire form
    ├── test_config.py         Configuration surface
    └── test_logger.py         Service logger setup

Usage:
    pytest tests/unit -v                 # All unit tests
    pytest tests/unit -m unit -v         # By marker
"""
import os
import sys

import pytest

# Add project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


def pytest_configure(config):
    """Configure custom markers"""
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
