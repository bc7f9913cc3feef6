"""
Shared Test Fixtures

Factories used across all test layers.

Structure:
    - route_fixtures.py: Route records and controller class builders
"""

from .route_fixtures import (
    make_controller,
    make_route,
    make_routes,
)

__all__ = [
    "make_controller",
    "make_route",
    "make_routes",
]
