"""
User Service Microservice

Sample service whose controller routes are published to the gateway.
"""

from .user_controller import UserController
from .models import User, UserCreateRequest, UserUpdateRequest

__version__ = "1.0.0"
__all__ = [
    "UserController",
    "User",
    "UserCreateRequest",
    "UserUpdateRequest",
]
