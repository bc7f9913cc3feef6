"""
User Controller

Sample controller declared with the route mapping decorators. The startup
scan turns it into a single gateway route:

    user-usercontroller  lb://user-service  Path=/api/users/**
"""

import itertools
from typing import Dict, List

from fastapi import HTTPException, status

from route_scanner import (
    delete_mapping,
    get_mapping,
    post_mapping,
    put_mapping,
    request_mapping,
    rest_controller,
)

from .models import User, UserCreateRequest, UserUpdateRequest


@rest_controller
@request_mapping("/api/users")
class UserController:
    """User management operations (in-memory store)"""

    def __init__(self):
        self._users: Dict[int, User] = {
            1: User(id=1, name="John Doe", email="john@example.com"),
            2: User(id=2, name="Jane Smith", email="jane@example.com"),
        }
        self._ids = itertools.count(3)

    def _get_or_404(self, user_id: int) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
        return user

    @get_mapping
    async def get_all_users(self) -> List[User]:
        """Get all users"""
        return list(self._users.values())

    @get_mapping("/{user_id}")
    async def get_user_by_id(self, user_id: int) -> User:
        """Get user by ID"""
        return self._get_or_404(user_id)

    @post_mapping
    async def create_user(self, request: UserCreateRequest) -> User:
        """Create new user"""
        user = User(id=next(self._ids), name=request.name, email=request.email)
        self._users[user.id] = user
        return user

    @put_mapping("/{user_id}")
    async def update_user(self, user_id: int, request: UserUpdateRequest) -> User:
        """Update user"""
        user = self._get_or_404(user_id)
        updated = user.model_copy(update=request.model_dump(exclude_none=True))
        self._users[user_id] = updated
        return updated

    @delete_mapping("/{user_id}")
    async def delete_user(self, user_id: int) -> Dict[str, bool]:
        """Delete user"""
        self._get_or_404(user_id)
        del self._users[user_id]
        return {"deleted": True}
