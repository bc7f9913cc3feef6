"""
User Service Models

Pydantic models for the sample user controller.
"""

from typing import Optional

from pydantic import BaseModel, Field


class User(BaseModel):
    """User record"""
    id: int
    name: str
    email: str


class UserCreateRequest(BaseModel):
    """Create user request"""
    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)


class UserUpdateRequest(BaseModel):
    """Update user request"""
    name: Optional[str] = None
    email: Optional[str] = None
