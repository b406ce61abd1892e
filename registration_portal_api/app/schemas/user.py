"""
Pydantic models for users.

Users are kept by the storage repository for a future login flow; no
route exposes them yet.
"""

from .base import CamelModel, RequiredStr


class UserCreate(CamelModel):
    """Schema for creating a user."""

    username: RequiredStr
    password: RequiredStr


class UserRead(UserCreate):
    id: int
