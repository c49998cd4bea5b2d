"""
Pydantic models for user accounts.

``User`` is the stored record and carries the password hash.
``UserRead`` is what the API returns; it never includes the password.
"""

from pydantic import Field

from .base import ApiModel


class UserCreate(ApiModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["jdoe"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class User(UserCreate):
    """Stored user record."""

    id: str


class UserRead(ApiModel):
    """Schema for reading a user from the API."""

    id: str
    username: str
