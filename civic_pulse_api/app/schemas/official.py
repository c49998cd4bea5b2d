"""
Pydantic models for elected officials.
"""

from typing import List

from pydantic import Field

from .base import ApiModel


class OfficialCreate(ApiModel):
    """Schema for creating an official."""

    name: str = Field(..., examples=["Sarah Johnson"])
    role: str = Field(..., examples=["City Council Member"])
    district: str = ""
    party: str = ""
    phone: str = ""
    email: str = ""
    photo_url: str = ""
    committees: List[str] = Field(default_factory=list)


class Official(OfficialCreate):
    """Stored official."""

    id: str
