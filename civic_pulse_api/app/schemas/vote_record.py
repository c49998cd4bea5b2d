"""
Pydantic models for vote records.

A vote record states how an official voted on a government activity.
"""

from datetime import datetime
from typing import Literal

from pydantic import Field

from .base import ApiModel

VoteChoice = Literal["yes", "no", "abstain"]


class VoteRecordCreate(ApiModel):
    """Schema for recording an official's vote."""

    official_id: str
    activity_id: str
    vote: VoteChoice = Field(..., examples=["yes"])
    issue: str = Field(..., examples=["Safe Streets Initiative"])
    date: datetime


class VoteRecord(VoteRecordCreate):
    """Stored vote record."""

    id: str
