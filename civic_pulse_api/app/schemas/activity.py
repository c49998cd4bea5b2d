"""
Pydantic models for government activities.

A government activity is anything happening in government that a
citizen may want to follow: a bill, a meeting, a vote or a budget
proposal.  Meetings and budgets usually carry an ordered list of
agenda items; bills and votes may carry a vote result.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from .base import ApiModel

ActivityType = Literal["bill", "meeting", "vote", "budget"]
ActivityStatus = Literal["upcoming", "in-progress", "completed"]


class GovernmentActivityCreate(ApiModel):
    """Schema for creating a government activity."""

    type: ActivityType = Field(..., examples=["bill"])
    title: str = Field(..., examples=["Safe Streets Initiative - HB 2847"])
    description: str
    category: str = Field(..., examples=["infrastructure"])
    date: datetime = Field(..., examples=["2025-11-15T00:00:00Z"])
    status: ActivityStatus = Field(..., examples=["upcoming"])
    location: str = Field(..., examples=["City Hall, Room 400"])
    agenda_items: Optional[List[str]] = None
    vote_result: Optional[str] = Field(None, examples=["passed"])


class GovernmentActivity(GovernmentActivityCreate):
    """Stored government activity."""

    id: str
