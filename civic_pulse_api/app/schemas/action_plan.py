"""
Pydantic models for action plans.

An action plan is a recommended follow-up for a citizen issue: call
an official, attend a meeting, send an email.  It may point at the
official to contact and the activity it relates to.
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from .base import ApiModel

Priority = Literal["high", "medium", "low"]


class ActionPlanCreate(ApiModel):
    """Schema for creating an action plan."""

    issue_id: str
    official_id: Optional[str] = None
    activity_id: Optional[str] = None
    action_type: str = Field(..., examples=["call"])
    title: str
    description: str = ""
    due_date: datetime
    priority: Priority = Field("medium", examples=["high"])


class ActionPlan(ActionPlanCreate):
    """Stored action plan."""

    id: str
