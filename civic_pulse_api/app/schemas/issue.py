"""
Pydantic models for citizen issues.

Citizens report issues in their neighbourhood.  New issues start with
zero votes and ``pending`` status; once an issue is linked to a
government activity it is typically moved to ``matched``.  Citizen
issues are the only records that can be changed after creation.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from .base import ApiModel


class CitizenIssueCreate(ApiModel):
    """Schema for reporting a new citizen issue."""

    title: str = Field(..., examples=["Pothole"])
    description: str = ""
    category: str = Field(..., examples=["infrastructure"])
    location: str = Field(..., examples=["Downtown District"])
    zipcode: str = Field(..., examples=["94102"])


class CitizenIssue(CitizenIssueCreate):
    """Stored citizen issue, including server-assigned fields."""

    id: str
    votes: int = Field(0, ge=0)
    status: str = "pending"
    created_at: datetime
    matched_activity_id: Optional[str] = None


class CitizenIssueUpdate(ApiModel):
    """Schema for partially updating a citizen issue.

    All fields are optional; only fields present in the payload are
    applied.  Sending ``matchedActivityId: null`` explicitly clears the
    link, omitting it leaves the link untouched.  Every other field may be
    omitted but not set to null.
    """

    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    location: Optional[str] = None
    zipcode: Optional[str] = None
    votes: Optional[int] = Field(None, ge=0)
    status: Optional[str] = None
    matched_activity_id: Optional[str] = None

    @field_validator(
        "title", "description", "category", "location", "zipcode", "votes", "status"
    )
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("field may be omitted but not set to null")
        return v
