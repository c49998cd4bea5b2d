"""
Citizen issue endpoints for API v1.

Citizens can report issues and list or retrieve them.  ``PATCH``
applies a partial update: only the fields present in the request body
change.  This is how an issue gets votes and is matched to a
government activity.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.schemas.issue import CitizenIssue, CitizenIssueCreate, CitizenIssueUpdate
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()


@router.get("/", response_model=List[CitizenIssue])
async def list_issues(storage: Storage = Depends(get_storage)) -> List[CitizenIssue]:
    """Return all citizen issues."""
    return storage.get_all_citizen_issues()


@router.get("/{issue_id}", response_model=CitizenIssue)
async def get_issue(issue_id: str, storage: Storage = Depends(get_storage)) -> CitizenIssue:
    """Retrieve a single issue.  Returns HTTP 404 if it does not exist."""
    issue = storage.get_citizen_issue(issue_id)
    if issue is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Issue not found")
    return issue


@router.post("/", response_model=CitizenIssue, status_code=status.HTTP_201_CREATED)
async def create_issue(
    issue_in: CitizenIssueCreate,
    storage: Storage = Depends(get_storage),
) -> CitizenIssue:
    """Report a new issue.

    The server sets ``votes`` to 0, ``status`` to ``pending`` and
    ``createdAt`` to the current time.
    """
    return storage.create_citizen_issue(issue_in)


@router.patch("/{issue_id}", response_model=CitizenIssue)
async def update_issue(
    issue_id: str,
    issue_in: CitizenIssueUpdate,
    storage: Storage = Depends(get_storage),
) -> CitizenIssue:
    """Partially update an issue.  Returns HTTP 404 if it does not exist."""
    issue = storage.update_citizen_issue(issue_id, issue_in)
    if issue is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Issue not found")
    return issue
