"""
Government activity endpoints for API v1.

Activities are read-only once created: the API offers listing,
retrieval by ID and creation.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.schemas.activity import GovernmentActivity, GovernmentActivityCreate
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()


@router.get("/", response_model=List[GovernmentActivity])
async def list_activities(storage: Storage = Depends(get_storage)) -> List[GovernmentActivity]:
    """Return all government activities."""
    return storage.get_all_government_activities()


@router.get("/{activity_id}", response_model=GovernmentActivity)
async def get_activity(activity_id: str, storage: Storage = Depends(get_storage)) -> GovernmentActivity:
    """Retrieve a single activity.  Returns HTTP 404 if it does not exist."""
    activity = storage.get_government_activity(activity_id)
    if activity is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Activity not found")
    return activity


@router.post("/", response_model=GovernmentActivity, status_code=status.HTTP_201_CREATED)
async def create_activity(
    activity_in: GovernmentActivityCreate,
    storage: Storage = Depends(get_storage),
) -> GovernmentActivity:
    """Create a new government activity."""
    return storage.create_government_activity(activity_in)
