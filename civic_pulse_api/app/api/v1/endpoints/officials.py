"""
Official endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.schemas.official import Official, OfficialCreate
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()


@router.get("/", response_model=List[Official])
async def list_officials(storage: Storage = Depends(get_storage)) -> List[Official]:
    """Return all officials."""
    return storage.get_all_officials()


@router.get("/{official_id}", response_model=Official)
async def get_official(official_id: str, storage: Storage = Depends(get_storage)) -> Official:
    """Retrieve a single official.  Returns HTTP 404 if it does not exist."""
    official = storage.get_official(official_id)
    if official is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Official not found")
    return official


@router.post("/", response_model=Official, status_code=status.HTTP_201_CREATED)
async def create_official(
    official_in: OfficialCreate,
    storage: Storage = Depends(get_storage),
) -> Official:
    """Create a new official."""
    return storage.create_official(official_in)
