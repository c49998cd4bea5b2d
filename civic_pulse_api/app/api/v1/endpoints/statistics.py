"""
Area statistics endpoints for API v1.

Single statistics entries are addressed by area (a zipcode, city or
state name), not by ID.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.schemas.statistic import Statistic, StatisticCreate
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()


@router.get("/", response_model=List[Statistic])
async def list_statistics(storage: Storage = Depends(get_storage)) -> List[Statistic]:
    """Return statistics for every area."""
    return storage.get_all_statistics()


@router.get("/{area}", response_model=Statistic)
async def get_statistic(area: str, storage: Storage = Depends(get_storage)) -> Statistic:
    """Return statistics for an area.  Returns HTTP 404 if none exist."""
    stat = storage.get_statistic_by_area(area)
    if stat is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Statistics not found for this area",
        )
    return stat


@router.post("/", response_model=Statistic, status_code=status.HTTP_201_CREATED)
async def create_statistic(
    stat_in: StatisticCreate,
    storage: Storage = Depends(get_storage),
) -> Statistic:
    """Create a statistics entry for an area."""
    return storage.create_statistic(stat_in)
