"""
Vote record endpoints for API v1.

Besides listing and creation, vote records can be filtered by the
official who cast them.  Filtering by an unknown official returns an
empty list rather than 404, since the official may simply not have
voted yet.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.schemas.vote_record import VoteRecord, VoteRecordCreate
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()


@router.get("/", response_model=List[VoteRecord])
async def list_vote_records(storage: Storage = Depends(get_storage)) -> List[VoteRecord]:
    """Return all vote records."""
    return storage.get_all_vote_records()


@router.get("/official/{official_id}", response_model=List[VoteRecord])
async def list_vote_records_by_official(
    official_id: str,
    storage: Storage = Depends(get_storage),
) -> List[VoteRecord]:
    """Return every vote cast by the given official."""
    return storage.get_vote_records_by_official(official_id)


@router.post("/", response_model=VoteRecord, status_code=status.HTTP_201_CREATED)
async def create_vote_record(
    record_in: VoteRecordCreate,
    storage: Storage = Depends(get_storage),
) -> VoteRecord:
    """Record a vote.

    The referenced official and activity are not checked for existence.
    """
    return storage.create_vote_record(record_in)
