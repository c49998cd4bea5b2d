"""
User endpoints for API v1.

Registration hashes the password before it reaches the store, and
responses never include it.  Usernames are unique: registering a
taken username returns HTTP 409.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.core.security import hash_password
from civic_pulse_api.app.schemas.user import UserCreate, UserRead
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def register_user(user_in: UserCreate, storage: Storage = Depends(get_storage)) -> UserRead:
    """Register a new user."""
    if storage.get_user_by_username(user_in.username) is not None:
        logger.info("Rejected registration for existing username %s", user_in.username)
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already registered")
    user = storage.create_user(
        UserCreate(username=user_in.username, password=hash_password(user_in.password))
    )
    return UserRead.model_validate(user)


@router.get("/by-username/{username}", response_model=UserRead)
async def get_user_by_username(username: str, storage: Storage = Depends(get_storage)) -> UserRead:
    """Look up a user by username.  Returns HTTP 404 if none exists."""
    user = storage.get_user_by_username(username)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(user)


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: str, storage: Storage = Depends(get_storage)) -> UserRead:
    """Retrieve a single user.  Returns HTTP 404 if it does not exist."""
    user = storage.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(user)
