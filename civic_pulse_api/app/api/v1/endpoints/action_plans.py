"""
Action plan endpoints for API v1.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.schemas.action_plan import ActionPlan, ActionPlanCreate
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()


@router.get("/", response_model=List[ActionPlan])
async def list_action_plans(storage: Storage = Depends(get_storage)) -> List[ActionPlan]:
    """Return all action plans."""
    return storage.get_all_action_plans()


@router.get("/{plan_id}", response_model=ActionPlan)
async def get_action_plan(plan_id: str, storage: Storage = Depends(get_storage)) -> ActionPlan:
    """Retrieve a single action plan.  Returns HTTP 404 if it does not exist."""
    plan = storage.get_action_plan(plan_id)
    if plan is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Action plan not found")
    return plan


@router.post("/", response_model=ActionPlan, status_code=status.HTTP_201_CREATED)
async def create_action_plan(
    plan_in: ActionPlanCreate,
    storage: Storage = Depends(get_storage),
) -> ActionPlan:
    """Create an action plan for a citizen issue.

    The referenced issue, official and activity are not checked for existence.
    """
    return storage.create_action_plan(plan_in)
