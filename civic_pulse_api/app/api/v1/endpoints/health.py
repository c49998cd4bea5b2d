"""
Health endpoint for API v1.

Reports the service version and how many records of each kind the
store currently holds.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends

from civic_pulse_api.app.api.deps import get_storage
from civic_pulse_api.app.core.config import settings
from civic_pulse_api.app.services.storage import Storage

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def health(storage: Storage = Depends(get_storage)) -> Dict[str, Any]:
    """Report service status and record counts per kind."""
    return {
        "status": "ok",
        "version": settings.api_version,
        "records": {
            "government_activities": len(storage.get_all_government_activities()),
            "citizen_issues": len(storage.get_all_citizen_issues()),
            "officials": len(storage.get_all_officials()),
            "vote_records": len(storage.get_all_vote_records()),
            "statistics": len(storage.get_all_statistics()),
            "action_plans": len(storage.get_all_action_plans()),
        },
    }
