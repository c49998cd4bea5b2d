"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When a new domain is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import (
    action_plans,
    activities,
    health,
    issues,
    officials,
    statistics,
    users,
    vote_records,
)

router = APIRouter()

router.include_router(activities.router, prefix="/government-activities", tags=["government activities"])
router.include_router(issues.router, prefix="/citizen-issues", tags=["citizen issues"])
router.include_router(officials.router, prefix="/officials", tags=["officials"])
router.include_router(vote_records.router, prefix="/vote-records", tags=["vote records"])
router.include_router(statistics.router, prefix="/statistics", tags=["statistics"])
router.include_router(action_plans.router, prefix="/action-plans", tags=["action plans"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(health.router, prefix="/health", tags=["health"])
