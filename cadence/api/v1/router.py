"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from cadence.api.v1.endpoints import programs, schedule, sets

api_router = APIRouter()

api_router.include_router(
    programs.router, prefix="/programs", tags=["Program assignment"]
)
api_router.include_router(
    schedule.router, prefix="/schedule", tags=["Schedule"]
)
api_router.include_router(
    sets.router, prefix="/sets", tags=["Logged sets"]
)
