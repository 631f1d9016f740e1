"""
API router.

Aggregates all endpoints.
"""

from fastapi import APIRouter

from event_booking.api.v1.endpoints import auth

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
