"""Pydantic schemas for request/response validation."""

from event_booking.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from event_booking.schemas.common import ApiResponse, CamelModel
from event_booking.schemas.user import TokenData, UserResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "AuthResponse",
    "LoginRequest",
    "RegisterRequest",
    "TokenData",
    "UserResponse",
]
