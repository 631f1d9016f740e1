"""
User API schemas.

Pydantic models for user data in responses and decoded token claims.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict, EmailStr
from pydantic.alias_generators import to_camel

from event_booking.models.enums import CreatorVerificationStatus
from event_booking.schemas.common import CamelModel


class UserResponse(CamelModel):
    """Schema for user data in API responses (no sensitive data)."""
    id: int
    email: EmailStr
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    is_email_verified: bool
    is_active: bool
    is_suspended: bool
    creator_verification_status: CreatorVerificationStatus
    roles: List[str] = []
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True,
                              from_attributes=True)  # Allows creation from SQLModel objects


class TokenData(CamelModel):
    """Claims recovered from a verified access token."""
    sub: str
    user_id: int
    email: EmailStr
    roles: List[str] = []
