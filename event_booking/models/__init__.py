"""SQLModel database models."""

from event_booking.models.enums import CreatorVerificationStatus, UserRoleName
from event_booking.models.role import Role
from event_booking.models.user import User
from event_booking.models.user_role import UserRole

__all__ = [
    "CreatorVerificationStatus",
    "UserRoleName",
    "Role",
    "User",
    "UserRole",
]
