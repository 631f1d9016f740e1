"""Database repositories."""

from event_booking.db.repositories.role import RoleRepository
from event_booking.db.repositories.user import UserRepository

__all__ = [
    "RoleRepository",
    "UserRepository",
]
