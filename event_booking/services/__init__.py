"""Business logic services."""

from event_booking.services.auth_service import AuthService
from event_booking.services.user_details_service import SecurityUser, UserDetailsService
from event_booking.services.user_service import UserService

__all__ = [
    "AuthService",
    "SecurityUser",
    "UserDetailsService",
    "UserService",
]
