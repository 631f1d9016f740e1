"""
User service.

Read-side business logic for user profiles.
"""

from typing import Optional

from sqlmodel import Session

from event_booking.db.repositories.user import UserRepository
from event_booking.models.user import User
from event_booking.schemas.user import UserResponse
from event_booking.services.user_details_service import get_authorities


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email

        Returns:
            User if found, None otherwise
        """
        return self.repository.get_by_email(email)

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        return self.repository.get_by_id(user_id)

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """Profile view of a user, with its authorities and without the password hash."""
        return UserResponse.model_validate({**user.model_dump(), "roles": get_authorities(user)})
