"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import Session, select

from event_booking.models.user import User
from event_booking.models.user_role import UserRole


class UserRepository:
    """Repository for User database operations.

    Methods only flush; committing is left to the calling service so a
    multi-step flow stays one transaction.
    """

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def add(self, user: User) -> User:
        """
        Stage a new or modified user and flush it.

        Args:
            user: User instance to persist

        Returns:
            The same user, with its generated id populated
        """
        self.session.add(user)
        self.session.flush()
        return user

    def add_role(self, user: User, user_role: UserRole) -> User:
        """
        Attach a role assignment to a user and flush.

        Args:
            user: Persisted user
            user_role: Role assignment to attach

        Returns:
            The user with the assignment in user_roles
        """
        user.user_roles.append(user_role)
        self.session.add(user)
        self.session.flush()
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        """
        Check if a user with the given email exists.

        Args:
            email: Email to check

        Returns:
            True if user exists, False otherwise
        """
        return self.get_by_email(email) is not None
