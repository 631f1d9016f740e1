"""
User details service.

Loads the authentication principal for a login attempt.
"""

import logging
from dataclasses import dataclass, field
from typing import List

from sqlmodel import Session

from event_booking.core.exceptions import UserNotFoundException
from event_booking.db.repositories.user import UserRepository
from event_booking.models.user import User

logger = logging.getLogger(__name__)

AUTHORITY_PREFIX = "ROLE_"


@dataclass(frozen=True)
class SecurityUser:
    """Authentication principal: identity, password hash, authorities and account state."""
    id: int
    email: str
    password: str
    authorities: List[str] = field(default_factory=list)
    account_non_expired: bool = True
    account_non_locked: bool = True
    credentials_non_expired: bool = True
    enabled: bool = True

    @property
    def username(self) -> str:
        return self.email


def get_authorities(user: User) -> List[str]:
    """One prefixed authority per role assignment, in assignment order."""
    return [f"{AUTHORITY_PREFIX}{user_role.role.name.value}" for user_role in user.user_roles]


def to_security_user(user: User) -> SecurityUser:
    return SecurityUser(
        id=user.id,
        email=user.email,
        password=user.hashed_password,
        authorities=get_authorities(user),
        account_non_expired=True,
        account_non_locked=not user.is_suspended,
        credentials_non_expired=True,
        enabled=user.is_active and not user.is_suspended,
    )


class UserDetailsService:
    """Builds SecurityUser principals from stored users."""

    def __init__(self, session: Session):
        self.repository = UserRepository(session)

    def load_user_by_username(self, email: str) -> SecurityUser:
        """
        Load the principal for an email.

        Args:
            email: Login name

        Returns:
            SecurityUser for the matching account

        Raises:
            UserNotFoundException: If no user has this email
        """
        user = self.repository.get_by_email(email)
        if user is None:
            logger.debug("No user found for login name %s", email)
            raise UserNotFoundException(f"User not found with email: {email}")
        return to_security_user(user)
