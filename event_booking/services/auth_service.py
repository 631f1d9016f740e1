"""
Authentication service.

Registration, login and token issuance.
"""

import logging
from typing import Any, Dict

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from event_booking.core.config import settings
from event_booking.core.exceptions import (
    AuthenticationException,
    ConfigurationError,
    UserNotFoundException,
    ValidationException,
)
from event_booking.core.security import create_access_token, get_password_hash, verify_password
from event_booking.db.repositories.role import RoleRepository
from event_booking.db.repositories.user import UserRepository
from event_booking.models.enums import CreatorVerificationStatus
from event_booking.models.user import User
from event_booking.models.user_role import UserRole
from event_booking.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from event_booking.services.user_details_service import SecurityUser, UserDetailsService, to_security_user

logger = logging.getLogger(__name__)

EMAIL_ALREADY_REGISTERED = "Email already registered"
BAD_CREDENTIALS = "Invalid email or password"
ACCOUNT_DISABLED = "Account is suspended or inactive"

# Verified against when the email is unknown, so both failure paths pay the bcrypt cost
_DUMMY_HASH = get_password_hash("event-booking-unknown-user")


class AuthService:
    """Service for registration and login."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session
        self.user_repository = UserRepository(session)
        self.role_repository = RoleRepository(session)
        self.user_details_service = UserDetailsService(session)

    def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Register a new user, assign the default role and issue a token.

        User creation and role assignment are committed together; nothing
        is persisted if any step fails.

        Args:
            request: Registration data

        Returns:
            Token plus the new user's id and email

        Raises:
            ValidationException: If the email is already registered
            ConfigurationError: If the default role has not been seeded
        """
        # Fast path, the unique index on users.email is the real guard
        if self.user_repository.exists_by_email(request.email):
            raise ValidationException(EMAIL_ALREADY_REGISTERED)

        user = User(
            email=request.email,
            hashed_password=get_password_hash(request.password),
            first_name=request.first_name,
            last_name=request.last_name,
            phone=request.phone,
            is_email_verified=False,
            is_active=True,
            is_suspended=False,
            creator_verification_status=CreatorVerificationStatus.NOT_REQUESTED,
        )

        try:
            user = self.user_repository.add(user)

            role = self.role_repository.get_by_name(settings.DEFAULT_ROLE)
            if role is None:
                raise ConfigurationError(f"{settings.DEFAULT_ROLE.value} role not found")

            self.user_repository.add_role(user, UserRole(role=role))
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            logger.info("Concurrent registration lost the race for %s", request.email)
            raise ValidationException(EMAIL_ALREADY_REGISTERED)
        except Exception:
            self.session.rollback()
            raise

        self.session.refresh(user)
        logger.info("Registered user id=%s", user.id)

        return self._issue_token(to_security_user(user), user)

    def authenticate(self, email: str, password: str) -> SecurityUser:
        """
        Verify credentials and return the principal.

        Unknown email and wrong password fail identically.

        Raises:
            AuthenticationException: On bad credentials
        """
        try:
            principal = self.user_details_service.load_user_by_username(email)
        except UserNotFoundException:
            verify_password(password, _DUMMY_HASH)
            raise AuthenticationException(BAD_CREDENTIALS)

        if not verify_password(password, principal.password):
            raise AuthenticationException(BAD_CREDENTIALS)

        return principal

    def login(self, request: LoginRequest) -> AuthResponse:
        """
        Authenticate a user and issue a token.

        Args:
            request: Login credentials

        Returns:
            Token plus the user's id and email

        Raises:
            AuthenticationException: On bad credentials
            ValidationException: If the account is inactive or suspended
            ConfigurationError: If the user disappears after authentication
        """
        try:
            principal = self.authenticate(request.email, request.password)
        except AuthenticationException:
            logger.warning("Failed login attempt")
            raise

        # Account flags are read from the current row, not the principal
        user = self.user_repository.get_by_email(principal.email)
        if user is None:
            raise ConfigurationError(f"User {principal.id} vanished after authentication")

        if not user.is_active or user.is_suspended:
            logger.info("Login refused for disabled account id=%s", user.id)
            raise ValidationException(ACCOUNT_DISABLED)

        logger.info("User id=%s logged in", user.id)
        return self._issue_token(principal, user)

    @staticmethod
    def build_claims(user: User) -> Dict[str, Any]:
        return {"userId": user.id, "email": user.email}

    def _issue_token(self, principal: SecurityUser, user: User) -> AuthResponse:
        claims = self.build_claims(user)
        claims["roles"] = list(principal.authorities)
        token = create_access_token(principal.username, claims)
        return AuthResponse(token=token, email=user.email, user_id=user.id)
