"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication and database access.
"""

from typing import Optional

from fastapi import Depends
from pydantic import ValidationError
from sqlmodel import Session

from event_booking.core.exceptions import AuthenticationException
from event_booking.core.security import decode_access_token, oauth2_scheme
from event_booking.db.session import get_db
from event_booking.models.user import User
from event_booking.schemas.user import TokenData
from event_booking.services.user_service import UserService


def get_token_data(token: Optional[str] = Depends(oauth2_scheme)) -> TokenData:
    """Verify the bearer token and parse its claims."""
    if not token:
        raise AuthenticationException("Not authenticated")

    claims = decode_access_token(token)
    if not claims:
        raise AuthenticationException("Invalid or expired token")

    try:
        return TokenData.model_validate(claims)
    except ValidationError:
        raise AuthenticationException("Invalid or expired token")


def get_current_user(token_data: TokenData = Depends(get_token_data), db: Session = Depends(get_db), ) -> User:
    """Extract and validate the current user from the JWT token."""
    user = UserService(db).get_user_by_email(token_data.sub)
    if not user:
        raise AuthenticationException("Invalid or expired token")
    return user
