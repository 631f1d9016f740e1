"""
Security utilities.

Password hashing (bcrypt) and JWT access token issuing/verification (PyJWT).
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import bcrypt
import jwt
from fastapi.security import OAuth2PasswordBearer

from event_booking.core.config import settings

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/auth/login", auto_error=False)


def get_password_hash(password: str) -> str:
    """
    Hash a plaintext password with a fresh bcrypt salt.

    Args:
        password: Plaintext password

    Returns:
        bcrypt hash as a utf-8 string
    """
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Check a plaintext password against a stored bcrypt hash.

    Returns False (never raises) for a malformed stored hash.
    """
    try:
        return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
    except ValueError:
        logger.warning("Stored password hash is not a valid bcrypt hash")
        return False


def create_access_token(subject: str, claims: Optional[Dict[str, Any]] = None,
                        expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed JWT access token.

    Args:
        subject: Principal name stored in the "sub" claim (the user's email)
        claims: Additional claims (userId, email, roles...)
        expires_delta: Token lifetime, defaults to ACCESS_TOKEN_EXPIRE_MINUTES

    Returns:
        Encoded JWT
    """
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES))

    to_encode: Dict[str, Any] = dict(claims or {})
    to_encode.update({"sub": subject, "iat": now, "exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> Optional[Dict[str, Any]]:
    """
    Verify a JWT and return its claims.

    Returns:
        Claims dict, or None if the token is expired, tampered with or malformed
    """
    try:
        return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM],
                          options={"require": ["sub", "exp"]})
    except jwt.ExpiredSignatureError:
        logger.info("Rejected expired access token")
    except jwt.InvalidTokenError as e:
        logger.info("Rejected invalid access token: %s", e)
    return None
