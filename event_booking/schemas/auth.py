"""
Authentication API schemas.

Pydantic models for registration/login requests and the token response.
"""

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from event_booking.schemas.common import CamelModel

# bcrypt only hashes the first 72 bytes and rejects longer input
MAX_PASSWORD_BYTES = 72


class RegisterRequest(CamelModel):
    """Schema for user registration."""
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters, max 72 bytes)")
    first_name: Optional[str] = Field(None, max_length=100)
    last_name: Optional[str] = Field(None, max_length=100)
    phone: Optional[str] = Field(None, max_length=20)

    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class LoginRequest(CamelModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
    """Issued bearer token plus the identity it was issued for."""
    token: str
    token_type: str = "bearer"
    email: EmailStr
    user_id: int
