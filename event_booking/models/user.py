"""
User database model.

Defines the User table for authentication and user management.
"""

from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sqlalchemy import DateTime
from sqlmodel import Field, Relationship, SQLModel

from event_booking.models.base import utc_now
from event_booking.models.enums import CreatorVerificationStatus

if TYPE_CHECKING:
    from event_booking.models.user_role import UserRole


class User(SQLModel, table=True):
    """
    User model for authentication.

    Stores credentials, profile information, account-state flags and
    role assignments. Accounts are soft-disabled via is_active/is_suspended,
    never deleted.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    phone: Optional[str] = Field(default=None, max_length=20)

    # Account state
    is_email_verified: bool = Field(default=False, nullable=False)
    is_active: bool = Field(default=True, nullable=False, index=True)
    is_suspended: bool = Field(default=False, nullable=False)

    # Creator verification
    creator_verification_status: CreatorVerificationStatus = Field(
        default=CreatorVerificationStatus.NOT_REQUESTED, nullable=False)
    creator_verification_otp: Optional[str] = Field(default=None, max_length=6)
    otp_expiry_time: Optional[datetime] = Field(default=None, sa_type=DateTime(timezone=True))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
    updated_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    user_roles: List["UserRole"] = Relationship(
        back_populates="user",
        sa_relationship_kwargs={"cascade": "all, delete-orphan", "order_by": "UserRole.id"})
