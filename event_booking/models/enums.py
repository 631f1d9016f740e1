"""Enumerations shared by database models and API schemas."""

from enum import Enum


class UserRoleName(str, Enum):
    """Named permission groups a user can be assigned to."""
    USER = "USER"
    ADMIN = "ADMIN"
    CREATOR = "CREATOR"


class CreatorVerificationStatus(str, Enum):
    """State of a user's request to become an event creator."""
    NOT_REQUESTED = "NOT_REQUESTED"
    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
