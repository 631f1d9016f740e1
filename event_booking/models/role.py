"""
Role database model.

Immutable reference data, seeded by init_db and the initial migration.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel

from event_booking.models.base import utc_now
from event_booking.models.enums import UserRoleName


class Role(SQLModel, table=True):
    __tablename__ = "roles"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: UserRoleName = Field(unique=True, nullable=False)
    description: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))
