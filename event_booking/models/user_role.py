"""
UserRole database model.

Join table assigning a Role to a User; unique per (user, role).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, UniqueConstraint
from sqlmodel import Field, Relationship, SQLModel

from event_booking.models.base import utc_now
from event_booking.models.role import Role
from event_booking.models.user import User


class UserRole(SQLModel, table=True):
    __tablename__ = "user_roles"
    __table_args__ = (UniqueConstraint("user_id", "role_id", name="uq_user_roles_user_id_role_id"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True, nullable=False)
    role_id: int = Field(foreign_key="roles.id", nullable=False)

    created_at: datetime = Field(default_factory=utc_now, sa_type=DateTime(timezone=True))

    user: Optional[User] = Relationship(back_populates="user_roles")
    role: Optional[Role] = Relationship(sa_relationship_kwargs={"lazy": "joined"})
