"""
Role repository.

Read access to role reference data, plus the idempotent seeding helper.
"""

from typing import Optional

from sqlmodel import Session, select

from event_booking.models.enums import UserRoleName
from event_booking.models.role import Role


class RoleRepository:
    """Repository for Role database operations."""

    def __init__(self, session: Session):
        self.session = session

    def get_by_name(self, name: UserRoleName) -> Optional[Role]:
        """
        Get a role by its well-known name.

        Args:
            name: Role name

        Returns:
            Role instance if seeded, None otherwise
        """
        statement = select(Role).where(Role.name == name)
        return self.session.exec(statement).first()

    def exists_by_name(self, name: UserRoleName) -> bool:
        return self.get_by_name(name) is not None

    def create(self, role: Role) -> Role:
        self.session.add(role)
        self.session.commit()
        self.session.refresh(role)
        return role
