"""
Database initialization.

Creates all tables and seeds role reference data.
"""

import logging
from typing import Dict, Optional

from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel

from event_booking.db.repositories.role import RoleRepository
from event_booking.models.enums import UserRoleName
from event_booking.models.role import Role

logger = logging.getLogger(__name__)

DEFAULT_ROLES: Dict[UserRoleName, str] = {
    UserRoleName.USER: "Regular user who can browse events and buy tickets",
    UserRoleName.CREATOR: "Verified user who can create and manage events",
    UserRoleName.ADMIN: "Platform administrator",
}


def seed_roles(session: Session) -> int:
    """
    Insert any missing role reference rows.

    Idempotent: roles that already exist are left untouched.

    Returns:
        Number of roles created
    """
    repository = RoleRepository(session)
    created = 0
    for name, description in DEFAULT_ROLES.items():
        if repository.exists_by_name(name):
            continue
        repository.create(Role(name=name, description=description))
        logger.info("Seeded role %s", name.value)
        created += 1
    return created


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    - Creates all SQLModel tables (development; production uses Alembic)
    - Seeds the role reference data registration depends on
    """
    if engine is None:
        from event_booking.db.session import engine

    # Import all models so SQLModel.metadata has them
    import event_booking.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)

    with Session(engine) as session:
        created = seed_roles(session)

    logger.info("Database initialization complete (%d roles seeded)", created)


if __name__ == "__main__":
    init_db()
