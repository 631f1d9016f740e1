"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from event_booking.models.role import Role  # noqa: F401
from event_booking.models.user import User  # noqa: F401
from event_booking.models.user_role import UserRole  # noqa: F401
