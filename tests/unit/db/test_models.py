"""Tests for model timestamp columns."""

from datetime import timezone

import pytest

from event_booking.models.role import Role
from event_booking.models.user import User
from event_booking.models.user_role import UserRole


@pytest.mark.parametrize("model, column", [
    (User, "created_at"),
    (User, "updated_at"),
    (User, "otp_expiry_time"),
    (Role, "created_at"),
    (UserRole, "created_at"),
])
def test_timestamp_columns_are_timezone_aware(model, column):
    assert model.__table__.c[column].type.timezone is True


def test_new_user_timestamps_carry_utc():
    user = User(email="tz@example.com", hashed_password="x")
    assert user.created_at.tzinfo is timezone.utc
    assert user.updated_at.tzinfo is timezone.utc
