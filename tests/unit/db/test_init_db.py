"""Tests for role reference data seeding."""

from sqlmodel import select

from event_booking.db.init_db import DEFAULT_ROLES, seed_roles
from event_booking.models.enums import UserRoleName
from event_booking.models.role import Role


def test_seed_creates_all_roles(unseeded_session):
    assert seed_roles(unseeded_session) == len(DEFAULT_ROLES)

    names = {role.name for role in unseeded_session.exec(select(Role)).all()}
    assert names == {UserRoleName.USER, UserRoleName.ADMIN, UserRoleName.CREATOR}


def test_seed_is_idempotent(unseeded_session):
    seed_roles(unseeded_session)
    assert seed_roles(unseeded_session) == 0
    assert len(unseeded_session.exec(select(Role)).all()) == len(DEFAULT_ROLES)
