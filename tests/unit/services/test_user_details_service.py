"""Tests for principal loading used by the authentication gate."""

import pytest

from event_booking.core.exceptions import UserNotFoundException
from event_booking.core.security import get_password_hash
from event_booking.db.repositories.role import RoleRepository
from event_booking.db.repositories.user import UserRepository
from event_booking.models.enums import UserRoleName
from event_booking.models.user import User
from event_booking.models.user_role import UserRole
from event_booking.services.user_details_service import UserDetailsService


@pytest.fixture
def make_user(session):
    users = UserRepository(session)
    roles = RoleRepository(session)

    def _make(email="user@example.com", role_names=(UserRoleName.USER,), **flags):
        user = users.add(User(email=email, hashed_password=get_password_hash("password123"), **flags))
        for name in role_names:
            users.add_role(user, UserRole(role=roles.get_by_name(name)))
        session.commit()
        return user

    return _make


class TestLoadUserByUsername:
    def test_unknown_email(self, session):
        with pytest.raises(UserNotFoundException):
            UserDetailsService(session).load_user_by_username("nobody@example.com")

    def test_principal_fields(self, session, make_user):
        user = make_user()
        principal = UserDetailsService(session).load_user_by_username("user@example.com")

        assert principal.id == user.id
        assert principal.email == principal.username == "user@example.com"
        assert principal.password == user.hashed_password
        assert principal.account_non_expired is True
        assert principal.credentials_non_expired is True

    def test_authorities_follow_assignment_order(self, session, make_user):
        make_user(role_names=(UserRoleName.USER, UserRoleName.CREATOR))
        principal = UserDetailsService(session).load_user_by_username("user@example.com")

        assert principal.authorities == ["ROLE_USER", "ROLE_CREATOR"]

    def test_no_roles_no_authorities(self, session, make_user):
        make_user(role_names=())
        assert UserDetailsService(session).load_user_by_username("user@example.com").authorities == []

    @pytest.mark.parametrize(
        "is_active, is_suspended, non_locked, enabled",
        [
            (True, False, True, True),
            (True, True, False, False),
            (False, False, True, False),
            (False, True, False, False),
        ],
    )
    def test_account_state_predicates(self, session, make_user, is_active, is_suspended, non_locked, enabled):
        make_user(is_active=is_active, is_suspended=is_suspended)
        principal = UserDetailsService(session).load_user_by_username("user@example.com")

        assert principal.account_non_locked is non_locked
        assert principal.enabled is enabled
