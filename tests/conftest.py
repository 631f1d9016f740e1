"""Shared fixtures: in-memory SQLite database, seeded roles and an API client.

Environment is set before any event_booking import so Settings and the
module-level engine pick up the test values.
"""

import os

os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import event_booking.db.base  # noqa: F401
from event_booking.db.init_db import seed_roles
from event_booking.db.session import get_db
from event_booking.main import app


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def seeded_engine(engine):
    with Session(engine) as session:
        seed_roles(session)
    return engine


@pytest.fixture
def session(seeded_engine):
    with Session(seeded_engine) as session:
        yield session


@pytest.fixture
def unseeded_session(engine):
    with Session(engine) as session:
        yield session


def _client_for(engine):
    def override_get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def client(seeded_engine):
    with _client_for(seeded_engine) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def unseeded_client(engine):
    with _client_for(engine) as test_client:
        yield test_client
    app.dependency_overrides.clear()
