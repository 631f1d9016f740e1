"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Any, Dict, Generator

from sqlmodel import Session, create_engine

from event_booking.core.config import settings

engine_kwargs: Dict[str, Any] = {
    "echo": settings.DEBUG,  # Log SQL queries in debug mode
    "pool_pre_ping": True,   # Verify connections before using
}
if settings.DATABASE_URL.startswith("sqlite"):
    engine_kwargs["connect_args"] = {"check_same_thread": False}
else:
    engine_kwargs.update(pool_size=5,      # Connection pool size
                         max_overflow=10)  # Max connections beyond pool_size

# Create database engine
engine = create_engine(settings.DATABASE_URL, **engine_kwargs)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    One session (and at most one open transaction) per request.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
