"""Database session management."""

from collections.abc import Generator
from contextlib import contextmanager
from typing import Any

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tube_companion.config import settings


def engine_options(database_url: str) -> dict[str, Any]:
    """Connection options suited to the database behind ``database_url``."""
    if database_url.startswith("sqlite"):
        options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        # In-memory databases vanish with their connection, so share one
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            options["poolclass"] = StaticPool
        return options
    return {"pool_pre_ping": True, "pool_size": 5, "max_overflow": 10}


def build_engine(database_url: str) -> Engine:
    """Create an engine for ``database_url``."""
    return create_engine(database_url, **engine_options(database_url))


# Create engine
engine = build_engine(settings.database_url)

# Create session factory
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


def get_session() -> Generator[Session, None, None]:
    """Get a database session (for FastAPI dependency injection)."""
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@contextmanager
def get_session_context(
    factory: sessionmaker[Session] | None = None,
) -> Generator[Session, None, None]:
    """Get a database session as a context manager (for use outside of FastAPI)."""
    session = (factory or SessionLocal)()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def init_db(bind: Engine | None = None) -> None:
    """Create missing tables and verify connectivity."""
    from tube_companion.db.models import Base

    target = bind or engine
    Base.metadata.create_all(target)
    with target.connect() as conn:
        conn.execute(text("SELECT 1"))
