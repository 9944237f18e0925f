"""Database configuration and session management."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.config import Settings

IN_MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")


class Base(DeclarativeBase):
    """Base class for all database models."""


# Module-level singletons (application-scoped)
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def initialize_database(settings: Settings) -> None:
    """Initialize database engine and session factory once at startup."""
    global _engine, _session_factory  # noqa: PLW0603

    if settings.DATABASE_URL in IN_MEMORY_SQLITE_URLS:
        # A single shared connection keeps the in-memory database alive
        _engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif settings.DATABASE_URL.startswith("sqlite"):
        _engine = create_engine(
            settings.DATABASE_URL,
            connect_args={"check_same_thread": False},
        )
    else:
        _engine = create_engine(
            settings.DATABASE_URL,
            pool_size=20,
            max_overflow=30,
            pool_pre_ping=True,  # Verify connections before use
            pool_recycle=3600,  # Recycle connections after 1 hour
        )

    _session_factory = sessionmaker(autocommit=False, autoflush=False, bind=_engine)


def get_engine() -> Engine:
    """Get the singleton database engine."""
    if _engine is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get the singleton session factory."""
    if _session_factory is None:
        raise RuntimeError("Database not initialized. Call initialize_database() first.")
    return _session_factory


def dispose_engine() -> None:
    """Dispose database engine on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
        _engine = None
        _session_factory = None
