"""
Database Session Management - SQLAlchemy session factory.

Provides the engine and sessions backing the durable state store.
"""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from review_kit.config import settings
from review_kit.db.models import Base

# Global engine instance
_engine: Engine | None = None

# Session factory
_session_factory: sessionmaker[Session] | None = None


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        _engine = create_engine(
            settings.database_url,
            echo=settings.database_echo,
        )
    return _engine


def get_session_factory() -> sessionmaker[Session]:
    """Get or create the session factory."""
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            get_engine(),
            class_=Session,
            expire_on_commit=False,
        )
    return _session_factory


def init_db(engine: Engine | None = None) -> None:
    """Create the review state tables if they do not exist."""
    Base.metadata.create_all(engine or get_engine())


@contextmanager
def get_session() -> Iterator[Session]:
    """
    Get a database session.

    Usage:
        with get_session() as session:
            session.execute(...)
            session.commit()
    """
    factory = get_session_factory()
    with factory() as session:
        yield session


def close_engine() -> None:
    """Dispose of the database engine."""
    global _engine, _session_factory

    if _engine:
        _engine.dispose()
        _engine = None
        _session_factory = None
