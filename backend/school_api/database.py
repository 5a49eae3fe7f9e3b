"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from
`settings.DATABASE_URL` and provides the session dependency used by the
routers. SQLite URLs get `check_same_thread=False` because FastAPI runs
sync handlers in a thread pool; in-memory SQLite additionally shares a
single connection so every session sees the same tables.
"""

from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine, Session

from .config import settings

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def build_engine(url: str, echo: bool = False):
    """Create an engine for `url` with the SQLite tweaks applied."""
    if not url.startswith("sqlite"):
        return create_engine(url, echo=echo)
    if url in _IN_MEMORY_URLS:
        return create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, echo=echo, connect_args={"check_same_thread": False})


engine = build_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO)


def create_db_and_tables():
    """Create the tables registered on the SQLModel metadata.

    Intended for local development and tests; the schema of a shared
    deployment is owned by its migration tooling.
    """
    from . import models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The session is closed when the request scope finishes.
    """
    with Session(engine) as session:
        yield session
