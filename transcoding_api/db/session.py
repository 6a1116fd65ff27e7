"""Database engine utilities for the job record store."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url


def db_create_engine(database_url: str) -> Engine:
    """Create the SQLAlchemy engine shared by all request handlers.

    The engine pool is thread-safe; SQLite URLs are opened with
    `check_same_thread` disabled so the worker thread pool can share them.

    Args:
        database_url: SQLAlchemy database URL.

    Returns:
        Engine: Configured SQLAlchemy engine.

    Raises:
        ValueError: Raised when the database URL is blank.
    """

    normalized_url = database_url.strip()
    if not normalized_url:
        raise ValueError("database_url must not be blank")

    if make_url(normalized_url).get_backend_name() == "sqlite":
        return create_engine(normalized_url, connect_args={"check_same_thread": False})
    return create_engine(normalized_url, pool_pre_ping=True)
