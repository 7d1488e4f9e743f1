"""Dependency helpers that expose read/write DB session generators.

Endpoints depend on `get_db_write` or `get_db_read`; tests override these
two names to point the app at a different database.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable DB session for FastAPI dependency injection."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only DB session for FastAPI dependency injection."""
    yield from get_read_session()
