"""Database package: ORM models and session helpers."""

from .database import (
    write_engine,
    read_engine,
    WriteSessionLocal,
    ReadSessionLocal,
    init_db,
    seed_recipes,
    get_write_session,
    get_read_session,
)
from . import models

__all__ = [
    "write_engine",
    "read_engine",
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "seed_recipes",
    "get_write_session",
    "get_read_session",
    "models",
]
