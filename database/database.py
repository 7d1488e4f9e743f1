"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories, `init_db` which creates tables, and
`seed_recipes` which fills an empty recipes table with sample data.
"""

from datetime import datetime
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from core.config import WRITE_DATABASE_URL, READ_DATABASE_URL, SEED_ON_STARTUP
from core.logger import get_logger
from .models import Base, Recipe
from data.recipes_dataset import RECIPES_DATA

logger = get_logger("database")


def _connect_args(url: str) -> dict:
    # SQLite connections are shared with the threadpool FastAPI runs sync routes on
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Engines
write_engine = create_engine(WRITE_DATABASE_URL, connect_args=_connect_args(WRITE_DATABASE_URL))
read_engine = create_engine(READ_DATABASE_URL, connect_args=_connect_args(READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def seed_recipes(session: Session) -> int:
    """Insert the sample recipes if the recipes table is empty.

    Running it against a non-empty table is a no-op.

    Returns:
        Number of recipes inserted.
    """
    if session.query(Recipe).count() > 0:
        return 0
    now = datetime.now()
    for item in RECIPES_DATA:
        session.add(Recipe(created_at=now, updated_at=now, **item))
    session.commit()
    logger.info("Seeded %s sample recipes", len(RECIPES_DATA))
    return len(RECIPES_DATA)


def init_db(engine=None, seed: bool = SEED_ON_STARTUP):
    """Initialize database schema and seed recipes.

    Args:
        engine: Engine to initialize, the write engine by default.
        seed: Whether to seed sample recipes into an empty table.
    """
    engine = engine or write_engine
    Base.metadata.create_all(bind=engine)
    if not seed:
        return
    session = sessionmaker(bind=engine)()
    try:
        seed_recipes(session)
    finally:
        session.close()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency to ensure the session is
    properly closed after the request completes.
    """
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
