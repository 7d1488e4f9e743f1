"""Shared fixtures: an in-memory database per test and a wired TestClient."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import init_db
from database.deps import get_db_read, get_db_write
from main import app


@pytest.fixture
def engine():
    """Fresh in-memory SQLite engine with the schema created, no seed data."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(engine, seed=False)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """TestClient whose endpoints use the in-memory database.

    The lifespan is not entered, so nothing touches the configured database.
    """

    def override_session():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db_write] = override_session
    app.dependency_overrides[get_db_read] = override_session
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
