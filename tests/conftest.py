# tests/conftest.py

from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from taskboard.database import Base, get_db

from .factories import make_user


@pytest.fixture()
def session_factory():
    """Fresh in-memory SQLite database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client(session_factory):
    """
    TestClient whose requests run against the per-test database.

    Not used as a context manager, so the startup hook never touches the
    configured DATABASE_URL.
    """
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def users(db):
    """Admin plus two engineers and one marketer."""
    return SimpleNamespace(
        admin=make_user(db, "Admin User", "admin@taskboard.io", role="admin", department="Management"),
        alice=make_user(db, "Alice", "alice@taskboard.io", department="Engineering"),
        bob=make_user(db, "Bob", "bob@taskboard.io", department="Engineering"),
        mia=make_user(db, "Mia", "mia@taskboard.io", department="Marketing"),
    )
