"""Pytest fixtures for VoteHub tests.

Uses a file-backed SQLite database and FastAPI TestClient. Overrides the
`get_db` dependency so tests are isolated from any real DB file.
"""

import os

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

import votehub.database as database
from votehub.database import make_engine
from votehub.main import app
from votehub.models import Base


TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test_votehub.db")

# Same engine configuration as the app (transactional DDL on SQLite)
engine = make_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False)


@pytest.fixture(autouse=True)
def setup_database():
    """Create tables before each test and drop them after to ensure isolation."""
    Base.metadata.create_all(bind=engine)
    try:
        yield
    finally:
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def db_session():
    """Provide a SQLAlchemy session for direct DB access in tests."""
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


def _override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


app.dependency_overrides[database.get_db] = _override_get_db

# Many requests hit the same client address; keep the global limiter out of the way
app.state.limiter.enabled = False


@pytest.fixture()
def client():
    """FastAPI test client using the app with overridden dependencies."""
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def test_engine():
    """The engine behind `db_session` and the overridden `get_db`."""
    return engine
