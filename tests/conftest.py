"""
Todo Lists Service Tests - Test Configuration.

Provides pytest fixtures for both storage backends and the web application.
"""

import os

# Set test environment variables BEFORE importing app modules
os.environ["STORAGE_BACKEND"] = "session"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["SESSION_SECRET_KEY"] = "test-secret-key-for-testing-only"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from typing import Any, Dict, Generator  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from todo_app.app import app  # noqa: E402
from todo_app.dependencies import get_storage  # noqa: E402
from todo_app.models import Base  # noqa: E402
from todo_app.storage import DatabaseStorage, SessionStorage, TodoStorage  # noqa: E402

# In-memory SQLite database shared by every connection of the test engine
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session on empty tables for each test."""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def session_data() -> Dict[str, Any]:
    """Plain dict standing in for a request session."""
    return {}


@pytest.fixture(params=["session", "database"])
def storage(request: pytest.FixtureRequest) -> TodoStorage:
    """Each storage backend in turn, starting empty."""
    if request.param == "session":
        return SessionStorage({})
    return DatabaseStorage(request.getfixturevalue("db_session"))


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Test client using the session backend; cookies persist across requests."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_client(db_session: Session) -> Generator[TestClient, None, None]:
    """Test client whose storage is the in-memory database."""

    def override_get_storage():
        yield DatabaseStorage(db_session)

    app.dependency_overrides[get_storage] = override_get_storage
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
