"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("ENVIRONMENT", "test")

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from lioarcade import models  # noqa: E402
from lioarcade.database import Base, get_db  # noqa: E402
from lioarcade.infrastructure.identity.token_service import create_access_token  # noqa: E402
from lioarcade.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so the request thread sees the fixtures' rows
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _create_user(db_session: Session, username: str) -> models.User:
    user = models.User(email=f"{username}@example.com", username=username)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def _provision(db_session: Session, user: models.User, points: int = 0, level: int = 1) -> None:
    db_session.add(models.Gamification(user_id=user.id, points=points, level=level, badges=[]))
    db_session.commit()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create a user with an empty gamification aggregate."""
    user = _create_user(db_session, "learner")
    _provision(db_session, user)
    return user


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    """Bearer header for test_user."""
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def make_user(db_session: Session) -> Any:
    """Factory for additional users, provisioned with the given standing."""

    def factory(username: str, points: int = 0, level: int = 1) -> models.User:
        user = _create_user(db_session, username)
        _provision(db_session, user, points=points, level=level)
        return user

    return factory


def _create_content(db_session: Session, content_type: str, title: str) -> models.Content:
    content = models.Content(type=content_type, title=title, category="general")
    db_session.add(content)
    db_session.commit()
    db_session.refresh(content)
    return content


@pytest.fixture
def quiz(db_session: Session) -> models.Content:
    return _create_content(db_session, "QUIZ", "Capital Cities")


@pytest.fixture
def flashcard_deck(db_session: Session) -> models.Content:
    return _create_content(db_session, "FLASHCARD", "Spanish Verbs")


@pytest.fixture
def mini_game(db_session: Session) -> models.Content:
    return _create_content(db_session, "MINI_GAME", "Word Scramble")


@pytest.fixture
def make_content(db_session: Session) -> Any:
    """Factory for content rows of any stored type."""

    def factory(content_type: str, title: str = "Untitled") -> models.Content:
        return _create_content(db_session, content_type, title)

    return factory
