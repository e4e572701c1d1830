"""Pytest configuration and fixtures."""

from collections.abc import Callable, Generator
from typing import Any
from uuid import uuid4

import jwt
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from location_service.application.common.request_context import RequestContext
from location_service.config import Settings
from location_service.database import Base, Database
from location_service.domain.common.value_objects.ids import UserId
from location_service.domain.identity.entities.user import User
from location_service.main import create_app
from tests.fakes import InMemoryLocationRepository

# At least 64 bytes so every HS* algorithm accepts it without key length warnings
TEST_SECRET_KEY = "test-secret-key-for-location-service-0123456789abcdef0123456789abcdef"


@pytest.fixture
def settings() -> Settings:
    """Settings for an isolated in-memory SQLite database."""
    return Settings(
        DATABASE_URL="sqlite://",
        ENVIRONMENT="test",
        JWT_ALGORITHM="HS256",
        JWT_SECRET_KEY=TEST_SECRET_KEY,
    )


@pytest.fixture
def database(settings: Settings) -> Generator[Database, None, None]:
    """Create the schema on a fresh database."""
    database = Database(settings)
    Base.metadata.create_all(bind=database.engine)
    try:
        yield database
    finally:
        Base.metadata.drop_all(bind=database.engine)
        database.dispose()


@pytest.fixture
def db_session(database: Database) -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    session = database.session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def user() -> User:
    return User(id=UserId.generate(), email="alice@example.com")


@pytest.fixture
def other_user() -> User:
    return User(id=UserId.generate(), email="bob@example.com")


@pytest.fixture
def ctx(user: User) -> RequestContext:
    return RequestContext.background().with_user(user).with_timeout(5.0)


@pytest.fixture
def other_ctx(other_user: User) -> RequestContext:
    return RequestContext.background().with_user(other_user).with_timeout(5.0)


@pytest.fixture
def fake_repository() -> InMemoryLocationRepository:
    return InMemoryLocationRepository()


def make_token(
    sub: str | None = None,
    email: Any = "alice@example.com",
    secret_key: str = TEST_SECRET_KEY,
    algorithm: str = "HS256",
    **claims: Any,
) -> str:
    """Sign a bearer token the way the identity provider does."""
    payload: dict[str, Any] = {"email": email, **claims}
    if sub is not None:
        payload["sub"] = sub
    return jwt.encode(payload, secret_key, algorithm=algorithm)


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create the application with its schema in place."""
    app = create_app(settings)
    Base.metadata.create_all(bind=app.state.database.engine)
    return app


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, Any, None]:
    """Create a test client; requests are unauthenticated unless headers are passed."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers() -> Callable[[str | None], dict[str, str]]:
    """Build Authorization headers for a user id, a fresh one when omitted."""

    def build(user_id: str | None = None) -> dict[str, str]:
        token = make_token(sub=user_id or str(uuid4()))
        return {"Authorization": f"Bearer {token}"}

    return build
