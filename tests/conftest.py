"""Test configuration and fixtures for the users test suite."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

import pytest
from fastapi import FastAPI

from vitedemo.api import create_api
from vitedemo.database import DatabaseService, UserSchema, get_session
from vitedemo.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator, Iterator


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("DATABASE_URL", "sqlite+pysqlite:///:memory:")
    monkeypatch.setenv("USERS_API_BASE_URL", "http://testserver")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FakeUserRepository:
    """In-memory repository used to mock database operations."""

    def __init__(
        self, session: Any
    ) -> None:  # pragma: no cover - session unused in fake repo
        self._session = session

    _store: dict[int, UserSchema] = {}  # noqa: RUF012
    _next_id = 1

    @classmethod
    def reset(cls) -> None:
        cls._store = {}
        cls._next_id = 1

    def list_all(self) -> list[UserSchema]:
        store = type(self)._store
        return [store[user_id] for user_id in sorted(store)]

    def get_by_id(self, user_id: int) -> UserSchema | None:
        return type(self)._store.get(user_id)

    def get_by_email(self, email: str) -> UserSchema | None:
        return next(
            (user for user in type(self)._store.values() if user.email == email),
            None,
        )

    def add(self, user: UserSchema) -> UserSchema:
        cls = type(self)
        timestamp = datetime.now(UTC)
        user.id = cls._next_id
        user.created_at = timestamp
        user.updated_at = timestamp
        cls._store[user.id] = user
        cls._next_id += 1
        return user

    def save(self, user: UserSchema) -> UserSchema:
        user.updated_at = datetime.now(UTC)
        return user

    def delete(self, user: UserSchema) -> None:
        type(self)._store.pop(user.id, None)


@pytest.fixture
def fake_repository(monkeypatch: pytest.MonkeyPatch) -> Iterator[type[FakeUserRepository]]:
    """Route the user service to :class:`FakeUserRepository`."""
    FakeUserRepository.reset()
    monkeypatch.setattr(
        "vitedemo.api.services.user.UserRepository", FakeUserRepository
    )
    yield FakeUserRepository
    FakeUserRepository.reset()


@pytest.fixture
def app(fake_repository: type[FakeUserRepository]) -> Iterator[FastAPI]:
    """Return the users API with database sessions stubbed out."""
    application = create_api()

    def override_session() -> Generator[None, None, None]:
        yield None

    application.dependency_overrides[get_session] = override_session
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def database() -> DatabaseService:
    """Return an in-memory SQLite database with the schema created."""
    db = DatabaseService("sqlite+pysqlite:///:memory:")
    db.create_schema()
    return db
