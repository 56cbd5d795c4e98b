"""Test configuration and fixtures for the backend test suite."""

from __future__ import annotations

from datetime import UTC, datetime
from itertools import count
from typing import TYPE_CHECKING, Any, ClassVar

import pytest
from fastapi.testclient import TestClient

from selectshop_backend.api import create_api
from selectshop_backend.api.dependencies import get_auth_service
from selectshop_backend.database import FolderSchema, UserSchema, get_session
from selectshop_backend.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Generator, Iterable, Iterator, Sequence
    from uuid import UUID


class FakeUserRepository:
    """In-memory repository used to mock user persistence."""

    _store: ClassVar[dict[UUID, UserSchema]] = {}

    def __init__(self, session: Any) -> None:
        self._session = session

    @classmethod
    def reset(cls) -> None:
        cls._store = {}

    def get_by_id(self, user_id: UUID) -> UserSchema | None:
        return type(self)._store.get(user_id)

    def get_by_username(self, username: str) -> UserSchema | None:
        return next(
            (user for user in type(self)._store.values() if user.username == username),
            None,
        )

    def get_by_email(self, email: str) -> UserSchema | None:
        return next(
            (user for user in type(self)._store.values() if user.email == email),
            None,
        )

    def add(self, user: UserSchema) -> UserSchema:
        if getattr(user, "created_at", None) is None:
            timestamp = datetime.now(UTC)
            user.created_at = timestamp
            user.updated_at = timestamp
        type(self)._store[user.id] = user
        return user


class FakeFolderRepository:
    """In-memory repository used to mock folder persistence."""

    _store: ClassVar[list[FolderSchema]] = []
    _ids: ClassVar[Iterator[int]] = count(1)

    def __init__(self, session: Any) -> None:
        self._session = session

    @classmethod
    def reset(cls) -> None:
        cls._store = []
        cls._ids = count(1)

    @classmethod
    def all(cls) -> list[FolderSchema]:
        return list(cls._store)

    def list_by_user(self, user_id: UUID) -> list[FolderSchema]:
        folders = [folder for folder in type(self)._store if folder.user_id == user_id]
        return sorted(folders, key=lambda folder: folder.id)

    def list_by_user_and_names(
        self, user_id: UUID, names: Iterable[str]
    ) -> list[FolderSchema]:
        wanted = set(names)
        return [
            folder
            for folder in type(self)._store
            if folder.user_id == user_id and folder.name in wanted
        ]

    def add_all(self, folders: Sequence[FolderSchema]) -> list[FolderSchema]:
        for folder in folders:
            folder.id = next(type(self)._ids)
            folder.created_at = datetime.now(UTC)
            type(self)._store.append(folder)
        return list(folders)


@pytest.fixture(autouse=True)
def _mock_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Ensure settings are loaded with predictable values during tests."""
    monkeypatch.setenv("AUTH_SECRET_KEY", "test-secret-key-for-selectshop-backend")
    get_settings.cache_clear()
    get_auth_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_auth_service.cache_clear()


@pytest.fixture(autouse=True)
def fake_repositories(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setattr(
        "selectshop_backend.api.services.auth.UserRepository", FakeUserRepository
    )
    monkeypatch.setattr(
        "selectshop_backend.api.dependencies.UserRepository", FakeUserRepository
    )
    monkeypatch.setattr(
        "selectshop_backend.api.services.folders.FolderRepository",
        FakeFolderRepository,
    )
    FakeUserRepository.reset()
    FakeFolderRepository.reset()
    yield
    FakeUserRepository.reset()
    FakeFolderRepository.reset()


@pytest.fixture
def client() -> Iterator[TestClient]:
    app = create_api()

    def override_session() -> Generator[None, None, None]:
        yield None

    app.dependency_overrides[get_session] = override_session
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def folder_repository() -> type[FakeFolderRepository]:
    """Expose the in-memory folder store to assertions."""
    return FakeFolderRepository


@pytest.fixture
def user_repository() -> type[FakeUserRepository]:
    """Expose the in-memory user store to assertions."""
    return FakeUserRepository
