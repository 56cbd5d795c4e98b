from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import uuid4

import pytest

from selectshop_backend.api.services import FolderService, InvalidArgumentError
from selectshop_backend.database import UserSchema
from selectshop_backend.shared import UserRole

if TYPE_CHECKING:
    from conftest import FakeFolderRepository


def _user(username: str = "shopper1") -> UserSchema:
    return UserSchema(
        id=uuid4(),
        username=username,
        email=f"{username}@example.com",
        password_hash="salt:hash",
        role=UserRole.USER,
    )


@pytest.fixture
def service() -> FolderService:
    return FolderService()


def test_add_folders_strips_names_and_assigns_owner(service: FolderService) -> None:
    user = _user()

    folders = service.add_folders(
        session=None, folder_names=["  Books ", "Games"], user=user
    )

    assert [folder.name for folder in folders] == ["Books", "Games"]
    assert {folder.user_id for folder in folders} == {user.id}


def test_add_folders_with_no_names_returns_empty(
    service: FolderService, folder_repository: type[FakeFolderRepository]
) -> None:
    assert service.add_folders(session=None, folder_names=[], user=_user()) == []
    assert folder_repository.all() == []


def test_whitespace_variant_of_existing_name_is_duplicate(
    service: FolderService,
) -> None:
    user = _user()
    service.add_folders(session=None, folder_names=["Books"], user=user)

    with pytest.raises(InvalidArgumentError, match="already exists: Books"):
        service.add_folders(session=None, folder_names=[" Books"], user=user)


def test_rejected_request_adds_nothing(service: FolderService) -> None:
    user = _user()
    service.add_folders(session=None, folder_names=["Books"], user=user)

    with pytest.raises(InvalidArgumentError):
        service.add_folders(session=None, folder_names=["Games", "Books"], user=user)

    assert [folder.name for folder in service.get_folders(session=None, user=user)] == [
        "Books"
    ]


def test_name_longer_than_limit_is_rejected() -> None:
    service = FolderService(name_max_length=5)

    with pytest.raises(InvalidArgumentError, match="at most 5 characters"):
        service.add_folders(session=None, folder_names=["Kitchen"], user=_user())


def test_same_name_allowed_for_different_users(service: FolderService) -> None:
    first, second = _user("alice1"), _user("bobby1")

    service.add_folders(session=None, folder_names=["Books"], user=first)
    service.add_folders(session=None, folder_names=["Books"], user=second)

    assert len(service.get_folders(session=None, user=first)) == 1
    assert len(service.get_folders(session=None, user=second)) == 1


def test_get_folders_orders_by_creation(service: FolderService) -> None:
    user = _user()
    service.add_folders(session=None, folder_names=["Zoo"], user=user)
    service.add_folders(session=None, folder_names=["Art", "Music"], user=user)

    folders = service.get_folders(session=None, user=user)

    assert [folder.name for folder in folders] == ["Zoo", "Art", "Music"]
    assert [folder.id for folder in folders] == sorted(folder.id for folder in folders)
