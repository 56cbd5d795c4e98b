"""Database schema specific tests."""

from typing import TYPE_CHECKING, cast

from sqlalchemy import UniqueConstraint

if TYPE_CHECKING:
    from sqlalchemy import Table

from selectshop_backend.database.schemas import FolderSchema, UserSchema
from selectshop_backend.shared import UserRole


def test_user_schema_role_uses_enum_values() -> None:
    table = cast("Table", UserSchema.__table__)
    role_column = table.c.role
    assert role_column.type.enums == [role.value for role in UserRole]


def test_folder_names_unique_per_user() -> None:
    table = cast("Table", FolderSchema.__table__)
    constraints = [
        constraint
        for constraint in table.constraints
        if isinstance(constraint, UniqueConstraint)
    ]
    assert [sorted(c.columns.keys()) for c in constraints] == [["name", "user_id"]]


def test_folder_owner_foreign_key_cascades() -> None:
    table = cast("Table", FolderSchema.__table__)
    (foreign_key,) = table.c.user_id.foreign_keys
    assert foreign_key.target_fullname == "users.id"
    assert foreign_key.ondelete == "CASCADE"
