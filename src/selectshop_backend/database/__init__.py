"""Database connectivity helpers and configuration objects."""

from selectshop_backend.database.base import BaseSchema
from selectshop_backend.database.dependencies import (
    SessionDep,
    get_database,
    get_session,
)
from selectshop_backend.database.repositories import FolderRepository, UserRepository
from selectshop_backend.database.schemas import FolderSchema, UserSchema
from selectshop_backend.database.service import DatabaseService
from selectshop_backend.settings import BackendSettings, get_settings

__all__ = [
    "BaseSchema",
    "BackendSettings",
    "DatabaseService",
    "FolderRepository",
    "FolderSchema",
    "SessionDep",
    "UserRepository",
    "UserSchema",
    "get_database",
    "get_session",
    "get_settings",
]
