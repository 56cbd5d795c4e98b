"""Repositories wrapping SQLAlchemy sessions."""

from selectshop_backend.database.repositories.folder import FolderRepository
from selectshop_backend.database.repositories.user import UserRepository

__all__ = ["FolderRepository", "UserRepository"]
