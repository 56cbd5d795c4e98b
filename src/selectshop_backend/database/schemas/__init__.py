"""SQLAlchemy schemas persisted by the backend."""

from selectshop_backend.database.schemas.folder import FolderSchema
from selectshop_backend.database.schemas.user import UserSchema

__all__ = ["FolderSchema", "UserSchema"]
