"""Service layer for API-specific business logic."""

from selectshop_backend.api.services.auth import (
    AuthService,
    InvalidCredentialsError,
    TokenPayload,
    UserAlreadyExistsError,
)
from selectshop_backend.api.services.folders import (
    FolderService,
    InvalidArgumentError,
)

__all__ = [
    "AuthService",
    "FolderService",
    "InvalidArgumentError",
    "InvalidCredentialsError",
    "TokenPayload",
    "UserAlreadyExistsError",
]
