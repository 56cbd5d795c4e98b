"""Models used for API request and response payloads."""

from selectshop_backend.api.models.auth import (
    AuthTokenResponse,
    UserLoginRequest,
    UserLoginResponse,
    UserResponse,
    UserSignupRequest,
    UserSignupResponse,
)
from selectshop_backend.api.models.errors import ApiErrorResponse
from selectshop_backend.api.models.folders import FolderCreateRequest, FolderResponse

__all__ = [
    "ApiErrorResponse",
    "AuthTokenResponse",
    "FolderCreateRequest",
    "FolderResponse",
    "UserLoginRequest",
    "UserLoginResponse",
    "UserResponse",
    "UserSignupRequest",
    "UserSignupResponse",
]
