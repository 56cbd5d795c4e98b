"""Dependency providers for FastAPI routers."""

from __future__ import annotations

from functools import cache
from typing import Annotated
from uuid import UUID

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from selectshop_backend.api.services import AuthService, FolderService
from selectshop_backend.database import SessionDep, UserRepository, UserSchema

_security = HTTPBearer(auto_error=False)


@cache
def get_auth_service() -> AuthService:
    """Return the shared :class:`AuthService` instance."""

    return AuthService()


@cache
def get_folder_service() -> FolderService:
    """Return the shared :class:`FolderService` instance."""

    return FolderService()


AuthServiceDep = Annotated[AuthService, Depends(get_auth_service)]
FolderServiceDep = Annotated[FolderService, Depends(get_folder_service)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(_security)],
    session: SessionDep,
    auth_service: AuthServiceDep,
) -> UserSchema:
    """Resolve the authenticated user from a bearer token."""

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing credentials"
        )

    try:
        payload = auth_service.decode_access_token(credentials.credentials)
    except jwt.PyJWTError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token"
        ) from exc

    try:
        user_id = UUID(payload.sub)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token subject"
        ) from exc

    user = UserRepository(session).get_by_id(user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="User not found"
        )

    return user


CurrentUserDep = Annotated[UserSchema, Depends(get_current_user)]

__all__ = [
    "AuthServiceDep",
    "CurrentUserDep",
    "FolderServiceDep",
    "get_auth_service",
    "get_current_user",
    "get_folder_service",
]
