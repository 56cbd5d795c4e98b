"""Pydantic models for authentication endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from selectshop_backend.shared import UserRole


USERNAME_PATTERN = r"^[a-z0-9]{4,10}$"
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 64


def _check_password_strength(value: str) -> str:
    if not any(char.isalpha() for char in value):
        msg = "password must contain at least one letter"
        raise ValueError(msg)
    if not any(char.isdigit() for char in value):
        msg = "password must contain at least one digit"
        raise ValueError(msg)
    return value


class UserResponse(BaseModel):
    """Public representation of a registered user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    username: str
    email: str
    role: UserRole
    created_at: datetime
    updated_at: datetime


class AuthTokenResponse(BaseModel):
    """Bearer token payload returned by the API."""

    access_token: str
    token_type: str = "bearer"


class UserSignupRequest(BaseModel):
    """Payload for creating a new user."""

    username: str = Field(pattern=USERNAME_PATTERN)
    email: EmailStr
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        return _check_password_strength(value)


class UserSignupResponse(BaseModel):
    """Response returned after a successful registration."""

    user: UserResponse
    token: AuthTokenResponse


class UserLoginRequest(BaseModel):
    """Payload for authenticating an existing user."""

    username: str = Field(pattern=USERNAME_PATTERN)
    password: str = Field(
        min_length=PASSWORD_MIN_LENGTH, max_length=PASSWORD_MAX_LENGTH
    )


class UserLoginResponse(BaseModel):
    """Response returned after a successful authentication."""

    user: UserResponse
    token: AuthTokenResponse
