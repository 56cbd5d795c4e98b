"""Shared enumerations used across the backend."""

from enum import StrEnum


class UserRole(StrEnum):
    """Authorization roles a registered user can hold."""

    USER = "user"
    ADMIN = "admin"
