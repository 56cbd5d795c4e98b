"""Shared enumerations and cross-cutting models for the backend."""

from selectshop_backend.shared.enums import UserRole

__all__ = ["UserRole"]
