"""Select Shop backend package wiring and entrypoints."""

from selectshop_backend.settings import BackendSettings, get_settings

__all__ = ["BackendSettings", "get_settings"]
