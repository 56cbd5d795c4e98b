"""Cross-cutting helpers shared by the API and database layers."""

from selectshop_backend.core.logging_config import configure_logging

__all__ = ["configure_logging"]
