"""Route definitions for public HTTP endpoints."""

from selectshop_backend.api.routers.auth import router as auth_router
from selectshop_backend.api.routers.folders import router as folders_router
from selectshop_backend.api.routers.health import router as health_router

__all__ = ["auth_router", "folders_router", "health_router"]
