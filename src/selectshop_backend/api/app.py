"""Factory for constructing the FastAPI application."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from selectshop_backend.api.routers import auth_router, folders_router, health_router
from selectshop_backend.core import configure_logging
from selectshop_backend.settings import BackendSettings, get_settings


def create_api(settings: BackendSettings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = settings or get_settings()
    configure_logging(config.log_level)

    app = FastAPI(title="Select Shop API")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(folders_router)
    return app
