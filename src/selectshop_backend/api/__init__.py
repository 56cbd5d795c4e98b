"""API layer: app factory, routers, request/response models and services."""

from selectshop_backend.api.app import create_api

__all__ = ["create_api"]
