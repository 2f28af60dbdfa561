"""API Routes for the ceramic catalog."""

from ceramic_catalog.infrastructure.api.routes.auth_router import router as auth_router
from .clients_router import router as clients_router
from .collections_router import router as collections_router

__all__ = [
    "auth_router",
    "clients_router",
    "collections_router",
]
