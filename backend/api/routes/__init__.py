"""API routes module."""

from api.routes.admin import router as admin_router
from api.routes.documents import router as documents_router

__all__ = [
    "admin_router",
    "documents_router",
]
