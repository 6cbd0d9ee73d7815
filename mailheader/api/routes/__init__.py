"""
mailheader API Routes

All API route modules.
"""

from fastapi import APIRouter

from .headers import router as headers_router
from .health import router as health_router


def get_api_router() -> APIRouter:
    """Create and return the main API router."""
    api_router = APIRouter(prefix="/api/v1")

    api_router.include_router(headers_router)
    api_router.include_router(health_router)

    return api_router


__all__ = [
    'get_api_router',
    'headers_router',
    'health_router',
]
