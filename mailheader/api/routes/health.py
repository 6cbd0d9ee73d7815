"""
mailheader Health API Routes

Health check and status endpoints.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from mailheader.api.dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check(
    settings = Depends(get_settings),
):
    """
    Basic health check endpoint.

    Returns:
        Health status with the active header options
    """
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "mailheader-api",
        "version": settings.app_version,
        "header": {
            "max_line_length": settings.max_line_length,
            "charset": settings.charset,
            "header_encoding": settings.header_encoding,
            "subject_pre_encoding": settings.subject_pre_encoding,
        },
    }
