"""
mailheader API Application

Main FastAPI application entry point.
"""

# Load environment variables FIRST before any other imports
import os
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from mailheader.api.dependencies import init_settings
from mailheader.config import get_settings
from mailheader.api.routes import get_api_router
from mailheader.services.header import strategy_registry
from mailheader.utils.constants import APP_DESCRIPTION, APP_VERSION

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if get_settings().debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info("Starting mailheader API...")

    settings = init_settings()

    strategies = [s.strategy_id for s in strategy_registry.get_all_strategies()]
    logger.info(f"Field-name strategies registered: {strategies}")
    logger.info(f"Subject pre-encoding: {'on' if settings.subject_pre_encoding else 'off'}")

    logger.info("mailheader API started successfully")

    yield

    # Shutdown
    logger.info("mailheader API shutdown complete")


# Create FastAPI application
app = FastAPI(
    title="mailheader API",
    description=APP_DESCRIPTION,
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# CORS middleware - Configure allowed origins
def get_cors_origins():
    """Get CORS origins from environment or use defaults."""
    custom_origins = os.getenv("CORS_ORIGINS", "")

    if custom_origins:
        origins = [origin.strip() for origin in custom_origins.split(",") if origin.strip()]
    else:
        # Default: configured origins (localhost for development)
        origins = get_settings().cors_origins

    logger.info(f"CORS allowed origins: {origins}")
    return origins


app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

# Include API routes
app.include_router(get_api_router())


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint - API info."""
    return {
        "name": "mailheader API",
        "description": APP_DESCRIPTION,
        "version": APP_VERSION,
        "docs": "/docs",
    }


# Root-level health check (for Docker/K8s)
@app.get("/health")
async def health():
    """Basic health check."""
    return {
        "status": "healthy",
        "service": "mailheader-api",
        "version": APP_VERSION,
    }


# Error handlers
@app.exception_handler(Exception)
async def global_exception_handler(request, exc):
    """Global exception handler."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if get_settings().debug else "An error occurred",
        },
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "mailheader.main:app",
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
    )
