"""
FastAPI Application
===================

Main FastAPI app setup with all routes, middleware and exception handlers.
"""
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from videotube.api.errors import register_exception_handlers
from videotube.api.v1 import (
    comment_router,
    dashboard_router,
    healthcheck_router,
    like_router,
    playlist_router,
    subscription_router,
    tweet_router,
    user_router,
    video_router,
)
from videotube.core.config import get_settings
from videotube.core.logging_config import setup_logging
from videotube.di.container import get_container

API_PREFIX = "/api/v1"


def create_application(ensure_db_indexes: bool = True) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Exception handlers rendering the error envelope
    - API route registration
    - Startup handler creating the MongoDB indexes

    Args:
        ensure_db_indexes: Create indexes on startup (tests running without MongoDB turn it off)

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)
    setup_logging()
    settings = get_settings()

    application = FastAPI(
        title="VideoTube API",
        description="Backend for a video sharing platform: users, videos, comments, likes, "
                    "subscriptions, playlists and tweets",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Credentialed requests need explicit origins in CORS_ORIGIN
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(application)

    # Register API routers
    application.include_router(healthcheck_router, prefix=f"{API_PREFIX}/healthcheck")
    application.include_router(user_router, prefix=f"{API_PREFIX}/users")
    application.include_router(dashboard_router, prefix=f"{API_PREFIX}/dashboard")
    application.include_router(video_router, prefix=f"{API_PREFIX}/videos")
    application.include_router(comment_router, prefix=f"{API_PREFIX}/comments")
    application.include_router(like_router, prefix=f"{API_PREFIX}/likes")
    application.include_router(subscription_router, prefix=f"{API_PREFIX}/subscriptions")
    application.include_router(playlist_router, prefix=f"{API_PREFIX}/playlist")
    application.include_router(tweet_router, prefix=f"{API_PREFIX}/tweets")

    if ensure_db_indexes:
        @application.on_event("startup")
        def create_indexes() -> None:
            """Create unique/lookup indexes once the container is built."""
            from videotube.infrastructure.db.indexes import ensure_indexes

            ensure_indexes(get_container().get("mongo_client"))

    @application.get("/")
    def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": "VideoTube API",
            "version": "1.0.0",
            "docs": "/docs",
        }

    return application


# Create application instance
app = create_application()
