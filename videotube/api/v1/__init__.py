"""
API v1 Package
===============

Version 1 API controllers.
"""
from .healthcheck_controller import router as healthcheck_router
from .user_controller import router as user_router
from .dashboard_controller import router as dashboard_router
from .video_controller import router as video_router
from .comment_controller import router as comment_router
from .like_controller import router as like_router
from .subscription_controller import router as subscription_router
from .playlist_controller import router as playlist_router
from .tweet_controller import router as tweet_router

__all__ = [
    "healthcheck_router",
    "user_router",
    "dashboard_router",
    "video_router",
    "comment_router",
    "like_router",
    "subscription_router",
    "playlist_router",
    "tweet_router",
]
