"""
Providers Package
=================

Dependency injection providers, one per group of registrations.
"""
from .database_provider import DatabaseProvider
from .repository_provider import RepositoryProvider
from .media_provider import MediaProvider
from .user_provider import UserProvider
from .video_provider import VideoProvider
from .engagement_provider import EngagementProvider
from .playlist_provider import PlaylistProvider

__all__ = [
    "DatabaseProvider",
    "RepositoryProvider",
    "MediaProvider",
    "UserProvider",
    "VideoProvider",
    "EngagementProvider",
    "PlaylistProvider",
]
