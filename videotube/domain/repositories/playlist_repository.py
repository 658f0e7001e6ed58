"""
Playlist Repository Interface
=============================

Abstract interface for playlist data access.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from videotube.domain.models.playlist import Playlist


class PlaylistRepository(ABC):
    """Abstract repository for playlist persistence operations."""

    @abstractmethod
    def create(self, playlist: Playlist) -> Playlist:
        pass

    @abstractmethod
    def update(self, playlist: Playlist) -> Playlist:
        """Persist name and description; the video list is not touched."""
        pass

    @abstractmethod
    def add_video_to(self, playlist_id: str, video_id: str) -> Playlist:
        """Add a video to the playlist (no duplicates) and return the result."""
        pass

    @abstractmethod
    def remove_video_from(self, playlist_id: str, video_id: str) -> Playlist:
        """Remove a video from the playlist and return the result."""
        pass

    @abstractmethod
    def find_by_id(self, playlist_id: str) -> Optional[Playlist]:
        pass

    @abstractmethod
    def delete(self, playlist_id: str) -> bool:
        pass

    @abstractmethod
    def list_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        """A user's playlists with video thumbnails and totals."""
        pass

    @abstractmethod
    def get_detail(self, playlist_id: str) -> Optional[Dict[str, Any]]:
        """
        Build the playlist page view.

        Returns:
            Playlist dict with owner (and subscriber count) and its published
            videos, or None if no such playlist
        """
        pass

    @abstractmethod
    def remove_video_from_all(self, video_id: str) -> int:
        """
        Pull a video out of every playlist containing it.

        Returns:
            Number of playlists modified
        """
        pass
