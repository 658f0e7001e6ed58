"""
Playlist Service
================

Application service for user playlists.
"""
import logging
from typing import Any, Dict, List, Optional

from videotube.domain.exceptions import BadRequestError, NotFoundError, PermissionDeniedError
from videotube.domain.models.playlist import Playlist
from videotube.domain.repositories.playlist_repository import PlaylistRepository
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.utils.ids import require_object_id

logger = logging.getLogger(__name__)


class PlaylistService:
    """
    Application service for playlist operations.

    Every write is restricted to the playlist owner.
    """

    def __init__(
        self,
        playlist_repository: PlaylistRepository,
        user_repository: UserRepository,
        video_repository: VideoRepository,
    ):
        self._repository = playlist_repository
        self._users = user_repository
        self._videos = video_repository

    def create_playlist(self, name: Optional[str], description: Optional[str], owner_id: str) -> Playlist:
        if not name or not name.strip():
            raise BadRequestError("Name is required")
        playlist = self._repository.create(
            Playlist(name=name.strip(), description=(description or "").strip(), owner_id=owner_id)
        )
        logger.info(f"User {owner_id} created playlist {playlist.id}")
        return playlist

    def get_user_playlists(self, username: str) -> List[Dict[str, Any]]:
        if not username or not username.strip():
            raise BadRequestError("Username is not valid")
        user = self._users.find_by_username(username)
        if not user:
            raise NotFoundError("User does not exist")
        return self._repository.list_by_owner(user.id)

    def get_playlist(self, playlist_id: str) -> Dict[str, Any]:
        playlist_id = require_object_id(playlist_id, "Playlist")
        detail = self._repository.get_detail(playlist_id)
        if not detail:
            raise NotFoundError("Playlist not found")
        return detail

    def add_video(self, video_id: str, playlist_id: str, user_id: str) -> Playlist:
        """
        Append a video to an owned playlist.

        Raises:
            NotFoundError: Unknown playlist or video
            PermissionDeniedError: Caller does not own the playlist
            BadRequestError: Malformed id or video already present
        """
        video_id = require_object_id(video_id, "Video")
        playlist = self._require_owned(playlist_id, user_id)
        if not self._videos.find_by_id(video_id):
            raise NotFoundError("Video not found")

        try:
            playlist.add_video(video_id)
        except ValueError as e:
            raise BadRequestError(str(e))
        return self._repository.add_video_to(playlist.id, video_id)

    def remove_video(self, video_id: str, playlist_id: str, user_id: str) -> Playlist:
        video_id = require_object_id(video_id, "Video")
        playlist = self._require_owned(playlist_id, user_id)

        try:
            playlist.remove_video(video_id)
        except ValueError as e:
            raise BadRequestError(str(e))
        return self._repository.remove_video_from(playlist.id, video_id)

    def update_playlist(
        self,
        playlist_id: str,
        user_id: str,
        name: Optional[str],
        description: Optional[str] = None,
    ) -> Playlist:
        playlist = self._require_owned(playlist_id, user_id)
        try:
            playlist.rename(name, description)
        except ValueError as e:
            raise BadRequestError(str(e))
        return self._repository.update(playlist)

    def delete_playlist(self, playlist_id: str, user_id: str) -> None:
        playlist = self._require_owned(playlist_id, user_id)
        self._repository.delete(playlist.id)
        logger.info(f"User {user_id} deleted playlist {playlist.id}")

    def _require_owned(self, playlist_id: str, user_id: str) -> Playlist:
        playlist_id = require_object_id(playlist_id, "Playlist")
        playlist = self._repository.find_by_id(playlist_id)
        if not playlist:
            raise NotFoundError("Playlist not found")
        if not playlist.is_owned_by(user_id):
            raise PermissionDeniedError()
        return playlist
