from typing import TYPE_CHECKING

from ...application.services.playlist_service import PlaylistService
from ...domain.repositories.playlist_repository import PlaylistRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.video_repository import VideoRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class PlaylistProvider:
    """Playlist service provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            PlaylistService,
            PlaylistService(
                playlist_repository=container.get(PlaylistRepository),
                user_repository=container.get(UserRepository),
                video_repository=container.get(VideoRepository),
            )
        )
