from typing import TYPE_CHECKING

from ...application.services.dashboard_service import DashboardService
from ...application.services.video_service import VideoService
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.like_repository import LikeRepository
from ...domain.repositories.playlist_repository import PlaylistRepository
from ...domain.repositories.subscription_repository import SubscriptionRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.video_repository import VideoRepository
from ...domain.storage.media_storage import MediaStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class VideoProvider:
    """Video service provider - registers video and dashboard services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register VideoService and DashboardService.
        VideoService also needs the engagement repositories for the delete cascade.
        """
        container.register_singleton(
            VideoService,
            VideoService(
                video_repository=container.get(VideoRepository),
                user_repository=container.get(UserRepository),
                comment_repository=container.get(CommentRepository),
                like_repository=container.get(LikeRepository),
                playlist_repository=container.get(PlaylistRepository),
                media_storage=container.get(MediaStorage),
            )
        )

        container.register_singleton(
            DashboardService,
            DashboardService(
                user_repository=container.get(UserRepository),
                video_repository=container.get(VideoRepository),
                like_repository=container.get(LikeRepository),
                subscription_repository=container.get(SubscriptionRepository),
            )
        )
