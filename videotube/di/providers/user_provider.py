from typing import TYPE_CHECKING

from ...application.services.auth_service import AuthService
from ...application.services.user_service import UserService
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.video_repository import VideoRepository
from ...domain.storage.media_storage import MediaStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User service provider - registers authentication and account services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register AuthService and UserService.
        Services are created with repositories from container.
        """
        container.register_singleton(
            AuthService,
            AuthService(
                user_repository=container.get(UserRepository),
                media_storage=container.get(MediaStorage),
            )
        )

        container.register_singleton(
            UserService,
            UserService(
                user_repository=container.get(UserRepository),
                video_repository=container.get(VideoRepository),
                media_storage=container.get(MediaStorage),
            )
        )
