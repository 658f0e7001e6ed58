"""
User Service
============

Application service for the current user's account and public channel pages.
"""
import logging
from typing import Any, Dict, List, Optional

from videotube.application.use_cases.user.update_account import UpdateAccountUseCase
from videotube.core.security import hash_password, password_too_long, verify_password
from videotube.domain.exceptions import BadRequestError, NotFoundError
from videotube.domain.models.media import FileUpload
from videotube.domain.models.user import User
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.domain.storage.media_storage import MediaStorage

logger = logging.getLogger(__name__)


class UserService:
    """
    Application service for user operations.

    Coordinates the account use cases and the channel/history views.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        video_repository: VideoRepository,
        media_storage: MediaStorage,
    ):
        self._repository = user_repository
        self._videos = video_repository
        self._update_use_case = UpdateAccountUseCase(user_repository, media_storage)

    def change_password(self, user: User, old_password: str, new_password: str) -> None:
        """
        Replace the password after checking the old one.

        Raises:
            BadRequestError: Wrong old password, or a blank/too long new one
        """
        if not verify_password(old_password, user.password):
            raise BadRequestError("Invalid old password")
        if not new_password or not new_password.strip():
            raise BadRequestError("New password is required")
        if password_too_long(new_password):
            raise BadRequestError("Password must be at most 72 bytes")

        user.set_password(hash_password(new_password))
        self._repository.set_password(user.id, user.password)
        logger.info(f"User {user.id} changed password")

    def update_account(
        self,
        user_id: str,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        username: Optional[str] = None,
        avatar: Optional[FileUpload] = None,
        cover_image: Optional[FileUpload] = None,
    ) -> User:
        return self._update_use_case.execute(
            user_id=user_id,
            full_name=full_name,
            email=email,
            username=username,
            avatar=avatar,
            cover_image=cover_image,
        )

    def get_channel_profile(self, username: str, viewer_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Get a channel page with subscriber counters.

        Raises:
            BadRequestError: Blank username
            NotFoundError: Unknown channel
        """
        if not username or not username.strip():
            raise BadRequestError("Username is not valid")

        profile = self._repository.get_channel_profile(username, viewer_id)
        if not profile:
            raise NotFoundError("Channel does not exist")
        return profile

    def get_channel_videos(self, username: str) -> List[Dict[str, Any]]:
        """Published videos of a channel, newest first."""
        user = self._require_user(username)
        return self._videos.find_published_by_owner(user.id)

    def get_watch_history(self, user_id: str) -> List[Dict[str, Any]]:
        return self._repository.get_watch_history(user_id)

    def _require_user(self, username: str) -> User:
        if not username or not username.strip():
            raise BadRequestError("Username is not valid")
        user = self._repository.find_by_username(username)
        if not user:
            raise NotFoundError("User does not exist")
        return user
