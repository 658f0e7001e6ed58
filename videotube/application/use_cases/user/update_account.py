"""
Update Account Use Case
=======================

Business use case for editing profile fields and replacing the avatar
or cover image of the current user.
"""
import logging
from typing import Optional

from videotube.domain.exceptions import BadRequestError, ConflictError, MediaStorageError, NotFoundError
from videotube.domain.models.media import FileUpload, MediaAsset
from videotube.domain.models.user import User
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.storage.media_storage import MediaStorage

logger = logging.getLogger(__name__)


class UpdateAccountUseCase:
    """
    Use case for updating a user's account.

    Only the non-empty fields are applied. A replaced image is deleted from
    the media host once the new one is stored.
    """

    def __init__(self, user_repository: UserRepository, media_storage: MediaStorage):
        self._repository = user_repository
        self._media = media_storage

    def execute(
        self,
        user_id: str,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        username: Optional[str] = None,
        avatar: Optional[FileUpload] = None,
        cover_image: Optional[FileUpload] = None,
    ) -> User:
        """
        Execute the update account use case.

        Raises:
            NotFoundError: User no longer exists
            ConflictError: New username/email belongs to someone else
            BadRequestError: Image upload failed
            MediaStorageError: Old image could not be deleted
        """
        user = self._repository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User does not exist")

        self._check_unique(user, email=email, username=username)
        user.update_details(full_name=full_name, email=email, username=username)

        replaced = []
        if avatar is not None:
            new_avatar = self._upload(avatar, "avatar")
            if user.avatar:
                replaced.append(user.avatar)
            user.avatar = new_avatar
        if cover_image is not None:
            new_cover = self._upload(cover_image, "cover image")
            if user.cover_image:
                replaced.append(user.cover_image)
            user.cover_image = new_cover

        updated = self._repository.update(user)

        for asset in replaced:
            if not self._media.delete(asset.public_id, asset.resource_type):
                raise MediaStorageError(f"Error while deleting old image {asset.public_id}")

        logger.info(f"Updated account of user {updated.id}")
        return updated

    def _check_unique(self, user: User, email: Optional[str], username: Optional[str]) -> None:
        new_email = email.strip().lower() if email and email.strip() else None
        new_username = username.strip().lower() if username and username.strip() else None
        if new_email == user.email:
            new_email = None
        if new_username == user.username:
            new_username = None
        if not new_email and not new_username:
            return

        existing = self._repository.find_by_username_or_email(username=new_username, email=new_email)
        if existing and existing.id != user.id:
            raise ConflictError("User with email or username already exists")

    def _upload(self, upload: FileUpload, label: str) -> MediaAsset:
        asset = self._media.upload(upload.file, upload.filename)
        if not asset:
            raise BadRequestError(f"Error while uploading {label}")
        return asset
