"""
Register User Use Case
======================

Business use case for creating an account with an avatar (and optional
cover image) hosted on the media service.
"""
import logging
from typing import Optional

from videotube.core.security import hash_password, password_too_long
from videotube.domain.exceptions import BadRequestError, ConflictError
from videotube.domain.models.media import FileUpload
from videotube.domain.models.user import User
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.storage.media_storage import MediaStorage

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Use case for registering a user.

    This encapsulates the business logic for user registration.
    """

    def __init__(self, user_repository: UserRepository, media_storage: MediaStorage):
        """
        Initialize use case with repository and media host.

        Args:
            user_repository: Repository for user persistence
            media_storage: Media host for the avatar and cover image
        """
        self._repository = user_repository
        self._media = media_storage

    def execute(
        self,
        full_name: str,
        email: str,
        username: str,
        password: str,
        avatar: Optional[FileUpload],
        cover_image: Optional[FileUpload] = None,
    ) -> User:
        """
        Execute the register user use case.

        Args:
            full_name: Display name
            email: Contact email (unique)
            username: Handle (unique, stored lowercased)
            password: Plain text password, hashed before storage
            avatar: Required profile picture
            cover_image: Optional channel banner

        Returns:
            Created user entity

        Raises:
            BadRequestError: Missing fields, missing avatar or failed upload
            ConflictError: Username or email already taken
        """
        # Validate inputs
        if any(not (value and value.strip()) for value in (full_name, email, username, password)):
            raise BadRequestError("All fields are required")
        if password_too_long(password):
            raise BadRequestError("Password must be at most 72 bytes")

        existing_user = self._repository.find_by_username_or_email(username=username, email=email)
        if existing_user:
            raise ConflictError("User with email or username already exists")

        if avatar is None:
            raise BadRequestError("Avatar is required")

        avatar_asset = self._media.upload(avatar.file, avatar.filename)
        if not avatar_asset:
            raise BadRequestError("Avatar upload failed")

        cover_asset = None
        if cover_image is not None:
            cover_asset = self._media.upload(cover_image.file, cover_image.filename)
            if not cover_asset:
                logger.warning(f"Cover image upload failed for new user '{username}', continuing without it")

        user = User(
            full_name=full_name,
            email=email,
            username=username,
            password=hash_password(password),
            avatar=avatar_asset,
            cover_image=cover_asset,
        )
        created = self._repository.create(user)
        logger.info(f"Registered user {created.username} ({created.id})")
        return created
