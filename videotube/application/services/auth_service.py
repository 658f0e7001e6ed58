"""
Auth Service
============

Application service for registration, login, logout and token refresh.
"""
import logging
from typing import Optional, Tuple

from videotube.application.use_cases.user.register_user import RegisterUserUseCase
from videotube.core.security import (
    create_access_token,
    create_refresh_token,
    decode_access_token,
    decode_refresh_token,
    verify_password,
)
from videotube.domain.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from videotube.domain.models.media import FileUpload
from videotube.domain.models.user import User
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.storage.media_storage import MediaStorage
from videotube.utils.ids import is_valid_object_id

logger = logging.getLogger(__name__)


class AuthService:
    """
    Application service for authentication.

    Access tokens are stateless; the latest refresh token is stored on the
    user so that logging out (or refreshing elsewhere) revokes it.
    """

    def __init__(self, user_repository: UserRepository, media_storage: MediaStorage):
        """
        Initialize service with repository and media host.

        Args:
            user_repository: Repository for user persistence
            media_storage: Media host used during registration
        """
        self._repository = user_repository
        self._register_use_case = RegisterUserUseCase(user_repository, media_storage)

    def register(
        self,
        full_name: str,
        email: str,
        username: str,
        password: str,
        avatar: Optional[FileUpload],
        cover_image: Optional[FileUpload] = None,
    ) -> User:
        """Create an account. See RegisterUserUseCase for the rules."""
        return self._register_use_case.execute(
            full_name=full_name,
            email=email,
            username=username,
            password=password,
            avatar=avatar,
            cover_image=cover_image,
        )

    def login(
        self,
        password: str,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Tuple[User, str, str]:
        """
        Verify credentials and issue a token pair.

        Returns:
            (user, access_token, refresh_token)

        Raises:
            BadRequestError: Neither username nor email given
            NotFoundError: No matching user
            UnauthorizedError: Wrong password
        """
        if not (username and username.strip()) and not (email and email.strip()):
            raise BadRequestError("Username or Email is required")

        user = self._repository.find_by_username_or_email(username=username, email=email)
        if not user:
            raise NotFoundError("User does not exist")

        if not verify_password(password, user.password):
            logger.info(f"Rejected login for {user.username}: wrong password")
            raise UnauthorizedError("Password is incorrect")

        access_token, refresh_token = self._issue_tokens(user)
        logger.info(f"User {user.username} logged in")
        return user, access_token, refresh_token

    def logout(self, user_id: str) -> None:
        self._repository.set_refresh_token(user_id, None)
        logger.info(f"User {user_id} logged out")

    def refresh_access_token(self, incoming_token: Optional[str]) -> str:
        """
        Issue a new access token for a stored, valid refresh token.

        Raises:
            UnauthorizedError: Missing, invalid, expired or already rotated token
        """
        if not incoming_token:
            raise UnauthorizedError("Unauthorized request")

        payload = decode_refresh_token(incoming_token)
        if not payload:
            raise UnauthorizedError("Invalid refresh token")

        user = self._repository.find_by_id(payload["_id"]) if is_valid_object_id(payload["_id"]) else None
        if not user or user.refresh_token != incoming_token:
            raise UnauthorizedError("Refresh token is expired or used")

        return create_access_token(user)

    def authenticate(self, token: Optional[str]) -> User:
        """
        Resolve the user behind an access token.

        Raises:
            UnauthorizedError: Missing token, bad token or deleted user
        """
        if not token:
            raise UnauthorizedError("Unauthorized request")

        payload = decode_access_token(token)
        if not payload or not is_valid_object_id(payload["_id"]):
            raise UnauthorizedError("Invalid access token")

        user = self._repository.find_by_id(payload["_id"])
        if not user:
            raise UnauthorizedError("Invalid access token")
        return user

    def _issue_tokens(self, user: User) -> Tuple[str, str]:
        access_token = create_access_token(user)
        refresh_token = create_refresh_token(user)
        self._repository.set_refresh_token(user.id, refresh_token)
        user.refresh_token = refresh_token
        return access_token, refresh_token
