"""
User Repository Interface
=========================

Abstract interface for user data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from videotube.domain.models.user import User


class UserRepository(ABC):
    """
    Abstract repository for user persistence operations.

    Joined views (channel profile, watch history) are returned as plain
    dictionaries shaped exactly as the API serves them.
    """

    @abstractmethod
    def create(self, user: User) -> User:
        """
        Create a new user.

        Args:
            user: User entity to create

        Returns:
            Created user entity with its id assigned

        Raises:
            ConflictError: Username or email already taken
        """
        pass

    @abstractmethod
    def update(self, user: User) -> User:
        """
        Persist the profile fields of an existing user (names, email,
        password, avatar and cover image).

        Watch history and refresh token are only changed through their own
        operations.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            ConflictError: The new username or email is taken
        """
        pass

    @abstractmethod
    def set_password(self, user_id: str, password_hash: str) -> None:
        """Replace the stored password hash."""
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by id.

        Args:
            user_id: Hex ObjectId of the user

        Returns:
            User entity if found, None otherwise
        """
        pass

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by (case-insensitive) username."""
        pass

    @abstractmethod
    def find_by_username_or_email(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """
        Find a user matching either the username or the email.

        Args:
            username: Username to match (ignored when None)
            email: Email to match (ignored when None)

        Returns:
            First matching user, or None
        """
        pass

    @abstractmethod
    def set_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> None:
        """Store the current refresh token, or clear it when None."""
        pass

    @abstractmethod
    def add_to_watch_history(self, user_id: str, video_id: str) -> None:
        """Add a video to the user's watch history (no duplicates)."""
        pass

    @abstractmethod
    def get_channel_profile(self, username: str, viewer_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Build the public channel profile for a username.

        Args:
            username: Channel username
            viewer_id: Authenticated viewer, used for `isSubscribed`

        Returns:
            Profile dict with subscriber counts, or None if no such user
        """
        pass

    @abstractmethod
    def get_watch_history(self, user_id: str) -> List[Dict[str, Any]]:
        """
        Get watched videos with owner summaries.

        Args:
            user_id: User whose history to load

        Returns:
            List of video dicts
        """
        pass
