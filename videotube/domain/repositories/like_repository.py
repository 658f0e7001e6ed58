"""
Like Repository Interface
=========================

Abstract interface for like data access.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from videotube.domain.models.like import Like, LikeTarget


class LikeRepository(ABC):
    """
    Abstract repository for like persistence operations.

    Every operation is keyed by a LikeTarget so the same collection serves
    video, comment and tweet likes.
    """

    @abstractmethod
    def find(self, target: LikeTarget, target_id: str, user_id: str) -> Optional[Like]:
        """
        Find the like a user left on a target.

        Args:
            target: Kind of content
            target_id: Id of the video/comment/tweet
            user_id: Liking user

        Returns:
            Like entity if present, None otherwise
        """
        pass

    @abstractmethod
    def create(self, like: Like) -> Like:
        pass

    @abstractmethod
    def delete(self, like_id: str) -> bool:
        pass

    @abstractmethod
    def count(self, target: LikeTarget, target_id: str) -> int:
        """Number of likes on a target."""
        pass

    @abstractmethod
    def delete_for_targets(self, target: LikeTarget, target_ids: List[str]) -> int:
        """
        Delete every like on the given targets.

        Returns:
            Number of deleted likes
        """
        pass

    @abstractmethod
    def find_liked_videos(self, user_id: str) -> List[Dict[str, Any]]:
        """Videos a user liked, most recent like first, with owner summaries."""
        pass

    @abstractmethod
    def count_for_videos_of_owner(self, owner_id: str) -> int:
        """Total likes received by all videos of a channel."""
        pass
