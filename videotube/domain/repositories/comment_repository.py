"""
Comment Repository Interface
============================

Abstract interface for comment data access.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from videotube.domain.models.comment import Comment


class CommentRepository(ABC):
    """Abstract repository for comment persistence operations."""

    @abstractmethod
    def create(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    def update(self, comment: Comment) -> Comment:
        pass

    @abstractmethod
    def find_by_id(self, comment_id: str) -> Optional[Comment]:
        pass

    @abstractmethod
    def delete(self, comment_id: str) -> bool:
        pass

    @abstractmethod
    def find_ids_by_video(self, video_id: str) -> List[str]:
        """Ids of every comment on a video."""
        pass

    @abstractmethod
    def delete_by_video(self, video_id: str) -> int:
        """
        Delete every comment on a video.

        Returns:
            Number of deleted comments
        """
        pass

    @abstractmethod
    def list_for_video(
        self,
        video_id: str,
        page: int,
        limit: int,
        viewer_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Page through a video's comments, newest first.

        Each comment carries its owner summary, `likesCount` and `isLiked`
        (relative to `viewer_id`).
        """
        pass

    @abstractmethod
    def count_for_video(self, video_id: str) -> int:
        pass
