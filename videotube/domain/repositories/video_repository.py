"""
Video Repository Interface
==========================

Abstract interface for video data access.
Implementations should be in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from videotube.domain.models.video import Video


class VideoRepository(ABC):
    """
    Abstract repository for video persistence operations.

    This interface defines the contract for video data access.
    Concrete implementations should be in the infrastructure layer.
    """

    @abstractmethod
    def create(self, video: Video) -> Video:
        """
        Create a new video.

        Args:
            video: Video entity to create

        Returns:
            Created video entity with its id assigned
        """
        pass

    @abstractmethod
    def update(self, video: Video) -> Video:
        """
        Update an existing video.

        Args:
            video: Video entity with updated data

        Returns:
            Updated video entity
        """
        pass

    @abstractmethod
    def find_by_id(self, video_id: str) -> Optional[Video]:
        """
        Find a video by its id.

        Args:
            video_id: Hex ObjectId of the video

        Returns:
            Video entity if found, None otherwise
        """
        pass

    @abstractmethod
    def delete(self, video_id: str) -> bool:
        """
        Delete a video document.

        Returns:
            True if the video existed and was deleted
        """
        pass

    @abstractmethod
    def increment_views(self, video_id: str) -> None:
        """Add one to the video's view counter."""
        pass

    @abstractmethod
    def search(
        self,
        query: str,
        page: int,
        limit: int,
        sort_by: str,
        ascending: bool,
        owner_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        List published videos whose title matches `query`.

        Args:
            query: Case-insensitive title filter (literal text, not a regex)
            page: 1-based page number
            limit: Page size
            sort_by: Field to sort on
            ascending: Sort direction
            owner_id: Restrict to one channel when given

        Returns:
            Page of video summaries with owner details
        """
        pass

    @abstractmethod
    def get_detail(self, video_id: str, viewer_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """
        Build the watch-page view of a video.

        Args:
            video_id: Video to load
            viewer_id: Authenticated viewer, used for `isLiked`/`isSubscribed`

        Returns:
            Video dict with like, comment and owner details, or None
        """
        pass

    @abstractmethod
    def find_recommended(self, video_id: str, keywords: List[str], limit: int = 10) -> List[Dict[str, Any]]:
        """
        Find other published videos whose title or description mentions any keyword.

        Args:
            video_id: Video to exclude from the results
            keywords: Literal keywords (matched case-insensitively)
            limit: Maximum number of results
        """
        pass

    @abstractmethod
    def find_published_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        """List a channel's published videos, newest first."""
        pass

    @abstractmethod
    def find_all_by_owner_with_likes(self, owner_id: str) -> List[Dict[str, Any]]:
        """List every video of a channel (published or not) with its like count."""
        pass

    @abstractmethod
    def get_channel_stats(self, owner_id: str) -> Dict[str, int]:
        """
        Aggregate totals over a channel's videos.

        Returns:
            Dict with `totalViews` and `totalVideos`
        """
        pass
