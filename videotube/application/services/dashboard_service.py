"""
Dashboard Service
=================

Channel statistics for the channel owner.
"""
from typing import Any, Dict, List

from videotube.domain.exceptions import BadRequestError, NotFoundError, UnauthorizedError
from videotube.domain.models.user import User
from videotube.domain.repositories.like_repository import LikeRepository
from videotube.domain.repositories.subscription_repository import SubscriptionRepository
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.repositories.video_repository import VideoRepository


class DashboardService:
    """Application service for the owner-only channel dashboard."""

    def __init__(
        self,
        user_repository: UserRepository,
        video_repository: VideoRepository,
        like_repository: LikeRepository,
        subscription_repository: SubscriptionRepository,
    ):
        self._users = user_repository
        self._videos = video_repository
        self._likes = like_repository
        self._subscriptions = subscription_repository

    def get_channel_stats(self, username: str, viewer: User) -> Dict[str, int]:
        """Return totalViews, totalSubscribers, totalVideos and totalLikes."""
        channel = self._require_own_channel(username, viewer)
        stats = self._videos.get_channel_stats(channel.id)
        return {
            "totalViews": stats.get("totalViews", 0),
            "totalSubscribers": self._subscriptions.count_subscribers(channel.id),
            "totalVideos": stats.get("totalVideos", 0),
            "totalLikes": self._likes.count_for_videos_of_owner(channel.id),
        }

    def get_channel_videos(self, username: str, viewer: User) -> List[Dict[str, Any]]:
        """All videos of the channel, unpublished included, with likesCount."""
        channel = self._require_own_channel(username, viewer)
        return self._videos.find_all_by_owner_with_likes(channel.id)

    def _require_own_channel(self, username: str, viewer: User) -> User:
        if not username or not username.strip():
            raise BadRequestError("Username is not valid")
        channel = self._users.find_by_username(username)
        if not channel:
            raise NotFoundError("Channel does not exist")
        if channel.id != viewer.id:
            raise UnauthorizedError("You are not the owner of this channel")
        return channel
