"""
Like Service
============

Toggle likes on videos, comments and tweets.
"""
import logging
from typing import Any, Dict, List

from videotube.domain.exceptions import NotFoundError
from videotube.domain.models.like import Like, LikeTarget
from videotube.domain.repositories.comment_repository import CommentRepository
from videotube.domain.repositories.like_repository import LikeRepository
from videotube.domain.repositories.tweet_repository import TweetRepository
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.utils.ids import require_object_id

logger = logging.getLogger(__name__)


class LikeService:
    """Application service for like operations."""

    def __init__(
        self,
        like_repository: LikeRepository,
        video_repository: VideoRepository,
        comment_repository: CommentRepository,
        tweet_repository: TweetRepository,
    ):
        self._repository = like_repository
        self._lookups = {
            LikeTarget.VIDEO: video_repository.find_by_id,
            LikeTarget.COMMENT: comment_repository.find_by_id,
            LikeTarget.TWEET: tweet_repository.find_by_id,
        }

    def toggle_like(self, target: LikeTarget, target_id: str, user_id: str) -> Dict[str, Any]:
        """
        Like the target, or remove the like when it already exists.

        Returns:
            {"isLiked": bool, "likes": int} after the toggle

        Raises:
            BadRequestError: Malformed id
            NotFoundError: Unknown target
        """
        label = target.value.capitalize()
        target_id = require_object_id(target_id, label)
        if not self._lookups[target](target_id):
            raise NotFoundError(f"{label} not found")

        existing = self._repository.find(target, target_id, user_id)
        if existing:
            self._repository.delete(existing.id)
            is_liked = False
        else:
            self._repository.create(Like(target=target, target_id=target_id, liked_by=user_id))
            is_liked = True

        logger.info(f"User {user_id} {'liked' if is_liked else 'unliked'} {target.value} {target_id}")
        return {"isLiked": is_liked, "likes": self._repository.count(target, target_id)}

    def get_liked_videos(self, user_id: str) -> List[Dict[str, Any]]:
        return self._repository.find_liked_videos(user_id)
