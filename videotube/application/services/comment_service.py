"""
Comment Service
===============

Application service for comments on videos.
"""
import logging
from typing import Any, Dict, Optional

from videotube.domain.exceptions import BadRequestError, NotFoundError, PermissionDeniedError
from videotube.domain.models.comment import Comment
from videotube.domain.models.like import LikeTarget
from videotube.domain.repositories.comment_repository import CommentRepository
from videotube.domain.repositories.like_repository import LikeRepository
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.utils.ids import require_object_id

logger = logging.getLogger(__name__)


class CommentService:
    """
    Application service for comment operations.

    Only the author may edit or delete a comment; deleting it also
    removes its likes.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        like_repository: LikeRepository,
    ):
        self._repository = comment_repository
        self._videos = video_repository
        self._likes = like_repository

    def list_comments(
        self,
        video_id: str,
        page: int = 1,
        limit: int = 10,
        viewer_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Page through a video's comments, newest first.

        Returns:
            {"comments": [...], "totalComments": int}
        """
        video_id = require_object_id(video_id, "Video")
        comments = self._repository.list_for_video(video_id, page, limit, viewer_id)
        return {
            "comments": comments,
            "totalComments": self._repository.count_for_video(video_id),
        }

    def add_comment(self, video_id: str, content: Optional[str], user_id: str) -> Comment:
        """
        Raises:
            BadRequestError: Blank content or malformed id
            NotFoundError: Unknown video
        """
        if not content or not content.strip():
            raise BadRequestError("Comment cannot be empty")
        video_id = require_object_id(video_id, "Video")
        if not self._videos.find_by_id(video_id):
            raise NotFoundError("Video not found")

        comment = self._repository.create(Comment(content=content.strip(), video_id=video_id, owner_id=user_id))
        logger.info(f"User {user_id} commented on video {video_id}")
        return comment

    def update_comment(self, comment_id: str, content: Optional[str], user_id: str) -> Comment:
        if not content or not content.strip():
            raise BadRequestError("Comment cannot be empty")
        comment = self._require_owned(comment_id, user_id)
        comment.edit(content)
        return self._repository.update(comment)

    def delete_comment(self, comment_id: str, user_id: str) -> None:
        comment = self._require_owned(comment_id, user_id)
        self._repository.delete(comment.id)
        removed = self._likes.delete_for_targets(LikeTarget.COMMENT, [comment.id])
        logger.info(f"Deleted comment {comment.id} and {removed} likes")

    def _require_owned(self, comment_id: str, user_id: str) -> Comment:
        comment_id = require_object_id(comment_id, "Comment")
        comment = self._repository.find_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment not found")
        if not comment.is_owned_by(user_id):
            raise PermissionDeniedError()
        return comment
