"""
Delete Video Use Case
=====================

Business use case for removing a video together with everything that
points at it.
"""
import logging

from videotube.domain.exceptions import MediaStorageError, NotFoundError, PermissionDeniedError
from videotube.domain.models.like import LikeTarget
from videotube.domain.repositories.comment_repository import CommentRepository
from videotube.domain.repositories.like_repository import LikeRepository
from videotube.domain.repositories.playlist_repository import PlaylistRepository
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.domain.storage.media_storage import MediaStorage

logger = logging.getLogger(__name__)


class DeleteVideoUseCase:
    """
    Use case for deleting a video.

    Removes, in order: the video document, likes on the video, the video's
    comments and their likes, the video's playlist entries and finally the
    hosted video file and thumbnail.
    """

    def __init__(
        self,
        video_repository: VideoRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        playlist_repository: PlaylistRepository,
        media_storage: MediaStorage,
    ):
        self._videos = video_repository
        self._comments = comment_repository
        self._likes = like_repository
        self._playlists = playlist_repository
        self._media = media_storage

    def execute(self, video_id: str, user_id: str) -> None:
        """
        Execute the delete video use case.

        Raises:
            NotFoundError: Unknown video
            PermissionDeniedError: Caller is not the owner
            MediaStorageError: The host refused to delete a file
        """
        video = self._videos.find_by_id(video_id)
        if not video:
            raise NotFoundError("Video not found")
        if not video.is_owned_by(user_id):
            raise PermissionDeniedError()

        self._videos.delete(video_id)

        video_likes = self._likes.delete_for_targets(LikeTarget.VIDEO, [video_id])
        comment_ids = self._comments.find_ids_by_video(video_id)
        comment_likes = self._likes.delete_for_targets(LikeTarget.COMMENT, comment_ids)
        comments = self._comments.delete_by_video(video_id)
        playlists = self._playlists.remove_video_from_all(video_id)
        logger.info(
            f"Deleted video {video_id}: {video_likes} video likes, {comments} comments, "
            f"{comment_likes} comment likes, {playlists} playlist entries"
        )

        if video.video_file and not self._media.delete(video.video_file.public_id, "video"):
            raise MediaStorageError("Error while deleting video file")
        if video.thumbnail and not self._media.delete(video.thumbnail.public_id, "image"):
            raise MediaStorageError("Error while deleting thumbnail")
