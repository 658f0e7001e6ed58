"""
Video Service
=============

Application service that coordinates video operations.
This service orchestrates the publish and delete use cases and serves the
listing, detail and recommendation views.
"""
import logging
from typing import Any, Dict, List, Optional

from videotube.application.use_cases.video.delete_video import DeleteVideoUseCase
from videotube.application.use_cases.video.publish_video import PublishVideoUseCase
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.video_fields import VideoFields
from videotube.domain.exceptions import BadRequestError, MediaStorageError, NotFoundError, PermissionDeniedError
from videotube.domain.models.media import FileUpload
from videotube.domain.models.video import Video
from videotube.domain.repositories.comment_repository import CommentRepository
from videotube.domain.repositories.like_repository import LikeRepository
from videotube.domain.repositories.playlist_repository import PlaylistRepository
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.domain.storage.media_storage import MediaStorage
from videotube.utils.ids import require_object_id

logger = logging.getLogger(__name__)

RECOMMENDATION_LIMIT = 10
DESCRIPTION_KEYWORDS = 10


def extract_keywords(title: str, description: str) -> List[str]:
    """Title words plus the first description words, deduplicated in order."""
    words = (title or "").split() + (description or "").split()[:DESCRIPTION_KEYWORDS]
    seen = set()
    keywords = []
    for word in words:
        key = word.lower()
        if key not in seen:
            seen.add(key)
            keywords.append(word)
    return keywords


class VideoService:
    """
    Application service for video operations.

    This service coordinates the video use cases and provides
    a high-level interface for the video endpoints.
    """

    def __init__(
        self,
        video_repository: VideoRepository,
        user_repository: UserRepository,
        comment_repository: CommentRepository,
        like_repository: LikeRepository,
        playlist_repository: PlaylistRepository,
        media_storage: MediaStorage,
    ):
        """
        Initialize service with repositories and media host.

        Args:
            video_repository: Repository for video persistence
            user_repository: Used to record watch history
            comment_repository: Cascade target on delete
            like_repository: Cascade target on delete
            playlist_repository: Cascade target on delete
            media_storage: Media host for files and thumbnails
        """
        self._repository = video_repository
        self._users = user_repository
        self._media = media_storage
        self._publish_use_case = PublishVideoUseCase(video_repository, media_storage)
        self._delete_use_case = DeleteVideoUseCase(
            video_repository,
            comment_repository,
            like_repository,
            playlist_repository,
            media_storage,
        )

    def list_videos(
        self,
        page: int = 1,
        limit: int = 10,
        query: str = "",
        sort_by: str = CommonFields.CREATED_AT,
        sort_type: str = "desc",
        user_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Search published videos.

        Args:
            page: 1-based page number
            limit: Page size
            query: Literal, case-insensitive title filter
            sort_by: One of VideoFields.SORTABLE
            sort_type: "asc" or "desc"
            user_id: Restrict to one owner

        Raises:
            BadRequestError: Unknown sort field/direction or a malformed user id
        """
        if sort_by not in VideoFields.SORTABLE:
            raise BadRequestError(f"sortBy must be one of: {', '.join(VideoFields.SORTABLE)}")
        sort_type = (sort_type or "").lower()
        if sort_type not in ("asc", "desc"):
            raise BadRequestError("sortType must be 'asc' or 'desc'")
        owner_id = require_object_id(user_id, "User") if user_id else None

        return self._repository.search(
            query=(query or "").strip(),
            page=page,
            limit=limit,
            sort_by=sort_by,
            ascending=sort_type == "asc",
            owner_id=owner_id,
        )

    def publish_video(
        self,
        owner_id: str,
        title: Optional[str],
        description: Optional[str],
        video_file: Optional[FileUpload],
        thumbnail: Optional[FileUpload],
    ) -> Video:
        return self._publish_use_case.execute(
            owner_id=owner_id,
            title=title,
            description=description,
            video_file=video_file,
            thumbnail=thumbnail,
        )

    def get_video(self, video_id: str, viewer_id: Optional[str] = None) -> Dict[str, Any]:
        """
        Get the detail view of a video and count the view.

        An unpublished video is only visible to its owner. A signed-in
        viewer gets the video added to their watch history.

        Raises:
            BadRequestError: Malformed id
            NotFoundError: Unknown (or hidden) video
        """
        video_id = require_object_id(video_id, "Video")
        video = self._repository.find_by_id(video_id)
        if not video or (not video.is_published and not video.is_owned_by(viewer_id)):
            raise NotFoundError("Video not found")

        self._repository.increment_views(video_id)
        if viewer_id:
            self._users.add_to_watch_history(viewer_id, video_id)

        detail = self._repository.get_detail(video_id, viewer_id)
        if not detail:
            raise NotFoundError("Video not found")
        return detail

    def get_recommended(self, video_id: str) -> List[Dict[str, Any]]:
        """Published videos sharing a keyword with the given one, most viewed first."""
        video_id = require_object_id(video_id, "Video")
        video = self._repository.find_by_id(video_id)
        if not video:
            raise NotFoundError("Video not found")

        keywords = extract_keywords(video.title, video.description)
        if not keywords:
            return []
        return self._repository.find_recommended(video_id, keywords, limit=RECOMMENDATION_LIMIT)

    def update_video(
        self,
        video_id: str,
        user_id: str,
        title: Optional[str] = None,
        description: Optional[str] = None,
        thumbnail: Optional[FileUpload] = None,
    ) -> Video:
        """
        Edit title/description and optionally replace the thumbnail.

        Raises:
            NotFoundError: Unknown video
            PermissionDeniedError: Caller is not the owner
            BadRequestError: Thumbnail upload failed
            MediaStorageError: Old thumbnail could not be deleted
        """
        video = self._require_owned(video_id, user_id)
        video.update_details(title=title, description=description)

        previous = None
        if thumbnail is not None:
            new_thumbnail = self._media.upload(thumbnail.file, thumbnail.filename)
            if not new_thumbnail:
                raise BadRequestError("Error while uploading thumbnail")
            previous = video.replace_thumbnail(new_thumbnail)

        updated = self._repository.update(video)
        if previous and not self._media.delete(previous.public_id, "image"):
            raise MediaStorageError("Error while deleting old thumbnail")

        logger.info(f"Updated video {updated.id}")
        return updated

    def delete_video(self, video_id: str, user_id: str) -> None:
        video_id = require_object_id(video_id, "Video")
        self._delete_use_case.execute(video_id, user_id)

    def toggle_publish(self, video_id: str, user_id: str) -> Video:
        video = self._require_owned(video_id, user_id)
        video.toggle_publish()
        updated = self._repository.update(video)
        logger.info(f"Video {updated.id} is_published={updated.is_published}")
        return updated

    def _require_owned(self, video_id: str, user_id: str) -> Video:
        video_id = require_object_id(video_id, "Video")
        video = self._repository.find_by_id(video_id)
        if not video:
            raise NotFoundError("Video not found")
        if not video.is_owned_by(user_id):
            raise PermissionDeniedError()
        return video
