"""
Publish Video Use Case
======================

Business use case for uploading a video file and its thumbnail and
storing the resulting video record.
"""
import logging
from typing import Optional

from videotube.domain.exceptions import BadRequestError
from videotube.domain.models.media import FileUpload
from videotube.domain.models.video import Video
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.domain.storage.media_storage import MediaStorage

logger = logging.getLogger(__name__)


class PublishVideoUseCase:
    """
    Use case for publishing a video.

    The duration is taken from the media host's response, not from the client.
    """

    def __init__(self, video_repository: VideoRepository, media_storage: MediaStorage):
        """
        Initialize use case with repository and media host.

        Args:
            video_repository: Repository for video persistence
            media_storage: Media host for the video file and thumbnail
        """
        self._repository = video_repository
        self._media = media_storage

    def execute(
        self,
        owner_id: str,
        title: Optional[str],
        description: Optional[str],
        video_file: Optional[FileUpload],
        thumbnail: Optional[FileUpload],
    ) -> Video:
        """
        Execute the publish video use case.

        Returns:
            Created video entity (published, zero views)

        Raises:
            BadRequestError: Missing title or file, or a failed upload
        """
        if not title or not title.strip():
            raise BadRequestError("Title is required")
        if video_file is None:
            raise BadRequestError("Video file is required")
        if thumbnail is None:
            raise BadRequestError("Thumbnail is required")

        video_asset = self._media.upload(video_file.file, video_file.filename)
        if not video_asset:
            raise BadRequestError("Video file upload failed")

        thumbnail_asset = self._media.upload(thumbnail.file, thumbnail.filename)
        if not thumbnail_asset:
            # Do not leave an orphaned video on the host
            self._media.delete(video_asset.public_id, video_asset.resource_type)
            raise BadRequestError("Thumbnail upload failed")

        video = Video(
            video_file=video_asset,
            thumbnail=thumbnail_asset,
            title=title.strip(),
            description=(description or "").strip(),
            duration=video_asset.duration or 0.0,
            owner_id=owner_id,
        )
        created = self._repository.create(video)
        logger.info(f"User {owner_id} published video {created.id} ('{created.title}')")
        return created
