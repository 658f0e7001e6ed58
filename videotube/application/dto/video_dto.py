"""
Video DTO
=========

Pydantic models for video responses. Uploads arrive as multipart forms,
so there is no request model here.
"""
from datetime import datetime

from pydantic import Field

from videotube.application.dto.common_dto import CamelModel, MediaResponse
from videotube.domain.models.video import Video


class VideoResponse(CamelModel):
    """DTO for a stored video document."""
    id: str = Field(..., alias="_id")
    video_file: MediaResponse
    thumbnail: MediaResponse
    title: str
    description: str
    duration: float
    views: int
    is_published: bool
    owner: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, video: Video) -> "VideoResponse":
        return cls(
            id=video.id,
            video_file=MediaResponse(url=video.video_file.url),
            thumbnail=MediaResponse(url=video.thumbnail.url),
            title=video.title,
            description=video.description,
            duration=video.duration,
            views=video.views,
            is_published=video.is_published,
            owner=video.owner_id,
            created_at=video.created_at,
            updated_at=video.updated_at,
        )


class DashboardStatsResponse(CamelModel):
    total_views: int = 0
    total_subscribers: int = 0
    total_videos: int = 0
    total_likes: int = 0
