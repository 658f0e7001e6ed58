"""
Video Model
===========

Domain model representing an uploaded video.
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from videotube.domain.models.media import MediaAsset
from videotube.utils.datetime_utils import now


@dataclass
class Video:
    """
    Video domain model.

    Both the file and the thumbnail live on the media host; only their
    references are stored here.
    """
    video_file: MediaAsset
    thumbnail: MediaAsset
    title: str
    owner_id: str
    description: str = ""
    duration: float = 0.0
    views: int = 0
    is_published: bool = True
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self.owner_id == user_id

    def update_details(self, title: Optional[str] = None, description: Optional[str] = None) -> None:
        """Update title/description, keeping the old value for anything blank."""
        if title and title.strip():
            self.title = title.strip()
        if description and description.strip():
            self.description = description.strip()
        self.updated_at = now()

    def replace_thumbnail(self, thumbnail: MediaAsset) -> MediaAsset:
        """Swap the thumbnail and return the previous one."""
        previous = self.thumbnail
        self.thumbnail = thumbnail
        self.updated_at = now()
        return previous

    def toggle_publish(self) -> None:
        self.is_published = not self.is_published
        self.updated_at = now()
