"""
Playlist Model
==============

Domain model representing an ordered, duplicate-free list of videos.
"""
from datetime import datetime
from typing import List, Optional
from dataclasses import dataclass, field

from videotube.utils.datetime_utils import now


@dataclass
class Playlist:
    """Playlist domain model."""
    name: str
    owner_id: str
    description: str = ""
    video_ids: List[str] = field(default_factory=list)
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self.owner_id == user_id

    def has_video(self, video_id: str) -> bool:
        return video_id in self.video_ids

    def add_video(self, video_id: str) -> None:
        if self.has_video(video_id):
            raise ValueError("Video already in playlist")
        self.video_ids.append(video_id)
        self.updated_at = now()

    def remove_video(self, video_id: str) -> None:
        if not self.has_video(video_id):
            raise ValueError("Video not in playlist")
        self.video_ids = [vid for vid in self.video_ids if vid != video_id]
        self.updated_at = now()

    def rename(self, name: str, description: Optional[str] = None) -> None:
        """Update name, keeping the old description when none is given."""
        if not name or not name.strip():
            raise ValueError("Name is required")
        self.name = name.strip()
        if description:
            self.description = description.strip()
        self.updated_at = now()
