"""
Comment Model
=============

Domain model representing a comment left on a video.
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from videotube.utils.datetime_utils import now


@dataclass
class Comment:
    """Comment domain model."""
    content: str
    video_id: str
    owner_id: str
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self.owner_id == user_id

    def edit(self, content: str) -> None:
        """Replace the comment text."""
        if not content or not content.strip():
            raise ValueError("Comment cannot be empty")
        self.content = content.strip()
        self.updated_at = now()
