"""
Tweet Model
===========

Domain model representing a short text post on a channel.
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from videotube.utils.datetime_utils import now


@dataclass
class Tweet:
    """Tweet domain model."""
    content: str
    owner_id: str
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def is_owned_by(self, user_id: Optional[str]) -> bool:
        return user_id is not None and self.owner_id == user_id

    def edit(self, content: str) -> None:
        if not content or not content.strip():
            raise ValueError("Content cannot be empty")
        self.content = content.strip()
        self.updated_at = now()
