"""
Like Model
==========

A like always points at exactly one target: a video, a comment or a tweet.
"""
from datetime import datetime
from enum import Enum
from typing import Optional
from dataclasses import dataclass, field

from videotube.utils.datetime_utils import now


class LikeTarget(str, Enum):
    """Kinds of content that can be liked. Values double as document field names."""
    VIDEO = "video"
    COMMENT = "comment"
    TWEET = "tweet"


@dataclass
class Like:
    """Like domain model."""
    target: LikeTarget
    target_id: str
    liked_by: str
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
