"""
Subscription Model
==================

A subscriber (user) following a channel (also a user).
"""
from datetime import datetime
from typing import Optional
from dataclasses import dataclass, field

from videotube.utils.datetime_utils import now


@dataclass
class Subscription:
    """Subscription domain model."""
    subscriber_id: str
    channel_id: str
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())
