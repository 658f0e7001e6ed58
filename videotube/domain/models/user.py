"""
User Model
==========

Domain model representing a registered user (who is also a channel).
This is a pure domain object with no infrastructure dependencies.
"""
from datetime import datetime
from typing import List, Optional
from dataclasses import dataclass, field

from videotube.domain.models.media import MediaAsset
from videotube.utils.datetime_utils import now


@dataclass
class User:
    """
    User domain model.

    `password` always holds the bcrypt hash, never the plain text.
    """
    username: str
    email: str
    full_name: str
    password: str
    avatar: MediaAsset
    cover_image: Optional[MediaAsset] = None
    watch_history: List[str] = field(default_factory=list)
    refresh_token: Optional[str] = None
    id: Optional[str] = None
    created_at: datetime = field(default_factory=lambda: now())
    updated_at: datetime = field(default_factory=lambda: now())

    def __post_init__(self) -> None:
        self.username = self.username.strip().lower()
        self.email = self.email.strip().lower()
        self.full_name = self.full_name.strip()

    def update_details(
        self,
        full_name: Optional[str] = None,
        email: Optional[str] = None,
        username: Optional[str] = None,
    ) -> None:
        """Apply the non-empty profile fields."""
        if full_name and full_name.strip():
            self.full_name = full_name.strip()
        if email and email.strip():
            self.email = email.strip().lower()
        if username and username.strip():
            self.username = username.strip().lower()
        self.updated_at = now()

    def set_password(self, password_hash: str) -> None:
        self.password = password_hash
        self.updated_at = now()
