"""
Engagement DTO
==============

Pydantic models for comments, tweets, likes, subscriptions and playlists.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from videotube.application.dto.common_dto import CamelModel
from videotube.domain.models.comment import Comment
from videotube.domain.models.playlist import Playlist
from videotube.domain.models.tweet import Tweet


class ContentRequest(CamelModel):
    """DTO for creating or editing a comment or a tweet."""
    content: Optional[str] = None


class PlaylistRequest(CamelModel):
    """DTO for creating or renaming a playlist."""
    name: Optional[str] = None
    description: Optional[str] = None


class CommentResponse(CamelModel):
    id: str = Field(..., alias="_id")
    content: str
    video: str
    owner: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, comment: Comment) -> "CommentResponse":
        return cls(
            id=comment.id,
            content=comment.content,
            video=comment.video_id,
            owner=comment.owner_id,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class TweetResponse(CamelModel):
    id: str = Field(..., alias="_id")
    content: str
    owner: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, tweet: Tweet) -> "TweetResponse":
        return cls(
            id=tweet.id,
            content=tweet.content,
            owner=tweet.owner_id,
            created_at=tweet.created_at,
            updated_at=tweet.updated_at,
        )


class PlaylistResponse(CamelModel):
    id: str = Field(..., alias="_id")
    name: str
    description: str
    videos: List[str] = Field(default_factory=list)
    owner: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, playlist: Playlist) -> "PlaylistResponse":
        return cls(
            id=playlist.id,
            name=playlist.name,
            description=playlist.description,
            videos=list(playlist.video_ids),
            owner=playlist.owner_id,
            created_at=playlist.created_at,
            updated_at=playlist.updated_at,
        )


class LikeToggleResponse(CamelModel):
    """DTO for the result of a like toggle."""
    is_liked: bool
    likes: int


class SubscriptionToggleResponse(CamelModel):
    """DTO for the result of a subscription toggle."""
    subscribers: int
    is_subscribed: bool
