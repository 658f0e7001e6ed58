"""
Tweet Repository Interface
==========================

Abstract interface for tweet data access.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from videotube.domain.models.tweet import Tweet


class TweetRepository(ABC):
    """Abstract repository for tweet persistence operations."""

    @abstractmethod
    def create(self, tweet: Tweet) -> Tweet:
        pass

    @abstractmethod
    def update(self, tweet: Tweet) -> Tweet:
        pass

    @abstractmethod
    def find_by_id(self, tweet_id: str) -> Optional[Tweet]:
        pass

    @abstractmethod
    def delete(self, tweet_id: str) -> bool:
        pass

    @abstractmethod
    def list_by_owner(self, owner_id: str, viewer_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """A channel's tweets, newest first, with like counts and owner summary."""
        pass
