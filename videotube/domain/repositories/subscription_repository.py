"""
Subscription Repository Interface
=================================

Abstract interface for subscription data access.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from videotube.domain.models.subscription import Subscription


class SubscriptionRepository(ABC):
    """Abstract repository for subscription persistence operations."""

    @abstractmethod
    def find(self, subscriber_id: str, channel_id: str) -> Optional[Subscription]:
        pass

    @abstractmethod
    def create(self, subscription: Subscription) -> Subscription:
        pass

    @abstractmethod
    def delete(self, subscription_id: str) -> bool:
        pass

    @abstractmethod
    def count_subscribers(self, channel_id: str) -> int:
        pass

    @abstractmethod
    def list_subscribers(self, channel_id: str) -> List[Dict[str, Any]]:
        """User summaries of everyone subscribed to a channel."""
        pass

    @abstractmethod
    def list_subscribed_channels(self, subscriber_id: str) -> List[Dict[str, Any]]:
        """Channel summaries (with their own subscriber counts) a user follows."""
        pass
