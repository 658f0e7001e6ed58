"""
Subscription Service
====================

Subscribe/unsubscribe and the subscriber lists of a channel.
"""
import logging
from typing import Any, Dict, List

from videotube.domain.exceptions import BadRequestError, NotFoundError
from videotube.domain.models.subscription import Subscription
from videotube.domain.repositories.subscription_repository import SubscriptionRepository
from videotube.domain.repositories.user_repository import UserRepository
from videotube.utils.ids import require_object_id

logger = logging.getLogger(__name__)


class SubscriptionService:
    """Application service for subscription operations."""

    def __init__(self, subscription_repository: SubscriptionRepository, user_repository: UserRepository):
        self._repository = subscription_repository
        self._users = user_repository

    def toggle_subscription(self, channel_id: str, subscriber_id: str) -> Dict[str, Any]:
        """
        Subscribe to the channel, or unsubscribe when already subscribed.

        Returns:
            {"subscribers": int, "isSubscribed": bool}

        Raises:
            BadRequestError: Malformed id or own channel
            NotFoundError: Unknown channel
        """
        channel_id = self._require_channel(channel_id)
        if channel_id == subscriber_id:
            raise BadRequestError("You cannot subscribe to your own channel")

        existing = self._repository.find(subscriber_id, channel_id)
        if existing:
            self._repository.delete(existing.id)
            is_subscribed = False
        else:
            self._repository.create(Subscription(subscriber_id=subscriber_id, channel_id=channel_id))
            is_subscribed = True

        logger.info(
            f"User {subscriber_id} {'subscribed to' if is_subscribed else 'unsubscribed from'} {channel_id}"
        )
        return {
            "subscribers": self._repository.count_subscribers(channel_id),
            "isSubscribed": is_subscribed,
        }

    def get_channel_subscribers(self, channel_id: str) -> Dict[str, Any]:
        channel_id = self._require_channel(channel_id)
        subscribers = self._repository.list_subscribers(channel_id)
        return {"subscribersCount": len(subscribers), "subscribers": subscribers}

    def get_subscribed_channels(self, username: str) -> List[Dict[str, Any]]:
        if not username or not username.strip():
            raise BadRequestError("Username is not valid")
        user = self._users.find_by_username(username)
        if not user:
            raise NotFoundError("User does not exist")
        return self._repository.list_subscribed_channels(user.id)

    def _require_channel(self, channel_id: str) -> str:
        channel_id = require_object_id(channel_id, "Channel")
        if not self._users.find_by_id(channel_id):
            raise NotFoundError("Channel does not exist")
        return channel_id
