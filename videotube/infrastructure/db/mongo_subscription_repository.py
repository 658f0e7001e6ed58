"""
MongoDB Subscription Repository
===============================

Concrete implementation of SubscriptionRepository using MongoDB.
"""
from typing import Any, Dict, List, Optional
from pymongo.errors import DuplicateKeyError

from videotube.core.config import get_settings
from videotube.domain.exceptions import ConflictError
from videotube.domain.models.subscription import Subscription
from videotube.domain.repositories.subscription_repository import SubscriptionRepository
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.engagement_fields import SubscriptionFields
from videotube.infrastructure.db.documents import id_str, serialize_documents, to_object_id
from videotube.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from videotube.infrastructure.db import pipelines
from videotube.utils.datetime_utils import now


class MongoSubscriptionRepository(SubscriptionRepository):
    """MongoDB implementation of SubscriptionRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().subscriptions_collection)

    def _to_entity(self, doc: dict) -> Subscription:
        return Subscription(
            id=id_str(doc.get(CommonFields.MONGO_ID)),
            subscriber_id=id_str(doc.get(SubscriptionFields.SUBSCRIBER)),
            channel_id=id_str(doc.get(SubscriptionFields.CHANNEL)),
            created_at=doc.get(CommonFields.CREATED_AT, now()),
            updated_at=doc.get(CommonFields.UPDATED_AT, now()),
        )

    def find(self, subscriber_id: str, channel_id: str) -> Optional[Subscription]:
        doc = self._collection.find_one({
            SubscriptionFields.SUBSCRIBER: to_object_id(subscriber_id),
            SubscriptionFields.CHANNEL: to_object_id(channel_id),
        })
        if not doc:
            return None
        return self._to_entity(doc)

    def create(self, subscription: Subscription) -> Subscription:
        subscription.created_at = now()
        subscription.updated_at = now()
        try:
            result = self._collection.insert_one({
                SubscriptionFields.SUBSCRIBER: to_object_id(subscription.subscriber_id),
                SubscriptionFields.CHANNEL: to_object_id(subscription.channel_id),
                CommonFields.CREATED_AT: subscription.created_at,
                CommonFields.UPDATED_AT: subscription.updated_at,
            })
        except DuplicateKeyError:
            raise ConflictError("Already subscribed to this channel")
        subscription.id = str(result.inserted_id)
        return subscription

    def delete(self, subscription_id: str) -> bool:
        result = self._collection.delete_one({CommonFields.MONGO_ID: to_object_id(subscription_id)})
        return result.deleted_count > 0

    def count_subscribers(self, channel_id: str) -> int:
        return self._collection.count_documents({SubscriptionFields.CHANNEL: to_object_id(channel_id)})

    def list_subscribers(self, channel_id: str) -> List[Dict[str, Any]]:
        pipeline = pipelines.channel_subscribers_pipeline(to_object_id(channel_id))
        return serialize_documents(self._collection.aggregate(pipeline))

    def list_subscribed_channels(self, subscriber_id: str) -> List[Dict[str, Any]]:
        pipeline = pipelines.subscribed_channels_pipeline(to_object_id(subscriber_id))
        return serialize_documents(self._collection.aggregate(pipeline))
