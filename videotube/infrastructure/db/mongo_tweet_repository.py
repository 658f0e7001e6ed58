"""
MongoDB Tweet Repository
========================

Concrete implementation of TweetRepository using MongoDB.
"""
from typing import Any, Dict, List, Optional
from pymongo import ReturnDocument

from videotube.core.config import get_settings
from videotube.domain.models.tweet import Tweet
from videotube.domain.repositories.tweet_repository import TweetRepository
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.engagement_fields import TweetFields
from videotube.infrastructure.db.documents import id_str, serialize_documents, to_object_id
from videotube.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from videotube.infrastructure.db import pipelines
from videotube.utils.datetime_utils import now


class MongoTweetRepository(TweetRepository):
    """MongoDB implementation of TweetRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().tweets_collection)

    def _to_entity(self, doc: dict) -> Tweet:
        return Tweet(
            id=id_str(doc.get(CommonFields.MONGO_ID)),
            content=doc.get(TweetFields.CONTENT, ""),
            owner_id=id_str(doc.get(CommonFields.OWNER)),
            created_at=doc.get(CommonFields.CREATED_AT, now()),
            updated_at=doc.get(CommonFields.UPDATED_AT, now()),
        )

    def create(self, tweet: Tweet) -> Tweet:
        tweet.created_at = now()
        tweet.updated_at = now()
        result = self._collection.insert_one({
            TweetFields.CONTENT: tweet.content,
            CommonFields.OWNER: to_object_id(tweet.owner_id),
            CommonFields.CREATED_AT: tweet.created_at,
            CommonFields.UPDATED_AT: tweet.updated_at,
        })
        tweet.id = str(result.inserted_id)
        return tweet

    def update(self, tweet: Tweet) -> Tweet:
        tweet.updated_at = now()
        result = self._collection.find_one_and_update(
            {CommonFields.MONGO_ID: to_object_id(tweet.id)},
            {"$set": {
                TweetFields.CONTENT: tweet.content,
                CommonFields.UPDATED_AT: tweet.updated_at,
            }},
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            raise ValueError(f"Tweet '{tweet.id}' not found")
        return self._to_entity(result)

    def find_by_id(self, tweet_id: str) -> Optional[Tweet]:
        doc = self._collection.find_one({CommonFields.MONGO_ID: to_object_id(tweet_id)})
        if not doc:
            return None
        return self._to_entity(doc)

    def delete(self, tweet_id: str) -> bool:
        result = self._collection.delete_one({CommonFields.MONGO_ID: to_object_id(tweet_id)})
        return result.deleted_count > 0

    def list_by_owner(self, owner_id: str, viewer_id: Optional[str] = None) -> List[Dict[str, Any]]:
        pipeline = pipelines.user_tweets_pipeline(to_object_id(owner_id), to_object_id(viewer_id))
        return serialize_documents(self._collection.aggregate(pipeline))
