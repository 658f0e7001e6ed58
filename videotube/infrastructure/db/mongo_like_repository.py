"""
MongoDB Like Repository
=======================

Concrete implementation of LikeRepository using MongoDB.

A like document carries `likedBy` plus exactly one of `video`, `comment`
or `tweet`; the LikeTarget value is the name of that field.
"""
from typing import Any, Dict, List, Optional
from pymongo.errors import DuplicateKeyError

from videotube.core.config import get_settings
from videotube.domain.exceptions import ConflictError
from videotube.domain.models.like import Like, LikeTarget
from videotube.domain.repositories.like_repository import LikeRepository
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.engagement_fields import LikeFields
from videotube.infrastructure.db.documents import (
    id_str,
    serialize_documents,
    to_object_id,
    to_object_ids,
)
from videotube.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from videotube.infrastructure.db import pipelines
from videotube.utils.datetime_utils import now


class MongoLikeRepository(LikeRepository):
    """MongoDB implementation of LikeRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().likes_collection)

    def _to_entity(self, doc: dict) -> Like:
        target = next(t for t in LikeTarget if doc.get(t.value) is not None)
        return Like(
            id=id_str(doc.get(CommonFields.MONGO_ID)),
            target=target,
            target_id=id_str(doc.get(target.value)),
            liked_by=id_str(doc.get(LikeFields.LIKED_BY)),
            created_at=doc.get(CommonFields.CREATED_AT, now()),
            updated_at=doc.get(CommonFields.UPDATED_AT, now()),
        )

    def find(self, target: LikeTarget, target_id: str, user_id: str) -> Optional[Like]:
        doc = self._collection.find_one({
            target.value: to_object_id(target_id),
            LikeFields.LIKED_BY: to_object_id(user_id),
        })
        if not doc:
            return None
        return self._to_entity(doc)

    def create(self, like: Like) -> Like:
        like.created_at = now()
        like.updated_at = now()
        try:
            result = self._collection.insert_one({
                like.target.value: to_object_id(like.target_id),
                LikeFields.LIKED_BY: to_object_id(like.liked_by),
                CommonFields.CREATED_AT: like.created_at,
                CommonFields.UPDATED_AT: like.updated_at,
            })
        except DuplicateKeyError:
            raise ConflictError(f"{like.target.value.capitalize()} already liked")
        like.id = str(result.inserted_id)
        return like

    def delete(self, like_id: str) -> bool:
        result = self._collection.delete_one({CommonFields.MONGO_ID: to_object_id(like_id)})
        return result.deleted_count > 0

    def count(self, target: LikeTarget, target_id: str) -> int:
        return self._collection.count_documents({target.value: to_object_id(target_id)})

    def delete_for_targets(self, target: LikeTarget, target_ids: List[str]) -> int:
        if not target_ids:
            return 0
        result = self._collection.delete_many({target.value: {"$in": to_object_ids(target_ids)}})
        return result.deleted_count

    def find_liked_videos(self, user_id: str) -> List[Dict[str, Any]]:
        pipeline = pipelines.liked_videos_pipeline(to_object_id(user_id))
        return serialize_documents(self._collection.aggregate(pipeline))

    def count_for_videos_of_owner(self, owner_id: str) -> int:
        docs = list(self._collection.aggregate(
            pipelines.owner_video_likes_pipeline(to_object_id(owner_id))
        ))
        if not docs:
            return 0
        return docs[0].get("totalLikes", 0)
