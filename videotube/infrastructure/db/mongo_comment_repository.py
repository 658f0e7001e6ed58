"""
MongoDB Comment Repository
==========================

Concrete implementation of CommentRepository using MongoDB.
"""
from typing import Any, Dict, List, Optional
from pymongo import ReturnDocument

from videotube.core.config import get_settings
from videotube.domain.models.comment import Comment
from videotube.domain.repositories.comment_repository import CommentRepository
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.engagement_fields import CommentFields
from videotube.infrastructure.db.documents import id_str, serialize_documents, to_object_id
from videotube.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from videotube.infrastructure.db import pipelines
from videotube.utils.datetime_utils import now


class MongoCommentRepository(CommentRepository):
    """MongoDB implementation of CommentRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().comments_collection)

    def _to_entity(self, doc: dict) -> Comment:
        return Comment(
            id=id_str(doc.get(CommonFields.MONGO_ID)),
            content=doc.get(CommentFields.CONTENT, ""),
            video_id=id_str(doc.get(CommentFields.VIDEO)),
            owner_id=id_str(doc.get(CommonFields.OWNER)),
            created_at=doc.get(CommonFields.CREATED_AT, now()),
            updated_at=doc.get(CommonFields.UPDATED_AT, now()),
        )

    def _to_document(self, comment: Comment) -> dict:
        return {
            CommentFields.CONTENT: comment.content,
            CommentFields.VIDEO: to_object_id(comment.video_id),
            CommonFields.OWNER: to_object_id(comment.owner_id),
            CommonFields.CREATED_AT: comment.created_at,
            CommonFields.UPDATED_AT: comment.updated_at,
        }

    def create(self, comment: Comment) -> Comment:
        comment.created_at = now()
        comment.updated_at = now()
        result = self._collection.insert_one(self._to_document(comment))
        comment.id = str(result.inserted_id)
        return comment

    def update(self, comment: Comment) -> Comment:
        comment.updated_at = now()
        result = self._collection.find_one_and_update(
            {CommonFields.MONGO_ID: to_object_id(comment.id)},
            {"$set": {
                CommentFields.CONTENT: comment.content,
                CommonFields.UPDATED_AT: comment.updated_at,
            }},
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            raise ValueError(f"Comment '{comment.id}' not found")
        return self._to_entity(result)

    def find_by_id(self, comment_id: str) -> Optional[Comment]:
        doc = self._collection.find_one({CommonFields.MONGO_ID: to_object_id(comment_id)})
        if not doc:
            return None
        return self._to_entity(doc)

    def delete(self, comment_id: str) -> bool:
        result = self._collection.delete_one({CommonFields.MONGO_ID: to_object_id(comment_id)})
        return result.deleted_count > 0

    def find_ids_by_video(self, video_id: str) -> List[str]:
        docs = self._collection.find(
            {CommentFields.VIDEO: to_object_id(video_id)},
            {CommonFields.MONGO_ID: 1},
        )
        return [str(doc[CommonFields.MONGO_ID]) for doc in docs]

    def delete_by_video(self, video_id: str) -> int:
        result = self._collection.delete_many({CommentFields.VIDEO: to_object_id(video_id)})
        return result.deleted_count

    def list_for_video(
        self,
        video_id: str,
        page: int,
        limit: int,
        viewer_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        pipeline = pipelines.video_comments_pipeline(
            to_object_id(video_id), page, limit, to_object_id(viewer_id)
        )
        return serialize_documents(self._collection.aggregate(pipeline))

    def count_for_video(self, video_id: str) -> int:
        return self._collection.count_documents({CommentFields.VIDEO: to_object_id(video_id)})
