"""
MongoDB Video Repository
========================

Concrete implementation of VideoRepository using MongoDB.
"""
from typing import Any, Dict, List, Optional
from pymongo import ReturnDocument

from videotube.core.config import get_settings
from videotube.domain.models.video import Video
from videotube.domain.repositories.video_repository import VideoRepository
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.video_fields import VideoFields
from videotube.infrastructure.db.documents import (
    id_str,
    media_from_document,
    media_to_document,
    serialize_document,
    serialize_documents,
    to_object_id,
)
from videotube.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from videotube.infrastructure.db import pipelines
from videotube.utils.datetime_utils import now


class MongoVideoRepository(VideoRepository):
    """
    MongoDB implementation of VideoRepository.

    Handles all video persistence operations using MongoDB.
    """

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().videos_collection)

    def _to_entity(self, doc: dict) -> Video:
        """Convert MongoDB document to Video entity."""
        return Video(
            id=id_str(doc.get(CommonFields.MONGO_ID)),
            video_file=media_from_document(doc.get(VideoFields.VIDEO_FILE), resource_type="video"),
            thumbnail=media_from_document(doc.get(VideoFields.THUMBNAIL)),
            title=doc.get(VideoFields.TITLE, ""),
            description=doc.get(VideoFields.DESCRIPTION, ""),
            duration=doc.get(VideoFields.DURATION) or 0.0,
            views=doc.get(VideoFields.VIEWS, 0),
            is_published=doc.get(VideoFields.IS_PUBLISHED, True),
            owner_id=id_str(doc.get(CommonFields.OWNER)),
            created_at=doc.get(CommonFields.CREATED_AT, now()),
            updated_at=doc.get(CommonFields.UPDATED_AT, now()),
        )

    def _to_document(self, video: Video) -> dict:
        """Convert Video entity to MongoDB document (without _id)."""
        return {
            VideoFields.VIDEO_FILE: media_to_document(video.video_file),
            VideoFields.THUMBNAIL: media_to_document(video.thumbnail),
            VideoFields.TITLE: video.title,
            VideoFields.DESCRIPTION: video.description,
            VideoFields.DURATION: video.duration,
            VideoFields.VIEWS: video.views,
            VideoFields.IS_PUBLISHED: video.is_published,
            CommonFields.OWNER: to_object_id(video.owner_id),
            CommonFields.CREATED_AT: video.created_at,
            CommonFields.UPDATED_AT: video.updated_at,
        }

    def create(self, video: Video) -> Video:
        """Create a new video."""
        video.created_at = now()
        video.updated_at = now()

        result = self._collection.insert_one(self._to_document(video))
        video.id = str(result.inserted_id)
        return video

    def update(self, video: Video) -> Video:
        """Update an existing video. The view counter is left to increment_views."""
        video.updated_at = now()

        doc = self._to_document(video)
        result = self._collection.find_one_and_update(
            {CommonFields.MONGO_ID: to_object_id(video.id)},
            {"$set": {k: v for k, v in doc.items() if k not in (CommonFields.CREATED_AT, VideoFields.VIEWS)}},
            return_document=ReturnDocument.AFTER,
        )

        if not result:
            raise ValueError(f"Video '{video.id}' not found")

        return self._to_entity(result)

    def find_by_id(self, video_id: str) -> Optional[Video]:
        """Find a video by id."""
        doc = self._collection.find_one({CommonFields.MONGO_ID: to_object_id(video_id)})
        if not doc:
            return None
        return self._to_entity(doc)

    def delete(self, video_id: str) -> bool:
        """Delete a video document."""
        result = self._collection.delete_one({CommonFields.MONGO_ID: to_object_id(video_id)})
        return result.deleted_count > 0

    def increment_views(self, video_id: str) -> None:
        self._collection.update_one(
            {CommonFields.MONGO_ID: to_object_id(video_id)},
            {"$inc": {VideoFields.VIEWS: 1}},
        )

    def search(
        self,
        query: str,
        page: int,
        limit: int,
        sort_by: str,
        ascending: bool,
        owner_id: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Page through published videos."""
        pipeline = pipelines.video_search_pipeline(
            query, page, limit, sort_by, ascending, to_object_id(owner_id)
        )
        return serialize_documents(self._collection.aggregate(pipeline))

    def get_detail(self, video_id: str, viewer_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Build the watch-page view."""
        docs = list(self._collection.aggregate(
            pipelines.video_detail_pipeline(to_object_id(video_id), to_object_id(viewer_id))
        ))
        if not docs:
            return None
        return serialize_document(docs[0])

    def find_recommended(self, video_id: str, keywords: List[str], limit: int = 10) -> List[Dict[str, Any]]:
        if not keywords:
            return []
        pipeline = pipelines.recommended_videos_pipeline(to_object_id(video_id), keywords, limit)
        return serialize_documents(self._collection.aggregate(pipeline))

    def find_published_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        pipeline = pipelines.published_videos_by_owner_pipeline(to_object_id(owner_id))
        return serialize_documents(self._collection.aggregate(pipeline))

    def find_all_by_owner_with_likes(self, owner_id: str) -> List[Dict[str, Any]]:
        pipeline = pipelines.channel_videos_with_likes_pipeline(to_object_id(owner_id))
        return serialize_documents(self._collection.aggregate(pipeline))

    def get_channel_stats(self, owner_id: str) -> Dict[str, int]:
        """Sum views and count videos of a channel."""
        docs = list(self._collection.aggregate(
            pipelines.channel_stats_pipeline(to_object_id(owner_id))
        ))
        if not docs:
            return {"totalViews": 0, "totalVideos": 0}
        return {
            "totalViews": docs[0].get("totalViews", 0),
            "totalVideos": docs[0].get("totalVideos", 0),
        }
