"""
MongoDB Playlist Repository
===========================

Concrete implementation of PlaylistRepository using MongoDB.
"""
from typing import Any, Dict, List, Optional
from pymongo import ReturnDocument

from videotube.core.config import get_settings
from videotube.domain.models.playlist import Playlist
from videotube.domain.repositories.playlist_repository import PlaylistRepository
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.engagement_fields import PlaylistFields
from videotube.infrastructure.db.documents import (
    id_str,
    serialize_document,
    serialize_documents,
    to_object_id,
    to_object_ids,
)
from videotube.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from videotube.infrastructure.db import pipelines
from videotube.utils.datetime_utils import now


class MongoPlaylistRepository(PlaylistRepository):
    """MongoDB implementation of PlaylistRepository."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().playlists_collection)

    def _to_entity(self, doc: dict) -> Playlist:
        return Playlist(
            id=id_str(doc.get(CommonFields.MONGO_ID)),
            name=doc.get(PlaylistFields.NAME, ""),
            description=doc.get(PlaylistFields.DESCRIPTION, ""),
            video_ids=[str(v) for v in doc.get(PlaylistFields.VIDEOS, [])],
            owner_id=id_str(doc.get(CommonFields.OWNER)),
            created_at=doc.get(CommonFields.CREATED_AT, now()),
            updated_at=doc.get(CommonFields.UPDATED_AT, now()),
        )

    def _to_document(self, playlist: Playlist) -> dict:
        return {
            PlaylistFields.NAME: playlist.name,
            PlaylistFields.DESCRIPTION: playlist.description,
            PlaylistFields.VIDEOS: to_object_ids(playlist.video_ids),
            CommonFields.OWNER: to_object_id(playlist.owner_id),
            CommonFields.CREATED_AT: playlist.created_at,
            CommonFields.UPDATED_AT: playlist.updated_at,
        }

    def create(self, playlist: Playlist) -> Playlist:
        playlist.created_at = now()
        playlist.updated_at = now()
        result = self._collection.insert_one(self._to_document(playlist))
        playlist.id = str(result.inserted_id)
        return playlist

    def update(self, playlist: Playlist) -> Playlist:
        """Update name and description. The video list is left to add_video_to/remove_video_from."""
        playlist.updated_at = now()
        return self._find_and_update(playlist.id, {"$set": {
            PlaylistFields.NAME: playlist.name,
            PlaylistFields.DESCRIPTION: playlist.description,
            CommonFields.UPDATED_AT: playlist.updated_at,
        }})

    def add_video_to(self, playlist_id: str, video_id: str) -> Playlist:
        return self._find_and_update(playlist_id, {
            "$addToSet": {PlaylistFields.VIDEOS: to_object_id(video_id)},
            "$set": {CommonFields.UPDATED_AT: now()},
        })

    def remove_video_from(self, playlist_id: str, video_id: str) -> Playlist:
        return self._find_and_update(playlist_id, {
            "$pull": {PlaylistFields.VIDEOS: to_object_id(video_id)},
            "$set": {CommonFields.UPDATED_AT: now()},
        })

    def _find_and_update(self, playlist_id: str, update: dict) -> Playlist:
        result = self._collection.find_one_and_update(
            {CommonFields.MONGO_ID: to_object_id(playlist_id)},
            update,
            return_document=ReturnDocument.AFTER,
        )
        if not result:
            raise ValueError(f"Playlist '{playlist_id}' not found")
        return self._to_entity(result)

    def find_by_id(self, playlist_id: str) -> Optional[Playlist]:
        doc = self._collection.find_one({CommonFields.MONGO_ID: to_object_id(playlist_id)})
        if not doc:
            return None
        return self._to_entity(doc)

    def delete(self, playlist_id: str) -> bool:
        result = self._collection.delete_one({CommonFields.MONGO_ID: to_object_id(playlist_id)})
        return result.deleted_count > 0

    def list_by_owner(self, owner_id: str) -> List[Dict[str, Any]]:
        pipeline = pipelines.user_playlists_pipeline(to_object_id(owner_id))
        return serialize_documents(self._collection.aggregate(pipeline))

    def get_detail(self, playlist_id: str) -> Optional[Dict[str, Any]]:
        docs = list(self._collection.aggregate(
            pipelines.playlist_detail_pipeline(to_object_id(playlist_id))
        ))
        if not docs:
            return None
        return serialize_document(docs[0])

    def remove_video_from_all(self, video_id: str) -> int:
        result = self._collection.update_many(
            {PlaylistFields.VIDEOS: to_object_id(video_id)},
            {"$pull": {PlaylistFields.VIDEOS: to_object_id(video_id)}, "$set": {CommonFields.UPDATED_AT: now()}},
        )
        return result.modified_count
