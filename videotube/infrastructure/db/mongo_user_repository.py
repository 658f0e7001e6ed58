"""
MongoDB User Repository
=======================

Concrete implementation of UserRepository using MongoDB.
"""
import re
from typing import Any, Dict, List, Optional
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError

from videotube.core.config import get_settings
from videotube.domain.exceptions import ConflictError
from videotube.domain.models.user import User
from videotube.domain.repositories.user_repository import UserRepository
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.user_fields import UserFields
from videotube.infrastructure.db.documents import (
    id_str,
    media_from_document,
    media_to_document,
    serialize_document,
    to_object_id,
)
from videotube.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client
from videotube.infrastructure.db import pipelines
from videotube.utils.datetime_utils import now


class MongoUserRepository(UserRepository):
    """
    MongoDB implementation of UserRepository.

    Handles all user persistence operations using MongoDB.
    """

    PROFILE_FIELDS = (
        UserFields.USERNAME,
        UserFields.EMAIL,
        UserFields.FULL_NAME,
        UserFields.PASSWORD,
        UserFields.AVATAR,
        UserFields.COVER_IMAGE,
        CommonFields.UPDATED_AT,
    )

    def __init__(self, client: Optional[MongoClientManager] = None):
        """Initialize repository with MongoDB client."""
        self._client = client or get_mongo_client()
        self._collection = self._client.get_collection(get_settings().users_collection)

    def _to_entity(self, doc: dict) -> User:
        """Convert MongoDB document to User entity."""
        return User(
            id=id_str(doc.get(CommonFields.MONGO_ID)),
            username=doc.get(UserFields.USERNAME, ""),
            email=doc.get(UserFields.EMAIL, ""),
            full_name=doc.get(UserFields.FULL_NAME, ""),
            password=doc.get(UserFields.PASSWORD, ""),
            avatar=media_from_document(doc.get(UserFields.AVATAR)),
            cover_image=media_from_document(doc.get(UserFields.COVER_IMAGE)),
            watch_history=[str(v) for v in doc.get(UserFields.WATCH_HISTORY, [])],
            refresh_token=doc.get(UserFields.REFRESH_TOKEN),
            created_at=doc.get(CommonFields.CREATED_AT, now()),
            updated_at=doc.get(CommonFields.UPDATED_AT, now()),
        )

    def _to_document(self, user: User) -> dict:
        """Convert User entity to MongoDB document (without _id)."""
        return {
            UserFields.USERNAME: user.username,
            UserFields.EMAIL: user.email,
            UserFields.FULL_NAME: user.full_name,
            UserFields.PASSWORD: user.password,
            UserFields.AVATAR: media_to_document(user.avatar),
            UserFields.COVER_IMAGE: media_to_document(user.cover_image),
            UserFields.WATCH_HISTORY: [to_object_id(v) for v in user.watch_history],
            UserFields.REFRESH_TOKEN: user.refresh_token,
            CommonFields.CREATED_AT: user.created_at,
            CommonFields.UPDATED_AT: user.updated_at,
        }

    def create(self, user: User) -> User:
        """Create a new user."""
        user.created_at = now()
        user.updated_at = now()

        try:
            result = self._collection.insert_one(self._to_document(user))
        except DuplicateKeyError:
            raise ConflictError("User with email or username already exists")
        user.id = str(result.inserted_id)
        return user

    def update(self, user: User) -> User:
        """
        Update the profile fields of an existing user.

        watchHistory and refreshToken belong to add_to_watch_history and
        set_refresh_token and are never written here.
        """
        user.updated_at = now()

        doc = self._to_document(user)
        try:
            result = self._collection.find_one_and_update(
                {CommonFields.MONGO_ID: to_object_id(user.id)},
                {"$set": {k: doc[k] for k in self.PROFILE_FIELDS}},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError:
            raise ConflictError("User with email or username already exists")

        if not result:
            raise ValueError(f"User '{user.id}' not found")

        return self._to_entity(result)

    def set_password(self, user_id: str, password_hash: str) -> None:
        """Store a new password hash."""
        self._collection.update_one(
            {CommonFields.MONGO_ID: to_object_id(user_id)},
            {"$set": {UserFields.PASSWORD: password_hash, CommonFields.UPDATED_AT: now()}},
        )

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Find a user by id."""
        doc = self._collection.find_one({CommonFields.MONGO_ID: to_object_id(user_id)})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_username(self, username: str) -> Optional[User]:
        """Find a user by username (stored lowercased)."""
        doc = self._collection.find_one({UserFields.USERNAME: username.strip().lower()})
        if not doc:
            return None
        return self._to_entity(doc)

    def find_by_username_or_email(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """Find a user matching the username or the email."""
        conditions = []
        if username:
            conditions.append({UserFields.USERNAME: username.strip().lower()})
        if email:
            # Emails written before normalisation may carry upper case letters
            conditions.append({UserFields.EMAIL: {"$regex": f"^{re.escape(email.strip())}$", "$options": "i"}})
        if not conditions:
            return None

        doc = self._collection.find_one({"$or": conditions})
        if not doc:
            return None
        return self._to_entity(doc)

    def set_refresh_token(self, user_id: str, refresh_token: Optional[str]) -> None:
        """Store or clear the refresh token."""
        if refresh_token is None:
            update = {"$unset": {UserFields.REFRESH_TOKEN: 1}}
        else:
            update = {"$set": {UserFields.REFRESH_TOKEN: refresh_token}}
        self._collection.update_one({CommonFields.MONGO_ID: to_object_id(user_id)}, update)

    def add_to_watch_history(self, user_id: str, video_id: str) -> None:
        """$addToSet the video into watchHistory."""
        self._collection.update_one(
            {CommonFields.MONGO_ID: to_object_id(user_id)},
            {"$addToSet": {UserFields.WATCH_HISTORY: to_object_id(video_id)}},
        )

    def get_channel_profile(self, username: str, viewer_id: Optional[str] = None) -> Optional[Dict[str, Any]]:
        """Run the channel profile aggregation."""
        docs = list(self._collection.aggregate(
            pipelines.channel_profile_pipeline(username, to_object_id(viewer_id))
        ))
        if not docs:
            return None
        return serialize_document(docs[0])

    def get_watch_history(self, user_id: str) -> List[Dict[str, Any]]:
        """Run the watch history aggregation."""
        docs = list(self._collection.aggregate(
            pipelines.watch_history_pipeline(to_object_id(user_id))
        ))
        if not docs:
            return []
        return serialize_document(docs[0].get(UserFields.WATCH_HISTORY, []))
