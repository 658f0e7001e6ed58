"""
MongoDB Indexes
===============

Indexes backing the uniqueness rules the services rely on
(one account per username/email, one like per user and target,
one subscription per subscriber and channel) plus the hot lookups.
"""
import logging

from pymongo import ASCENDING, DESCENDING, IndexModel

from videotube.core.config import get_settings
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.user_fields import UserFields
from videotube.domain.constants.video_fields import VideoFields
from videotube.domain.constants.engagement_fields import CommentFields, LikeFields, SubscriptionFields
from videotube.domain.models.like import LikeTarget
from videotube.infrastructure.db.mongo_connection import MongoClientManager

logger = logging.getLogger(__name__)


def ensure_indexes(client: MongoClientManager) -> None:
    """Create the application's indexes (no-op for the ones that already exist)."""
    settings = get_settings()

    client.get_collection(settings.users_collection).create_indexes([
        IndexModel([(UserFields.USERNAME, ASCENDING)], unique=True),
        IndexModel([(UserFields.EMAIL, ASCENDING)], unique=True),
    ])

    client.get_collection(settings.videos_collection).create_indexes([
        IndexModel([(CommonFields.OWNER, ASCENDING), (CommonFields.CREATED_AT, DESCENDING)]),
        IndexModel([(VideoFields.IS_PUBLISHED, ASCENDING), (CommonFields.CREATED_AT, DESCENDING)]),
    ])

    client.get_collection(settings.comments_collection).create_indexes([
        IndexModel([(CommentFields.VIDEO, ASCENDING), (CommonFields.CREATED_AT, DESCENDING)]),
    ])

    client.get_collection(settings.likes_collection).create_indexes([
        IndexModel(
            [(LikeFields.LIKED_BY, ASCENDING), (target.value, ASCENDING)],
            unique=True,
            partialFilterExpression={target.value: {"$exists": True}},
            name=f"likedBy_{target.value}_unique",
        )
        for target in LikeTarget
    ])

    client.get_collection(settings.subscriptions_collection).create_indexes([
        IndexModel(
            [(SubscriptionFields.SUBSCRIBER, ASCENDING), (SubscriptionFields.CHANNEL, ASCENDING)],
            unique=True,
        ),
        IndexModel([(SubscriptionFields.CHANNEL, ASCENDING)]),
    ])

    client.get_collection(settings.playlists_collection).create_indexes([
        IndexModel([(CommonFields.OWNER, ASCENDING), (CommonFields.CREATED_AT, DESCENDING)]),
    ])

    client.get_collection(settings.tweets_collection).create_indexes([
        IndexModel([(CommonFields.OWNER, ASCENDING), (CommonFields.CREATED_AT, DESCENDING)]),
    ])

    logger.info("MongoDB indexes ensured")
