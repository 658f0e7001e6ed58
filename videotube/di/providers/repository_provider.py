from typing import TYPE_CHECKING

from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.like_repository import LikeRepository
from ...domain.repositories.playlist_repository import PlaylistRepository
from ...domain.repositories.subscription_repository import SubscriptionRepository
from ...domain.repositories.tweet_repository import TweetRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.video_repository import VideoRepository
from ...infrastructure.db.mongo_comment_repository import MongoCommentRepository
from ...infrastructure.db.mongo_like_repository import MongoLikeRepository
from ...infrastructure.db.mongo_playlist_repository import MongoPlaylistRepository
from ...infrastructure.db.mongo_subscription_repository import MongoSubscriptionRepository
from ...infrastructure.db.mongo_tweet_repository import MongoTweetRepository
from ...infrastructure.db.mongo_user_repository import MongoUserRepository
from ...infrastructure.db.mongo_video_repository import MongoVideoRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to Mongo implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Every repository shares the client registered by DatabaseProvider.
        """
        mongo_client = container.get("mongo_client")

        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(UserRepository, MongoUserRepository(mongo_client))
        container.register_singleton(VideoRepository, MongoVideoRepository(mongo_client))
        container.register_singleton(CommentRepository, MongoCommentRepository(mongo_client))
        container.register_singleton(LikeRepository, MongoLikeRepository(mongo_client))
        container.register_singleton(SubscriptionRepository, MongoSubscriptionRepository(mongo_client))
        container.register_singleton(PlaylistRepository, MongoPlaylistRepository(mongo_client))
        container.register_singleton(TweetRepository, MongoTweetRepository(mongo_client))
