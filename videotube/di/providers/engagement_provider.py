from typing import TYPE_CHECKING

from ...application.services.comment_service import CommentService
from ...application.services.like_service import LikeService
from ...application.services.subscription_service import SubscriptionService
from ...application.services.tweet_service import TweetService
from ...domain.repositories.comment_repository import CommentRepository
from ...domain.repositories.like_repository import LikeRepository
from ...domain.repositories.subscription_repository import SubscriptionRepository
from ...domain.repositories.tweet_repository import TweetRepository
from ...domain.repositories.user_repository import UserRepository
from ...domain.repositories.video_repository import VideoRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class EngagementProvider:
    """Engagement provider - registers comment, like, subscription and tweet services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(
            CommentService,
            CommentService(
                comment_repository=container.get(CommentRepository),
                video_repository=container.get(VideoRepository),
                like_repository=container.get(LikeRepository),
            )
        )

        container.register_singleton(
            LikeService,
            LikeService(
                like_repository=container.get(LikeRepository),
                video_repository=container.get(VideoRepository),
                comment_repository=container.get(CommentRepository),
                tweet_repository=container.get(TweetRepository),
            )
        )

        container.register_singleton(
            SubscriptionService,
            SubscriptionService(
                subscription_repository=container.get(SubscriptionRepository),
                user_repository=container.get(UserRepository),
            )
        )

        container.register_singleton(
            TweetService,
            TweetService(
                tweet_repository=container.get(TweetRepository),
                user_repository=container.get(UserRepository),
                like_repository=container.get(LikeRepository),
            )
        )
