"""
Tweet Service
=============

Application service for short channel posts.
"""
import logging
from typing import Any, Dict, List, Optional

from videotube.domain.exceptions import BadRequestError, NotFoundError, PermissionDeniedError
from videotube.domain.models.like import LikeTarget
from videotube.domain.models.tweet import Tweet
from videotube.domain.repositories.like_repository import LikeRepository
from videotube.domain.repositories.tweet_repository import TweetRepository
from videotube.domain.repositories.user_repository import UserRepository
from videotube.utils.ids import require_object_id

logger = logging.getLogger(__name__)


class TweetService:
    """Application service for tweet operations."""

    def __init__(
        self,
        tweet_repository: TweetRepository,
        user_repository: UserRepository,
        like_repository: LikeRepository,
    ):
        self._repository = tweet_repository
        self._users = user_repository
        self._likes = like_repository

    def create_tweet(self, content: Optional[str], owner_id: str) -> Tweet:
        if not content or not content.strip():
            raise BadRequestError("Content cannot be empty")
        tweet = self._repository.create(Tweet(content=content.strip(), owner_id=owner_id))
        logger.info(f"User {owner_id} posted tweet {tweet.id}")
        return tweet

    def get_user_tweets(self, username: str, viewer_id: Optional[str] = None) -> List[Dict[str, Any]]:
        if not username or not username.strip():
            raise BadRequestError("Username is not valid")
        user = self._users.find_by_username(username)
        if not user:
            raise NotFoundError("User does not exist")
        return self._repository.list_by_owner(user.id, viewer_id)

    def update_tweet(self, tweet_id: str, content: Optional[str], user_id: str) -> Tweet:
        if not content or not content.strip():
            raise BadRequestError("Content cannot be empty")
        tweet = self._require_owned(tweet_id, user_id)
        tweet.edit(content)
        return self._repository.update(tweet)

    def delete_tweet(self, tweet_id: str, user_id: str) -> None:
        tweet = self._require_owned(tweet_id, user_id)
        self._repository.delete(tweet.id)
        removed = self._likes.delete_for_targets(LikeTarget.TWEET, [tweet.id])
        logger.info(f"Deleted tweet {tweet.id} and {removed} likes")

    def _require_owned(self, tweet_id: str, user_id: str) -> Tweet:
        tweet_id = require_object_id(tweet_id, "Tweet")
        tweet = self._repository.find_by_id(tweet_id)
        if not tweet:
            raise NotFoundError("Tweet not found")
        if not tweet.is_owned_by(user_id):
            raise PermissionDeniedError()
        return tweet
