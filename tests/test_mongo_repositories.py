"""
Tests for the MongoDB repositories against an in-memory mongomock database.

Aggregation views are covered structurally in test_pipelines.py; these tests
exercise the plain CRUD and atomic update paths.
"""
import mongomock
import pytest
from bson import ObjectId
from pymongo import ASCENDING

from videotube.core.config import get_settings
from videotube.domain.constants.engagement_fields import LikeFields, SubscriptionFields
from videotube.domain.constants.user_fields import UserFields
from videotube.domain.exceptions import ConflictError
from videotube.domain.models.comment import Comment
from videotube.domain.models.like import Like, LikeTarget
from videotube.domain.models.media import MediaAsset
from videotube.domain.models.playlist import Playlist
from videotube.domain.models.subscription import Subscription
from videotube.domain.models.tweet import Tweet
from videotube.domain.models.user import User
from videotube.domain.models.video import Video
from videotube.infrastructure.db.mongo_comment_repository import MongoCommentRepository
from videotube.infrastructure.db.mongo_like_repository import MongoLikeRepository
from videotube.infrastructure.db.mongo_playlist_repository import MongoPlaylistRepository
from videotube.infrastructure.db.mongo_subscription_repository import MongoSubscriptionRepository
from videotube.infrastructure.db.mongo_tweet_repository import MongoTweetRepository
from videotube.infrastructure.db.mongo_user_repository import MongoUserRepository
from videotube.infrastructure.db.mongo_video_repository import MongoVideoRepository


class MongomockClient:
    """Same get_collection() surface as MongoClientManager, backed by mongomock."""

    def __init__(self):
        self._database = mongomock.MongoClient()["videotube_test"]

    def get_collection(self, collection_name: str):
        return self._database[collection_name]


@pytest.fixture
def mongo():
    return MongomockClient()


def _oid() -> str:
    return str(ObjectId())


def _user(username="alice", email=None):
    return User(
        username=username,
        email=email or f"{username}@example.com",
        full_name=username.title(),
        password="hashed",
        avatar=MediaAsset(url=f"https://media.test/{username}.png", public_id=f"avatar-{username}"),
    )


def _video(owner_id, title="Intro"):
    return Video(
        video_file=MediaAsset(url="https://media.test/clip.mp4", public_id="clip", resource_type="video"),
        thumbnail=MediaAsset(url="https://media.test/thumb.png", public_id="thumb"),
        title=title,
        owner_id=owner_id,
        duration=12.5,
    )


class TestUserRepository:
    def test_create_and_find(self, mongo):
        repo = MongoUserRepository(mongo)

        created = repo.create(_user())

        found = repo.find_by_id(created.id)
        assert found.username == "alice"
        assert found.avatar.public_id == "avatar-alice"
        assert found.cover_image is None
        assert repo.find_by_username("  Alice ").id == created.id
        assert repo.find_by_id(_oid()) is None

    def test_find_by_username_or_email_ignores_email_case(self, mongo):
        repo = MongoUserRepository(mongo)
        created = repo.create(_user(email="Alice@Example.com"))

        assert repo.find_by_username_or_email(email="alice@example.com").id == created.id
        assert repo.find_by_username_or_email(username="ALICE").id == created.id
        assert repo.find_by_username_or_email(email="alice@example.com.evil") is None
        assert repo.find_by_username_or_email() is None

    def test_stale_update_keeps_watch_history_and_refresh_token(self, mongo):
        repo = MongoUserRepository(mongo)
        user_id = repo.create(_user()).id
        stale = repo.find_by_id(user_id)
        video_id = _oid()

        repo.add_to_watch_history(user_id, video_id)
        repo.set_refresh_token(user_id, "fresh-token")
        stale.full_name = "Alice Liddell"
        updated = repo.update(stale)

        assert updated.full_name == "Alice Liddell"
        assert updated.watch_history == [video_id]
        assert updated.refresh_token == "fresh-token"

    def test_stale_update_does_not_restore_revoked_refresh_token(self, mongo):
        repo = MongoUserRepository(mongo)
        user_id = repo.create(_user()).id
        repo.set_refresh_token(user_id, "old-token")
        stale = repo.find_by_id(user_id)

        repo.set_refresh_token(user_id, None)
        repo.update(stale)

        assert repo.find_by_id(user_id).refresh_token is None

    def test_set_refresh_token_none_unsets_field(self, mongo):
        repo = MongoUserRepository(mongo)
        user_id = repo.create(_user()).id
        repo.set_refresh_token(user_id, "token")

        repo.set_refresh_token(user_id, None)

        raw = mongo.get_collection(get_settings().users_collection).find_one({"_id": ObjectId(user_id)})
        assert UserFields.REFRESH_TOKEN not in raw

    def test_set_password_leaves_other_fields(self, mongo):
        repo = MongoUserRepository(mongo)
        user_id = repo.create(_user()).id
        repo.set_refresh_token(user_id, "token")

        repo.set_password(user_id, "new-hash")

        found = repo.find_by_id(user_id)
        assert found.password == "new-hash"
        assert found.refresh_token == "token"

    def test_watch_history_has_no_duplicates(self, mongo):
        repo = MongoUserRepository(mongo)
        user_id = repo.create(_user()).id
        video_id = _oid()

        repo.add_to_watch_history(user_id, video_id)
        repo.add_to_watch_history(user_id, video_id)

        assert repo.find_by_id(user_id).watch_history == [video_id]

    def test_duplicate_username_conflicts(self, mongo):
        mongo.get_collection(get_settings().users_collection).create_index(
            [(UserFields.USERNAME, ASCENDING)], unique=True
        )
        repo = MongoUserRepository(mongo)
        repo.create(_user())

        with pytest.raises(ConflictError) as exc_info:
            repo.create(_user(email="other@example.com"))

        assert exc_info.value.status_code == 409


class TestVideoRepository:
    def test_create_find_delete(self, mongo):
        repo = MongoVideoRepository(mongo)
        owner_id = _oid()

        created = repo.create(_video(owner_id))

        found = repo.find_by_id(created.id)
        assert found.owner_id == owner_id
        assert found.video_file.resource_type == "video"
        assert found.duration == 12.5
        assert repo.delete(created.id) is True
        assert repo.find_by_id(created.id) is None

    def test_update_keeps_views(self, mongo):
        repo = MongoVideoRepository(mongo)
        video_id = repo.create(_video(_oid())).id
        stale = repo.find_by_id(video_id)

        repo.increment_views(video_id)
        repo.increment_views(video_id)
        stale.title = "Renamed"
        updated = repo.update(stale)

        assert updated.title == "Renamed"
        assert updated.views == 2

    def test_document_without_media_url(self, mongo):
        repo = MongoVideoRepository(mongo)
        result = mongo.get_collection(get_settings().videos_collection).insert_one({
            "videoFile": {}, "title": "old", "owner": ObjectId(),
        })

        found = repo.find_by_id(str(result.inserted_id))

        assert found.video_file is None
        assert found.thumbnail is None


class TestPlaylistRepository:
    def test_stale_update_does_not_restore_removed_video(self, mongo):
        repo = MongoPlaylistRepository(mongo)
        deleted_video = _oid()
        playlist_id = repo.create(Playlist(name="Mix", owner_id=_oid(), video_ids=[deleted_video])).id
        stale = repo.find_by_id(playlist_id)

        assert repo.remove_video_from_all(deleted_video) == 1
        stale.rename("Renamed")
        updated = repo.update(stale)

        assert updated.name == "Renamed"
        assert updated.video_ids == []

    def test_add_and_remove_video(self, mongo):
        repo = MongoPlaylistRepository(mongo)
        playlist_id = repo.create(Playlist(name="Mix", owner_id=_oid())).id
        first, second = _oid(), _oid()

        repo.add_video_to(playlist_id, first)
        repo.add_video_to(playlist_id, second)
        repeated = repo.add_video_to(playlist_id, first)
        removed = repo.remove_video_from(playlist_id, first)

        assert repeated.video_ids == [first, second]
        assert removed.video_ids == [second]

    def test_missing_playlist(self, mongo):
        repo = MongoPlaylistRepository(mongo)

        with pytest.raises(ValueError):
            repo.add_video_to(_oid(), _oid())
        assert repo.delete(_oid()) is False


class TestCommentRepository:
    def test_crud_by_video(self, mongo):
        repo = MongoCommentRepository(mongo)
        video_id, other_video = _oid(), _oid()
        first = repo.create(Comment(content="first", video_id=video_id, owner_id=_oid()))
        repo.create(Comment(content="second", video_id=video_id, owner_id=_oid()))
        repo.create(Comment(content="elsewhere", video_id=other_video, owner_id=_oid()))

        first.content = "edited"
        assert repo.update(first).content == "edited"
        assert len(repo.find_ids_by_video(video_id)) == 2
        assert repo.count_for_video(video_id) == 2
        assert repo.delete_by_video(video_id) == 2
        assert repo.find_by_id(first.id) is None
        assert repo.count_for_video(other_video) == 1


class TestTweetRepository:
    def test_create_update_delete(self, mongo):
        repo = MongoTweetRepository(mongo)
        owner_id = _oid()
        tweet = repo.create(Tweet(content="hello", owner_id=owner_id))

        tweet.content = "hello again"
        updated = repo.update(tweet)

        assert updated.content == "hello again"
        assert updated.owner_id == owner_id
        assert repo.delete(tweet.id) is True
        assert repo.find_by_id(tweet.id) is None


class TestLikeRepository:
    def test_find_and_delete_for_targets(self, mongo):
        repo = MongoLikeRepository(mongo)
        video_id, comment_id = _oid(), _oid()
        alice, bob = _oid(), _oid()
        repo.create(Like(target=LikeTarget.VIDEO, target_id=video_id, liked_by=alice))
        repo.create(Like(target=LikeTarget.VIDEO, target_id=video_id, liked_by=bob))
        repo.create(Like(target=LikeTarget.COMMENT, target_id=comment_id, liked_by=alice))

        found = repo.find(LikeTarget.COMMENT, comment_id, alice)
        assert found.target == LikeTarget.COMMENT
        assert found.target_id == comment_id
        assert repo.count(LikeTarget.VIDEO, video_id) == 2
        assert repo.delete_for_targets(LikeTarget.VIDEO, [video_id]) == 2
        assert repo.delete_for_targets(LikeTarget.COMMENT, []) == 0
        assert repo.count(LikeTarget.COMMENT, comment_id) == 1

    def test_duplicate_like_conflicts(self, mongo):
        mongo.get_collection(get_settings().likes_collection).create_index(
            [(LikeFields.LIKED_BY, ASCENDING), (LikeTarget.VIDEO.value, ASCENDING)], unique=True
        )
        repo = MongoLikeRepository(mongo)
        video_id, alice = _oid(), _oid()
        repo.create(Like(target=LikeTarget.VIDEO, target_id=video_id, liked_by=alice))

        with pytest.raises(ConflictError):
            repo.create(Like(target=LikeTarget.VIDEO, target_id=video_id, liked_by=alice))


class TestSubscriptionRepository:
    def test_subscribe_and_unsubscribe(self, mongo):
        repo = MongoSubscriptionRepository(mongo)
        channel_id, subscriber_id = _oid(), _oid()

        created = repo.create(Subscription(subscriber_id=subscriber_id, channel_id=channel_id))

        assert repo.find(subscriber_id, channel_id).id == created.id
        assert repo.count_subscribers(channel_id) == 1
        assert repo.delete(created.id) is True
        assert repo.find(subscriber_id, channel_id) is None

    def test_duplicate_subscription_conflicts(self, mongo):
        mongo.get_collection(get_settings().subscriptions_collection).create_index(
            [(SubscriptionFields.SUBSCRIBER, ASCENDING), (SubscriptionFields.CHANNEL, ASCENDING)], unique=True
        )
        repo = MongoSubscriptionRepository(mongo)
        channel_id, subscriber_id = _oid(), _oid()
        repo.create(Subscription(subscriber_id=subscriber_id, channel_id=channel_id))

        with pytest.raises(ConflictError):
            repo.create(Subscription(subscriber_id=subscriber_id, channel_id=channel_id))
