"""
Tests for like toggles and the liked videos list.
"""
from bson import ObjectId

from tests.conftest import API


class TestToggleLike:
    def test_video_like_toggles(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)

        liked = client.post(f"{API}/likes/toggle/v/{video['_id']}", headers=bob["headers"])
        unliked = client.post(f"{API}/likes/toggle/v/{video['_id']}", headers=bob["headers"])

        assert liked.json()["data"] == {"isLiked": True, "likes": 1}
        assert unliked.json()["data"] == {"isLiked": False, "likes": 0}

    def test_like_counts_every_user(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)

        client.post(f"{API}/likes/toggle/v/{video['_id']}", headers=alice["headers"])
        response = client.post(f"{API}/likes/toggle/v/{video['_id']}", headers=bob["headers"])

        assert response.json()["data"]["likes"] == 2

    def test_tweet_like(self, client, make_user):
        alice = make_user("alice")
        tweet = client.post(f"{API}/tweets", json={"content": "hello"}, headers=alice["headers"]).json()["data"]

        response = client.post(f"{API}/likes/toggle/t/{tweet['_id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert response.json()["data"]["isLiked"] is True

    def test_unknown_targets(self, client, make_user):
        alice = make_user("alice")

        for kind, label in (("v", "Video"), ("c", "Comment"), ("t", "Tweet")):
            response = client.post(f"{API}/likes/toggle/{kind}/{ObjectId()}", headers=alice["headers"])
            assert response.status_code == 404
            assert response.json()["message"] == f"{label} not found"

    def test_malformed_id(self, client, make_user):
        alice = make_user("alice")

        response = client.post(f"{API}/likes/toggle/c/123", headers=alice["headers"])

        assert response.status_code == 400
        assert response.json()["message"] == "Comment id is not valid"

    def test_requires_auth(self, client):
        assert client.post(f"{API}/likes/toggle/v/{ObjectId()}").status_code == 401


class TestLikedVideos:
    def test_lists_liked_videos(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        liked = publish_video(alice, title="Liked")
        publish_video(alice, title="Ignored")
        client.post(f"{API}/likes/toggle/v/{liked['_id']}", headers=bob["headers"])

        videos = client.get(f"{API}/likes/videos", headers=bob["headers"]).json()["data"]

        assert [v["_id"] for v in videos] == [liked["_id"]]
        assert videos[0]["owner"]["username"] == "alice"
