"""
Tests for tweet endpoints.
"""
from bson import ObjectId

from tests.conftest import API


def _tweet(client, user, content="Hello world"):
    response = client.post(f"{API}/tweets", json={"content": content}, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestTweets:
    def test_create(self, client, make_user):
        alice = make_user("alice")

        tweet = _tweet(client, alice, " new upload soon ")

        assert tweet["content"] == "new upload soon"
        assert tweet["owner"] == alice["id"]

    def test_empty_content(self, client, make_user):
        alice = make_user("alice")

        response = client.post(f"{API}/tweets", json={}, headers=alice["headers"])

        assert response.status_code == 400
        assert response.json()["message"] == "Content cannot be empty"

    def test_user_tweets_with_likes(self, client, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        older = _tweet(client, alice, "older")
        _tweet(client, alice, "newer")
        client.post(f"{API}/likes/toggle/t/{older['_id']}", headers=bob["headers"])

        tweets = client.get(f"{API}/tweets/user/alice", headers=bob["headers"]).json()["data"]

        assert [t["content"] for t in tweets] == ["newer", "older"]
        assert tweets[1]["likesCount"] == 1
        assert tweets[1]["isLiked"] is True
        assert tweets[0]["isLiked"] is False
        assert tweets[0]["owner"]["username"] == "alice"

    def test_user_tweets_unknown_user(self, client):
        assert client.get(f"{API}/tweets/user/nobody").status_code == 404

    def test_edit_by_owner_only(self, client, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        tweet = _tweet(client, alice)

        denied = client.patch(f"{API}/tweets/{tweet['_id']}", json={"content": "hijack"}, headers=bob["headers"])
        edited = client.patch(f"{API}/tweets/{tweet['_id']}", json={"content": "edited"}, headers=alice["headers"])

        assert denied.status_code == 401
        assert edited.json()["data"]["content"] == "edited"

    def test_delete_removes_likes(self, client, container, make_user):
        alice = make_user("alice")
        tweet = _tweet(client, alice)
        client.post(f"{API}/likes/toggle/t/{tweet['_id']}", headers=alice["headers"])

        response = client.delete(f"{API}/tweets/{tweet['_id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert response.json()["data"] is None
        assert container.store.tweets == {}
        assert container.store.likes == {}

    def test_unknown_tweet(self, client, make_user):
        alice = make_user("alice")

        response = client.patch(f"{API}/tweets/{ObjectId()}", json={"content": "x"}, headers=alice["headers"])

        assert response.status_code == 404
        assert response.json()["message"] == "Tweet not found"
