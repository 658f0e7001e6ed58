"""
Tests for channel subscriptions.
"""
from bson import ObjectId

from tests.conftest import API


class TestToggleSubscription:
    def test_subscribe_then_unsubscribe(self, client, make_user):
        alice = make_user("alice")
        bob = make_user("bob")

        subscribed = client.post(f"{API}/subscriptions/c/{alice['id']}", headers=bob["headers"])
        unsubscribed = client.post(f"{API}/subscriptions/c/{alice['id']}", headers=bob["headers"])

        assert subscribed.json()["data"] == {"subscribers": 1, "isSubscribed": True}
        assert unsubscribed.json()["data"] == {"subscribers": 0, "isSubscribed": False}

    def test_cannot_subscribe_to_self(self, client, make_user):
        alice = make_user("alice")

        response = client.post(f"{API}/subscriptions/c/{alice['id']}", headers=alice["headers"])

        assert response.status_code == 400
        assert response.json()["message"] == "You cannot subscribe to your own channel"

    def test_unknown_channel(self, client, make_user):
        alice = make_user("alice")

        response = client.post(f"{API}/subscriptions/c/{ObjectId()}", headers=alice["headers"])

        assert response.status_code == 404


class TestSubscriberLists:
    def test_channel_subscribers(self, client, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        carol = make_user("carol")
        client.post(f"{API}/subscriptions/c/{alice['id']}", headers=bob["headers"])
        client.post(f"{API}/subscriptions/c/{alice['id']}", headers=carol["headers"])

        data = client.get(f"{API}/subscriptions/c/{alice['id']}").json()["data"]

        assert data["subscribersCount"] == 2
        assert {s["username"] for s in data["subscribers"]} == {"bob", "carol"}

    def test_subscribed_channels(self, client, make_user):
        alice = make_user("alice")
        bob = make_user("bob")
        carol = make_user("carol")
        client.post(f"{API}/subscriptions/c/{alice['id']}", headers=bob["headers"])
        client.post(f"{API}/subscriptions/c/{alice['id']}", headers=carol["headers"])

        channels = client.get(f"{API}/subscriptions/u/bob").json()["data"]

        assert [c["username"] for c in channels] == ["alice"]
        assert channels[0]["subscribersCount"] == 2

    def test_subscribed_channels_unknown_user(self, client):
        response = client.get(f"{API}/subscriptions/u/nobody")

        assert response.status_code == 404
        assert response.json()["message"] == "User does not exist"
