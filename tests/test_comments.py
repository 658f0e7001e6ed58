"""
Tests for comment endpoints.
"""
from bson import ObjectId

from tests.conftest import API


def _comment(client, user, video_id, content="Great video"):
    response = client.post(f"{API}/comments/{video_id}", json={"content": content}, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestComments:
    def test_add_comment(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)

        comment = _comment(client, alice, video["_id"], "  first!  ")

        assert comment["content"] == "first!"
        assert comment["video"] == video["_id"]
        assert comment["owner"] == alice["id"]

    def test_empty_comment_is_rejected(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)

        response = client.post(f"{API}/comments/{video['_id']}", json={"content": "   "}, headers=alice["headers"])

        assert response.status_code == 400
        assert response.json()["message"] == "Comment cannot be empty"

    def test_comment_on_unknown_video(self, client, make_user):
        alice = make_user("alice")

        response = client.post(f"{API}/comments/{ObjectId()}", json={"content": "hi"}, headers=alice["headers"])

        assert response.status_code == 404

    def test_list_is_paged_newest_first(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)
        for n in range(3):
            _comment(client, bob, video["_id"], f"comment {n}")

        first = client.get(f"{API}/comments/{video['_id']}", params={"limit": 2}).json()["data"]
        second = client.get(f"{API}/comments/{video['_id']}", params={"limit": 2, "page": 2}).json()["data"]

        assert first["totalComments"] == 3
        assert [c["content"] for c in first["comments"]] == ["comment 2", "comment 1"]
        assert [c["content"] for c in second["comments"]] == ["comment 0"]
        assert first["comments"][0]["owner"]["username"] == "bob"

    def test_list_marks_viewer_likes(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        comment = _comment(client, alice, video["_id"])
        client.post(f"{API}/likes/toggle/c/{comment['_id']}", headers=alice["headers"])

        as_alice = client.get(f"{API}/comments/{video['_id']}", headers=alice["headers"]).json()["data"]
        anonymous = client.get(f"{API}/comments/{video['_id']}").json()["data"]

        assert as_alice["comments"][0]["likesCount"] == 1
        assert as_alice["comments"][0]["isLiked"] is True
        assert anonymous["comments"][0]["isLiked"] is False


class TestCommentOwnership:
    def test_author_edits(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        comment = _comment(client, alice, video["_id"])

        response = client.patch(
            f"{API}/comments/c/{comment['_id']}", json={"content": "edited"}, headers=alice["headers"]
        )

        assert response.status_code == 200
        assert response.json()["data"]["content"] == "edited"

    def test_other_user_cannot_edit_or_delete(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)
        comment = _comment(client, alice, video["_id"])

        edit = client.patch(f"{API}/comments/c/{comment['_id']}", json={"content": "x"}, headers=bob["headers"])
        delete = client.delete(f"{API}/comments/c/{comment['_id']}", headers=bob["headers"])

        assert edit.status_code == 401
        assert delete.status_code == 401

    def test_delete_removes_comment_likes(self, client, container, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)
        comment = _comment(client, alice, video["_id"])
        client.post(f"{API}/likes/toggle/c/{comment['_id']}", headers=bob["headers"])

        response = client.delete(f"{API}/comments/c/{comment['_id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert comment["_id"] not in container.store.comments
        assert container.store.likes == {}

    def test_unknown_comment(self, client, make_user):
        alice = make_user("alice")

        response = client.delete(f"{API}/comments/c/{ObjectId()}", headers=alice["headers"])

        assert response.status_code == 404
        assert response.json()["message"] == "Comment not found"
