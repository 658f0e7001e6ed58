"""
Tests for video listing, publishing, detail, recommendation and deletion.
"""
from bson import ObjectId

from tests.conftest import API


class TestPublish:
    def test_publish_uses_host_duration(self, client, make_user, publish_video):
        alice = make_user("alice")

        video = publish_video(alice, title="  Cats  ")

        assert video["title"] == "Cats"
        assert video["duration"] == 42.5
        assert video["views"] == 0
        assert video["isPublished"] is True
        assert video["owner"] == alice["id"]

    def test_title_required(self, client, make_user):
        alice = make_user("alice")

        response = client.post(
            f"{API}/videos",
            data={"title": ""},
            files={
                "videoFile": ("clip.mp4", b"v", "video/mp4"),
                "thumbnail": ("thumb.png", b"t", "image/png"),
            },
            headers=alice["headers"],
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Title is required"

    def test_video_file_required(self, client, make_user):
        alice = make_user("alice")

        response = client.post(
            f"{API}/videos",
            data={"title": "No file"},
            files={"thumbnail": ("thumb.png", b"t", "image/png")},
            headers=alice["headers"],
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Video file is required"

    def test_publish_requires_auth(self, client):
        response = client.post(f"{API}/videos", data={"title": "x"})

        assert response.status_code == 401


class TestListing:
    def test_lists_only_published_with_owner(self, client, make_user, publish_video):
        alice = make_user("alice")
        shown = publish_video(alice, title="Shown")
        hidden = publish_video(alice, title="Hidden")
        client.patch(f"{API}/videos/toggle/publish/{hidden['_id']}", headers=alice["headers"])

        videos = client.get(f"{API}/videos").json()["data"]

        assert [v["_id"] for v in videos] == [shown["_id"]]
        assert videos[0]["owner"]["username"] == "alice"
        assert set(videos[0]) == {"_id", "videoFile", "thumbnail", "title", "duration", "views", "createdAt", "owner"}

    def test_query_is_literal(self, client, make_user, publish_video):
        alice = make_user("alice")
        publish_video(alice, title="C++ basics")
        publish_video(alice, title="Cxx basics")

        videos = client.get(f"{API}/videos", params={"query": "c++"}).json()["data"]

        assert [v["title"] for v in videos] == ["C++ basics"]

    def test_pagination_and_sort(self, client, make_user, publish_video):
        alice = make_user("alice")
        for title in ("b", "a", "c"):
            publish_video(alice, title=title)

        first = client.get(f"{API}/videos", params={"sortBy": "title", "sortType": "asc", "limit": 2}).json()["data"]
        second = client.get(
            f"{API}/videos", params={"sortBy": "title", "sortType": "asc", "limit": 2, "page": 2}
        ).json()["data"]

        assert [v["title"] for v in first] == ["a", "b"]
        assert [v["title"] for v in second] == ["c"]

    def test_filter_by_owner(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        publish_video(alice, title="alice video")
        publish_video(bob, title="bob video")

        videos = client.get(f"{API}/videos", params={"userId": bob["id"]}).json()["data"]

        assert [v["title"] for v in videos] == ["bob video"]

    def test_unknown_sort_field(self, client):
        response = client.get(f"{API}/videos", params={"sortBy": "password"})

        assert response.status_code == 400

    def test_limit_bounds(self, client):
        assert client.get(f"{API}/videos", params={"limit": 0}).status_code == 400
        assert client.get(f"{API}/videos", params={"limit": 101}).status_code == 400
        assert client.get(f"{API}/videos", params={"page": 0}).json()["message"] == "Invalid request"


class TestDetail:
    def test_detail_counts_view_and_flags(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)
        client.post(f"{API}/likes/toggle/v/{video['_id']}", headers=bob["headers"])
        client.post(f"{API}/subscriptions/c/{alice['id']}", headers=bob["headers"])
        client.post(f"{API}/comments/{video['_id']}", json={"content": "nice"}, headers=bob["headers"])

        detail = client.get(f"{API}/videos/{video['_id']}", headers=bob["headers"]).json()["data"]

        assert detail["views"] == 1
        assert detail["likesCount"] == 1
        assert detail["isLiked"] is True
        assert detail["commentsCount"] == 1
        assert detail["owner"]["subscribersCount"] == 1
        assert detail["owner"]["isSubscribed"] is True

    def test_anonymous_viewer_flags_are_false(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)

        detail = client.get(f"{API}/videos/{video['_id']}").json()["data"]

        assert detail["isLiked"] is False
        assert detail["owner"]["isSubscribed"] is False

    def test_invalid_and_unknown_ids(self, client):
        invalid = client.get(f"{API}/videos/not-an-id")
        unknown = client.get(f"{API}/videos/{ObjectId()}")

        assert invalid.status_code == 400
        assert invalid.json()["message"] == "Video id is not valid"
        assert unknown.status_code == 404

    def test_unpublished_video_hidden_from_others(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        client.patch(f"{API}/videos/toggle/publish/{video['_id']}", headers=alice["headers"])

        assert client.get(f"{API}/videos/{video['_id']}").status_code == 404
        assert client.get(f"{API}/videos/{video['_id']}", headers=alice["headers"]).status_code == 200


class TestRecommended:
    def test_recommends_by_keywords(self, client, make_user, publish_video):
        alice = make_user("alice")
        source = publish_video(alice, title="Python tutorial", description="learn things")
        related = publish_video(alice, title="Advanced python", description="more")
        publish_video(alice, title="Cooking pasta", description="dinner")

        videos = client.get(f"{API}/videos/recommended/{source['_id']}").json()["data"]

        assert [v["_id"] for v in videos] == [related["_id"]]
        assert set(videos[0]["owner"]) == {"_id", "fullName", "avatar"}

    def test_unknown_video(self, client):
        assert client.get(f"{API}/videos/recommended/{ObjectId()}").status_code == 404


class TestUpdate:
    def test_owner_updates_and_thumbnail_is_replaced(self, client, container, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice, description="old description")
        old_thumbnail = container.store.videos[video["_id"]].thumbnail.public_id

        response = client.patch(
            f"{API}/videos/{video['_id']}",
            data={"title": "New title"},
            files={"thumbnail": ("new-thumb.png", b"t2", "image/png")},
            headers=alice["headers"],
        )

        updated = response.json()["data"]
        assert response.status_code == 200
        assert updated["title"] == "New title"
        assert updated["description"] == "old description"
        assert updated["thumbnail"]["url"].endswith("new-thumb.png")
        assert (old_thumbnail, "image") in container.media.deleted

    def test_non_owner_is_rejected(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)

        response = client.patch(f"{API}/videos/{video['_id']}", data={"title": "mine"}, headers=bob["headers"])

        assert response.status_code == 401
        assert response.json()["message"] == "You do not have permission to perform this action"

    def test_toggle_publish(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)

        first = client.patch(f"{API}/videos/toggle/publish/{video['_id']}", headers=alice["headers"])
        second = client.patch(f"{API}/videos/toggle/publish/{video['_id']}", headers=alice["headers"])

        assert first.json()["data"]["isPublished"] is False
        assert second.json()["data"]["isPublished"] is True


class TestDelete:
    def test_delete_cascades(self, client, container, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)
        video_id = video["_id"]
        stored = container.store.videos[video_id]

        client.post(f"{API}/likes/toggle/v/{video_id}", headers=bob["headers"])
        comment = client.post(f"{API}/comments/{video_id}", json={"content": "hi"}, headers=bob["headers"]).json()["data"]
        client.post(f"{API}/likes/toggle/c/{comment['_id']}", headers=alice["headers"])
        playlist = client.post(f"{API}/playlist", json={"name": "favs"}, headers=bob["headers"]).json()["data"]
        client.patch(f"{API}/playlist/add/{video_id}/{playlist['_id']}", headers=bob["headers"])

        response = client.delete(f"{API}/videos/{video_id}", headers=alice["headers"])

        assert response.status_code == 200
        assert video_id not in container.store.videos
        assert container.store.comments == {}
        assert container.store.likes == {}
        assert container.store.playlists[playlist["_id"]].video_ids == []
        assert (stored.video_file.public_id, "video") in container.media.deleted
        assert (stored.thumbnail.public_id, "image") in container.media.deleted

    def test_delete_by_non_owner(self, client, container, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(alice)

        response = client.delete(f"{API}/videos/{video['_id']}", headers=bob["headers"])

        assert response.status_code == 401
        assert video["_id"] in container.store.videos

    def test_delete_without_stored_media(self, client, container, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        container.store.videos[video["_id"]].video_file = None
        container.store.videos[video["_id"]].thumbnail = None

        response = client.delete(f"{API}/videos/{video['_id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert video["_id"] not in container.store.videos
        assert container.media.deleted == []

    def test_media_delete_failure(self, client, container, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        container.media.fail_deletes = True

        response = client.delete(f"{API}/videos/{video['_id']}", headers=alice["headers"])

        assert response.status_code == 500
        assert response.json()["success"] is False
