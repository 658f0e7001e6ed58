"""
Tests for playlist endpoints.
"""
from bson import ObjectId

from tests.conftest import API


def _playlist(client, user, name="Favourites", description="best of"):
    response = client.post(f"{API}/playlist", json={"name": name, "description": description}, headers=user["headers"])
    assert response.status_code == 201, response.text
    return response.json()["data"]


class TestPlaylists:
    def test_create(self, client, make_user):
        alice = make_user("alice")

        playlist = _playlist(client, alice, name="  Mix  ")

        assert playlist["name"] == "Mix"
        assert playlist["videos"] == []
        assert playlist["owner"] == alice["id"]

    def test_name_required(self, client, make_user):
        alice = make_user("alice")

        response = client.post(f"{API}/playlist", json={"description": "nameless"}, headers=alice["headers"])

        assert response.status_code == 400
        assert response.json()["message"] == "Name is required"

    def test_add_and_remove_video(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        playlist = _playlist(client, alice)

        added = client.patch(f"{API}/playlist/add/{video['_id']}/{playlist['_id']}", headers=alice["headers"])
        duplicate = client.patch(f"{API}/playlist/add/{video['_id']}/{playlist['_id']}", headers=alice["headers"])
        removed = client.patch(f"{API}/playlist/remove/{video['_id']}/{playlist['_id']}", headers=alice["headers"])
        missing = client.patch(f"{API}/playlist/remove/{video['_id']}/{playlist['_id']}", headers=alice["headers"])

        assert added.json()["data"]["videos"] == [video["_id"]]
        assert duplicate.status_code == 400
        assert removed.json()["data"]["videos"] == []
        assert missing.status_code == 400

    def test_add_unknown_video(self, client, make_user):
        alice = make_user("alice")
        playlist = _playlist(client, alice)

        response = client.patch(f"{API}/playlist/add/{ObjectId()}/{playlist['_id']}", headers=alice["headers"])

        assert response.status_code == 404

    def test_only_owner_modifies(self, client, make_user, publish_video):
        alice = make_user("alice")
        bob = make_user("bob")
        video = publish_video(bob)
        playlist = _playlist(client, alice)

        add = client.patch(f"{API}/playlist/add/{video['_id']}/{playlist['_id']}", headers=bob["headers"])
        rename = client.patch(f"{API}/playlist/{playlist['_id']}", json={"name": "mine"}, headers=bob["headers"])
        delete = client.delete(f"{API}/playlist/{playlist['_id']}", headers=bob["headers"])

        assert {add.status_code, rename.status_code, delete.status_code} == {401}

    def test_rename_keeps_description(self, client, make_user):
        alice = make_user("alice")
        playlist = _playlist(client, alice)

        response = client.patch(f"{API}/playlist/{playlist['_id']}", json={"name": "Renamed"}, headers=alice["headers"])

        assert response.json()["data"]["name"] == "Renamed"
        assert response.json()["data"]["description"] == "best of"

    def test_rename_keeps_videos(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        playlist = _playlist(client, alice)
        client.patch(f"{API}/playlist/add/{video['_id']}/{playlist['_id']}", headers=alice["headers"])

        response = client.patch(f"{API}/playlist/{playlist['_id']}", json={"name": "Renamed"}, headers=alice["headers"])

        assert response.json()["data"]["videos"] == [video["_id"]]

    def test_delete(self, client, container, make_user):
        alice = make_user("alice")
        playlist = _playlist(client, alice)

        response = client.delete(f"{API}/playlist/{playlist['_id']}", headers=alice["headers"])

        assert response.status_code == 200
        assert container.store.playlists == {}
        assert client.get(f"{API}/playlist/{playlist['_id']}").status_code == 404


class TestPlaylistViews:
    def test_detail_shows_published_videos_only(self, client, make_user, publish_video):
        alice = make_user("alice")
        shown = publish_video(alice, title="shown")
        hidden = publish_video(alice, title="hidden")
        playlist = _playlist(client, alice)
        for video in (shown, hidden):
            client.patch(f"{API}/playlist/add/{video['_id']}/{playlist['_id']}", headers=alice["headers"])
        client.patch(f"{API}/videos/toggle/publish/{hidden['_id']}", headers=alice["headers"])
        client.get(f"{API}/videos/{shown['_id']}")

        detail = client.get(f"{API}/playlist/{playlist['_id']}").json()["data"]

        assert [v["_id"] for v in detail["videos"]] == [shown["_id"]]
        assert detail["totalVideos"] == 1
        assert detail["totalViews"] == 1
        assert detail["owner"]["username"] == "alice"

    def test_user_playlists(self, client, make_user, publish_video):
        alice = make_user("alice")
        video = publish_video(alice)
        playlist = _playlist(client, alice)
        client.patch(f"{API}/playlist/add/{video['_id']}/{playlist['_id']}", headers=alice["headers"])

        playlists = client.get(f"{API}/playlist/user/alice").json()["data"]

        assert len(playlists) == 1
        assert playlists[0]["totalVideos"] == 1
        assert playlists[0]["videos"][0]["thumbnail"]["url"].endswith("thumb.png")

    def test_user_playlists_unknown_user(self, client):
        assert client.get(f"{API}/playlist/user/nobody").status_code == 404

    def test_invalid_playlist_id(self, client):
        response = client.get(f"{API}/playlist/xyz")

        assert response.status_code == 400
        assert response.json()["message"] == "Playlist id is not valid"
