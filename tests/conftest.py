"""
Pytest configuration and shared fixtures for the VideoTube API tests.
"""
import os

# Settings are read once, so configure them before anything imports videotube
os.environ["ACCESS_TOKEN_SECRET"] = "test-access-secret"
os.environ["REFRESH_TOKEN_SECRET"] = "test-refresh-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["COOKIE_SECURE"] = "true"
os.environ["CORS_ORIGIN"] = "http://localhost:5173"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict, Generator, Optional

import pytest
from fastapi.testclient import TestClient

from tests.fakes import InMemoryContainer
from videotube.di.container import set_container
from videotube.main import create_application

API = "/api/v1"
DEFAULT_PASSWORD = "password123"


@pytest.fixture
def container() -> Generator[InMemoryContainer, None, None]:
    """Fresh in-memory container installed as the global DI container."""
    test_container = InMemoryContainer()
    set_container(test_container)
    yield test_container
    set_container(None)


@pytest.fixture
def client(container: InMemoryContainer) -> Generator[TestClient, None, None]:
    app = create_application(ensure_db_indexes=False)
    with TestClient(app) as test_client:
        yield test_client


def register(
    client: TestClient,
    username: str,
    email: Optional[str] = None,
    password: str = DEFAULT_PASSWORD,
    full_name: Optional[str] = None,
    with_cover: bool = False,
):
    """POST /users/register with an avatar (and optionally a cover image)."""
    files = {"avatar": ("avatar.png", b"avatar-bytes", "image/png")}
    if with_cover:
        files["coverImage"] = ("cover.jpg", b"cover-bytes", "image/jpeg")
    data = {
        "fullName": full_name or username.title(),
        "email": email or f"{username}@example.com",
        "username": username,
        "password": password,
    }
    return client.post(f"{API}/users/register", data=data, files=files)


def login(client: TestClient, username: str, password: str = DEFAULT_PASSWORD):
    return client.post(f"{API}/users/login", json={"username": username, "password": password})


def bearer(token: str) -> Dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def make_user(client: TestClient):
    """
    Factory registering and logging in a user.

    Returns a dict with the public user, its tokens and ready-made auth headers.
    """
    def _make(username: str = "alice", **kwargs: Any) -> Dict[str, Any]:
        response = register(client, username, **kwargs)
        assert response.status_code == 201, response.text
        tokens = login(client, username, kwargs.get("password", DEFAULT_PASSWORD)).json()["data"]
        return {
            "user": tokens["user"],
            "id": tokens["user"]["_id"],
            "access_token": tokens["accessToken"],
            "refresh_token": tokens["refreshToken"],
            "headers": bearer(tokens["accessToken"]),
        }

    return _make


@pytest.fixture
def publish_video(client: TestClient):
    """Factory publishing a video as the given user."""
    def _publish(owner: Dict[str, Any], title: str = "My first video", description: str = "A video") -> Dict[str, Any]:
        response = client.post(
            f"{API}/videos",
            data={"title": title, "description": description},
            files={
                "videoFile": ("clip.mp4", b"video-bytes", "video/mp4"),
                "thumbnail": ("thumb.png", b"thumb-bytes", "image/png"),
            },
            headers=owner["headers"],
        )
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _publish
