"""
Dependency Container
====================

FastAPI dependencies for the v1 controllers.
Services come from the DI container; the current user is resolved from the
Authorization header or the accessToken cookie.
"""
from typing import Optional

from fastapi import Depends, Request, Response, UploadFile

from videotube.application.services.auth_service import AuthService
from videotube.application.services.comment_service import CommentService
from videotube.application.services.dashboard_service import DashboardService
from videotube.application.services.like_service import LikeService
from videotube.application.services.playlist_service import PlaylistService
from videotube.application.services.subscription_service import SubscriptionService
from videotube.application.services.tweet_service import TweetService
from videotube.application.services.user_service import UserService
from videotube.application.services.video_service import VideoService
from videotube.core.config import get_settings
from videotube.di.container import get_container
from videotube.domain.exceptions import UnauthorizedError
from videotube.domain.models.media import FileUpload
from videotube.domain.models.user import User

ACCESS_TOKEN_COOKIE = "accessToken"
REFRESH_TOKEN_COOKIE = "refreshToken"


def get_auth_service() -> AuthService:
    """
    Get auth service instance (singleton).

    Returns:
        AuthService instance
    """
    return get_container().get(AuthService)


def get_user_service() -> UserService:
    return get_container().get(UserService)


def get_video_service() -> VideoService:
    return get_container().get(VideoService)


def get_dashboard_service() -> DashboardService:
    return get_container().get(DashboardService)


def get_comment_service() -> CommentService:
    return get_container().get(CommentService)


def get_like_service() -> LikeService:
    return get_container().get(LikeService)


def get_subscription_service() -> SubscriptionService:
    return get_container().get(SubscriptionService)


def get_playlist_service() -> PlaylistService:
    return get_container().get(PlaylistService)


def get_tweet_service() -> TweetService:
    return get_container().get(TweetService)


def extract_access_token(request: Request) -> Optional[str]:
    """Bearer token from the Authorization header, else the accessToken cookie."""
    authorization = request.headers.get("Authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer" and token.strip():
        return token.strip()
    return request.cookies.get(ACCESS_TOKEN_COOKIE)


def get_current_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Require an authenticated user.

    Raises:
        UnauthorizedError: No token, invalid token, or the user is gone
    """
    return auth_service.authenticate(extract_access_token(request))


def get_optional_user(
    request: Request,
    auth_service: AuthService = Depends(get_auth_service),
) -> Optional[User]:
    """The authenticated user, or None for anonymous or invalid credentials."""
    token = extract_access_token(request)
    if not token:
        return None
    try:
        return auth_service.authenticate(token)
    except UnauthorizedError:
        return None


def to_file_upload(upload: Optional[UploadFile]) -> Optional[FileUpload]:
    """Convert a multipart file to the domain upload; empty parts count as missing."""
    if upload is None or not upload.filename:
        return None
    return FileUpload(file=upload.file, filename=upload.filename, content_type=upload.content_type)


def set_auth_cookies(response: Response, access_token: str, refresh_token: Optional[str] = None) -> None:
    settings = get_settings()
    response.set_cookie(
        ACCESS_TOKEN_COOKIE,
        access_token,
        max_age=settings.access_token_expiry_minutes * 60,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )
    if refresh_token is not None:
        response.set_cookie(
            REFRESH_TOKEN_COOKIE,
            refresh_token,
            max_age=settings.refresh_token_expiry_days * 24 * 60 * 60,
            httponly=True,
            secure=settings.cookie_secure,
            samesite=settings.cookie_samesite,
        )


def clear_auth_cookies(response: Response) -> None:
    settings = get_settings()
    for name in (ACCESS_TOKEN_COOKIE, REFRESH_TOKEN_COOKIE):
        response.delete_cookie(
            name,
            httponly=True,
            secure=settings.cookie_secure,
            samesite=settings.cookie_samesite,
        )
