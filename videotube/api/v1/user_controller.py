"""
User Controller
===============

FastAPI controller for authentication, account and channel endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Request, Response, UploadFile, status

from videotube.api.v1.dependencies import (
    REFRESH_TOKEN_COOKIE,
    clear_auth_cookies,
    get_auth_service,
    get_current_user,
    get_optional_user,
    get_user_service,
    set_auth_cookies,
    to_file_upload,
)
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.user_dto import (
    AccessTokenResponse,
    ChangePasswordRequest,
    LoginRequest,
    LoginResponse,
    RefreshTokenRequest,
    UserResponse,
)
from videotube.application.services.auth_service import AuthService
from videotube.application.services.user_service import UserService
from videotube.domain.models.user import User

router = APIRouter(tags=["users"])


@router.post(
    "/register",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
    description="""
    Create an account from a multipart form.

    The avatar is required and uploaded to the media host together with the
    optional cover image. Username and email must be unique.
    """
)
def register_user(
    full_name: Optional[str] = Form(None, alias="fullName"),
    email: Optional[str] = Form(None),
    username: Optional[str] = Form(None),
    password: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse:
    """Register a user."""
    user = service.register(
        full_name=full_name or "",
        email=email or "",
        username=username or "",
        password=password or "",
        avatar=to_file_upload(avatar),
        cover_image=to_file_upload(cover_image),
    )
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=UserResponse.from_entity(user),
        message="User registered successfully",
    )


@router.post(
    "/login",
    response_model=ApiResponse,
    summary="Log in",
    description="Log in with username or email. Sets the accessToken and refreshToken cookies."
)
def login_user(
    request: LoginRequest,
    response: Response,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse:
    """Log in and issue tokens."""
    user, access_token, refresh_token = service.login(
        password=request.password,
        username=request.username,
        email=request.email,
    )
    set_auth_cookies(response, access_token, refresh_token)
    return ApiResponse(
        data=LoginResponse(
            user=UserResponse.from_entity(user),
            access_token=access_token,
            refresh_token=refresh_token,
        ),
        message="User logged in successfully",
    )


@router.post("/logout", response_model=ApiResponse, summary="Log out")
def logout_user(
    response: Response,
    current_user: User = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse:
    """Revoke the refresh token and clear both cookies."""
    service.logout(current_user.id)
    clear_auth_cookies(response)
    return ApiResponse(data={}, message="User logged out")


@router.post(
    "/refresh-token",
    response_model=ApiResponse,
    summary="Refresh the access token",
    description="The refresh token is read from the refreshToken cookie, or from the JSON body."
)
def refresh_access_token(
    http_request: Request,
    response: Response,
    body: Optional[RefreshTokenRequest] = None,
    service: AuthService = Depends(get_auth_service),
) -> ApiResponse:
    """Issue a new access token."""
    incoming = http_request.cookies.get(REFRESH_TOKEN_COOKIE) or (body.refresh_token if body else None)
    access_token = service.refresh_access_token(incoming)
    set_auth_cookies(response, access_token)
    return ApiResponse(
        data=AccessTokenResponse(access_token=access_token),
        message="Access token refreshed",
    )


@router.post("/change-password", response_model=ApiResponse, summary="Change password")
def change_password(
    request: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    service.change_password(current_user, request.old_password, request.new_password)
    return ApiResponse(data={}, message="Password changed successfully")


@router.get("/current-user", response_model=ApiResponse, summary="Get the current user")
def get_current_user_profile(current_user: User = Depends(get_current_user)) -> ApiResponse:
    return ApiResponse(
        data=UserResponse.from_entity(current_user),
        message="Current user fetched successfully",
    )


@router.patch(
    "/update-account",
    response_model=ApiResponse,
    summary="Update account details",
    description="""
    Multipart form; every field is optional.

    Blank text fields keep their old value. A new avatar or cover image
    replaces the old one, which is then deleted from the media host.
    """
)
def update_account(
    full_name: Optional[str] = Form(None, alias="fullName"),
    email: Optional[str] = Form(None),
    username: Optional[str] = Form(None),
    avatar: Optional[UploadFile] = File(None),
    cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    user = service.update_account(
        user_id=current_user.id,
        full_name=full_name,
        email=email,
        username=username,
        avatar=to_file_upload(avatar),
        cover_image=to_file_upload(cover_image),
    )
    return ApiResponse(
        data=UserResponse.from_entity(user),
        message="Account details updated successfully",
    )


@router.get("/c/{username}", response_model=ApiResponse, summary="Get a channel profile")
def get_channel_profile(
    username: str,
    viewer: Optional[User] = Depends(get_optional_user),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    """Channel page with subscriber counters; isSubscribed reflects the viewer."""
    profile = service.get_channel_profile(username, viewer.id if viewer else None)
    return ApiResponse(data=profile, message="Channel fetched successfully")


@router.get("/c/{username}/videos", response_model=ApiResponse, summary="Get a channel's videos")
def get_channel_videos(
    username: str,
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    videos = service.get_channel_videos(username)
    return ApiResponse(data=videos, message="Channel videos fetched successfully")


@router.get("/history", response_model=ApiResponse, summary="Get watch history")
def get_watch_history(
    current_user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
) -> ApiResponse:
    history = service.get_watch_history(current_user.id)
    return ApiResponse(data=history, message="Watch history fetched successfully")
