"""
Playlist Controller
===================

FastAPI controller for playlists.
"""
from fastapi import APIRouter, Depends, status

from videotube.api.v1.dependencies import get_current_user, get_playlist_service
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.engagement_dto import PlaylistRequest, PlaylistResponse
from videotube.application.services.playlist_service import PlaylistService
from videotube.domain.models.user import User

router = APIRouter(tags=["playlists"])


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a playlist",
)
def create_playlist(
    request: PlaylistRequest,
    current_user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service),
) -> ApiResponse:
    playlist = service.create_playlist(request.name, request.description, current_user.id)
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=PlaylistResponse.from_entity(playlist),
        message="Playlist created successfully",
    )


@router.get("/user/{username}", response_model=ApiResponse, summary="List a user's playlists")
def get_user_playlists(
    username: str,
    service: PlaylistService = Depends(get_playlist_service),
) -> ApiResponse:
    playlists = service.get_user_playlists(username)
    return ApiResponse(data=playlists, message="Playlists fetched successfully")


@router.patch("/add/{video_id}/{playlist_id}", response_model=ApiResponse, summary="Add a video to a playlist")
def add_video_to_playlist(
    video_id: str,
    playlist_id: str,
    current_user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service),
) -> ApiResponse:
    playlist = service.add_video(video_id, playlist_id, current_user.id)
    return ApiResponse(
        data=PlaylistResponse.from_entity(playlist),
        message="Video added to playlist successfully",
    )


@router.patch(
    "/remove/{video_id}/{playlist_id}",
    response_model=ApiResponse,
    summary="Remove a video from a playlist",
)
def remove_video_from_playlist(
    video_id: str,
    playlist_id: str,
    current_user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service),
) -> ApiResponse:
    playlist = service.remove_video(video_id, playlist_id, current_user.id)
    return ApiResponse(
        data=PlaylistResponse.from_entity(playlist),
        message="Video removed from playlist successfully",
    )


@router.get("/{playlist_id}", response_model=ApiResponse, summary="Get a playlist")
def get_playlist(
    playlist_id: str,
    service: PlaylistService = Depends(get_playlist_service),
) -> ApiResponse:
    playlist = service.get_playlist(playlist_id)
    return ApiResponse(data=playlist, message="Playlist fetched successfully")


@router.patch("/{playlist_id}", response_model=ApiResponse, summary="Rename a playlist")
def update_playlist(
    playlist_id: str,
    request: PlaylistRequest,
    current_user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service),
) -> ApiResponse:
    playlist = service.update_playlist(playlist_id, current_user.id, request.name, request.description)
    return ApiResponse(
        data=PlaylistResponse.from_entity(playlist),
        message="Playlist updated successfully",
    )


@router.delete("/{playlist_id}", response_model=ApiResponse, summary="Delete a playlist")
def delete_playlist(
    playlist_id: str,
    current_user: User = Depends(get_current_user),
    service: PlaylistService = Depends(get_playlist_service),
) -> ApiResponse:
    service.delete_playlist(playlist_id, current_user.id)
    return ApiResponse(data={}, message="Playlist deleted successfully")
