"""
Video Controller
================

FastAPI controller for video endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from videotube.api.v1.dependencies import (
    get_current_user,
    get_optional_user,
    get_video_service,
    to_file_upload,
)
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.video_dto import VideoResponse
from videotube.application.services.video_service import VideoService
from videotube.domain.models.user import User

router = APIRouter(tags=["videos"])


@router.get(
    "",
    response_model=ApiResponse,
    summary="List published videos",
    description="""
    Search published videos by title (case-insensitive, literal match).

    sortBy is one of createdAt, views, duration, title; sortType is asc or desc.
    """
)
def list_videos(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    query: str = Query(""),
    sort_by: str = Query("createdAt", alias="sortBy"),
    sort_type: str = Query("desc", alias="sortType"),
    user_id: Optional[str] = Query(None, alias="userId"),
    service: VideoService = Depends(get_video_service),
) -> ApiResponse:
    videos = service.list_videos(
        page=page,
        limit=limit,
        query=query,
        sort_by=sort_by,
        sort_type=sort_type,
        user_id=user_id,
    )
    return ApiResponse(data=videos, message="Videos fetched successfully")


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Publish a video",
    description="Multipart upload of videoFile and thumbnail; the duration comes from the media host."
)
def publish_video(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    video_file: Optional[UploadFile] = File(None, alias="videoFile"),
    thumbnail: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
) -> ApiResponse:
    video = service.publish_video(
        owner_id=current_user.id,
        title=title,
        description=description,
        video_file=to_file_upload(video_file),
        thumbnail=to_file_upload(thumbnail),
    )
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=VideoResponse.from_entity(video),
        message="Video published successfully",
    )


@router.get("/recommended/{video_id}", response_model=ApiResponse, summary="Get recommended videos")
def get_recommended_videos(
    video_id: str,
    service: VideoService = Depends(get_video_service),
) -> ApiResponse:
    videos = service.get_recommended(video_id)
    return ApiResponse(data=videos, message="Recommended videos fetched successfully")


@router.patch("/toggle/publish/{video_id}", response_model=ApiResponse, summary="Toggle publish status")
def toggle_publish_status(
    video_id: str,
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
) -> ApiResponse:
    video = service.toggle_publish(video_id, current_user.id)
    return ApiResponse(
        data=VideoResponse.from_entity(video),
        message="Video publish status toggled successfully",
    )


@router.get(
    "/{video_id}",
    response_model=ApiResponse,
    summary="Get a video",
    description="Detail view with likes, comments count and owner. Counts a view and records watch history."
)
def get_video(
    video_id: str,
    viewer: Optional[User] = Depends(get_optional_user),
    service: VideoService = Depends(get_video_service),
) -> ApiResponse:
    video = service.get_video(video_id, viewer.id if viewer else None)
    return ApiResponse(data=video, message="Video fetched successfully")


@router.patch("/{video_id}", response_model=ApiResponse, summary="Update a video")
def update_video(
    video_id: str,
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    thumbnail: Optional[UploadFile] = File(None),
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
) -> ApiResponse:
    video = service.update_video(
        video_id=video_id,
        user_id=current_user.id,
        title=title,
        description=description,
        thumbnail=to_file_upload(thumbnail),
    )
    return ApiResponse(
        data=VideoResponse.from_entity(video),
        message="Video updated successfully",
    )


@router.delete(
    "/{video_id}",
    response_model=ApiResponse,
    summary="Delete a video",
    description="Deletes the video, its likes, its comments (and their likes), its playlist entries and its files."
)
def delete_video(
    video_id: str,
    current_user: User = Depends(get_current_user),
    service: VideoService = Depends(get_video_service),
) -> ApiResponse:
    service.delete_video(video_id, current_user.id)
    return ApiResponse(data={}, message="Video deleted successfully")
