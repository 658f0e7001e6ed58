"""
Comment Controller
==================

FastAPI controller for video comments.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from videotube.api.v1.dependencies import get_comment_service, get_current_user, get_optional_user
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.engagement_dto import CommentResponse, ContentRequest
from videotube.application.services.comment_service import CommentService
from videotube.domain.models.user import User

router = APIRouter(tags=["comments"])


@router.get("/{video_id}", response_model=ApiResponse, summary="List a video's comments")
def get_video_comments(
    video_id: str,
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    viewer: Optional[User] = Depends(get_optional_user),
    service: CommentService = Depends(get_comment_service),
) -> ApiResponse:
    result = service.list_comments(video_id, page, limit, viewer.id if viewer else None)
    return ApiResponse(data=result, message="Comments fetched successfully")


@router.post(
    "/{video_id}",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Comment on a video",
)
def add_comment(
    video_id: str,
    request: ContentRequest,
    current_user: User = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
) -> ApiResponse:
    comment = service.add_comment(video_id, request.content, current_user.id)
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=CommentResponse.from_entity(comment),
        message="Comment added successfully",
    )


@router.patch("/c/{comment_id}", response_model=ApiResponse, summary="Edit a comment")
def update_comment(
    comment_id: str,
    request: ContentRequest,
    current_user: User = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
) -> ApiResponse:
    comment = service.update_comment(comment_id, request.content, current_user.id)
    return ApiResponse(
        data=CommentResponse.from_entity(comment),
        message="Comment updated successfully",
    )


@router.delete("/c/{comment_id}", response_model=ApiResponse, summary="Delete a comment")
def delete_comment(
    comment_id: str,
    current_user: User = Depends(get_current_user),
    service: CommentService = Depends(get_comment_service),
) -> ApiResponse:
    service.delete_comment(comment_id, current_user.id)
    return ApiResponse(data={}, message="Comment deleted successfully")
