"""
Like Controller
===============

FastAPI controller for like toggles and the liked-videos list.
"""
from fastapi import APIRouter, Depends

from videotube.api.v1.dependencies import get_current_user, get_like_service
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.engagement_dto import LikeToggleResponse
from videotube.application.services.like_service import LikeService
from videotube.domain.models.like import LikeTarget
from videotube.domain.models.user import User

router = APIRouter(tags=["likes"])


def _toggle(service: LikeService, target: LikeTarget, target_id: str, user: User) -> ApiResponse:
    result = service.toggle_like(target, target_id, user.id)
    message = "Liked successfully" if result["isLiked"] else "Like removed successfully"
    return ApiResponse(data=LikeToggleResponse.model_validate(result), message=message)


@router.post("/toggle/v/{video_id}", response_model=ApiResponse, summary="Toggle a video like")
def toggle_video_like(
    video_id: str,
    current_user: User = Depends(get_current_user),
    service: LikeService = Depends(get_like_service),
) -> ApiResponse:
    return _toggle(service, LikeTarget.VIDEO, video_id, current_user)


@router.post("/toggle/c/{comment_id}", response_model=ApiResponse, summary="Toggle a comment like")
def toggle_comment_like(
    comment_id: str,
    current_user: User = Depends(get_current_user),
    service: LikeService = Depends(get_like_service),
) -> ApiResponse:
    return _toggle(service, LikeTarget.COMMENT, comment_id, current_user)


@router.post("/toggle/t/{tweet_id}", response_model=ApiResponse, summary="Toggle a tweet like")
def toggle_tweet_like(
    tweet_id: str,
    current_user: User = Depends(get_current_user),
    service: LikeService = Depends(get_like_service),
) -> ApiResponse:
    return _toggle(service, LikeTarget.TWEET, tweet_id, current_user)


@router.get("/videos", response_model=ApiResponse, summary="Get liked videos")
def get_liked_videos(
    current_user: User = Depends(get_current_user),
    service: LikeService = Depends(get_like_service),
) -> ApiResponse:
    videos = service.get_liked_videos(current_user.id)
    return ApiResponse(data=videos, message="Liked videos fetched successfully")
