"""
Dashboard Controller
====================

FastAPI controller for the channel owner's dashboard.
"""
from fastapi import APIRouter, Depends

from videotube.api.v1.dependencies import get_current_user, get_dashboard_service
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.video_dto import DashboardStatsResponse
from videotube.application.services.dashboard_service import DashboardService
from videotube.domain.models.user import User

router = APIRouter(tags=["dashboard"])


@router.get(
    "/{username}",
    response_model=ApiResponse,
    summary="Get channel stats",
    description="Total views, subscribers, videos and likes. Only the channel owner may call it."
)
def get_channel_stats(
    username: str,
    current_user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse:
    stats = service.get_channel_stats(username, current_user)
    return ApiResponse(
        data=DashboardStatsResponse.model_validate(stats),
        message="Channel stats fetched successfully",
    )


@router.get("/{username}/videos", response_model=ApiResponse, summary="Get all channel videos")
def get_channel_videos(
    username: str,
    current_user: User = Depends(get_current_user),
    service: DashboardService = Depends(get_dashboard_service),
) -> ApiResponse:
    videos = service.get_channel_videos(username, current_user)
    return ApiResponse(data=videos, message="Channel videos fetched successfully")
