"""
Subscription Controller
=======================

FastAPI controller for channel subscriptions.
"""
from fastapi import APIRouter, Depends

from videotube.api.v1.dependencies import get_current_user, get_subscription_service
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.engagement_dto import SubscriptionToggleResponse
from videotube.application.services.subscription_service import SubscriptionService
from videotube.domain.models.user import User

router = APIRouter(tags=["subscriptions"])


@router.post("/c/{channel_id}", response_model=ApiResponse, summary="Toggle a subscription")
def toggle_subscription(
    channel_id: str,
    current_user: User = Depends(get_current_user),
    service: SubscriptionService = Depends(get_subscription_service),
) -> ApiResponse:
    result = service.toggle_subscription(channel_id, current_user.id)
    message = "Subscribed successfully" if result["isSubscribed"] else "Unsubscribed successfully"
    return ApiResponse(data=SubscriptionToggleResponse.model_validate(result), message=message)


@router.get("/c/{channel_id}", response_model=ApiResponse, summary="List a channel's subscribers")
def get_channel_subscribers(
    channel_id: str,
    service: SubscriptionService = Depends(get_subscription_service),
) -> ApiResponse:
    result = service.get_channel_subscribers(channel_id)
    return ApiResponse(data=result, message="Subscribers fetched successfully")


@router.get("/u/{username}", response_model=ApiResponse, summary="List the channels a user follows")
def get_subscribed_channels(
    username: str,
    service: SubscriptionService = Depends(get_subscription_service),
) -> ApiResponse:
    channels = service.get_subscribed_channels(username)
    return ApiResponse(data=channels, message="Subscribed channels fetched successfully")
