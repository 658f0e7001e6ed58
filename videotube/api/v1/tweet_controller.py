"""
Tweet Controller
================

FastAPI controller for channel tweets.
"""
from typing import Optional

from fastapi import APIRouter, Depends, status

from videotube.api.v1.dependencies import get_current_user, get_optional_user, get_tweet_service
from videotube.application.dto.common_dto import ApiResponse
from videotube.application.dto.engagement_dto import ContentRequest, TweetResponse
from videotube.application.services.tweet_service import TweetService
from videotube.domain.models.user import User

router = APIRouter(tags=["tweets"])


@router.post(
    "",
    response_model=ApiResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Post a tweet",
)
def create_tweet(
    request: ContentRequest,
    current_user: User = Depends(get_current_user),
    service: TweetService = Depends(get_tweet_service),
) -> ApiResponse:
    tweet = service.create_tweet(request.content, current_user.id)
    return ApiResponse(
        status_code=status.HTTP_201_CREATED,
        data=TweetResponse.from_entity(tweet),
        message="Tweet created successfully",
    )


@router.get("/user/{username}", response_model=ApiResponse, summary="List a user's tweets")
def get_user_tweets(
    username: str,
    viewer: Optional[User] = Depends(get_optional_user),
    service: TweetService = Depends(get_tweet_service),
) -> ApiResponse:
    tweets = service.get_user_tweets(username, viewer.id if viewer else None)
    return ApiResponse(data=tweets, message="Tweets fetched successfully")


@router.patch("/{tweet_id}", response_model=ApiResponse, summary="Edit a tweet")
def update_tweet(
    tweet_id: str,
    request: ContentRequest,
    current_user: User = Depends(get_current_user),
    service: TweetService = Depends(get_tweet_service),
) -> ApiResponse:
    tweet = service.update_tweet(tweet_id, request.content, current_user.id)
    return ApiResponse(
        data=TweetResponse.from_entity(tweet),
        message="Tweet updated successfully",
    )


@router.delete("/{tweet_id}", response_model=ApiResponse, summary="Delete a tweet")
def delete_tweet(
    tweet_id: str,
    current_user: User = Depends(get_current_user),
    service: TweetService = Depends(get_tweet_service),
) -> ApiResponse:
    service.delete_tweet(tweet_id, current_user.id)
    return ApiResponse(data=None, message="Tweet deleted successfully")
