"""
Aggregation Pipelines
=====================

Builders for every joined view the API serves. Each function returns a
plain list of stages so the Mongo repositories stay thin and the
pipelines can be inspected without a database.

Stage helpers:
- owner_lookup(): join a user summary onto `owner`
- likes_stages() / subscriber_count_stages(): join a collection and expose its size as a counter
- viewer_flag(): `$in` test of the viewer id against a joined array
"""
import re
from typing import Any, Dict, List, Optional, Sequence

from bson import ObjectId

from videotube.core.config import get_settings
from videotube.domain.constants.common_fields import CommonFields
from videotube.domain.constants.user_fields import UserFields
from videotube.domain.constants.video_fields import VideoFields
from videotube.domain.constants.engagement_fields import (
    CommentFields,
    LikeFields,
    PlaylistFields,
    SubscriptionFields,
    TweetFields,
)

Pipeline = List[Dict[str, Any]]

OWNER_SUMMARY_FIELDS = (UserFields.USERNAME, UserFields.FULL_NAME, "avatar.url")
VIDEO_CARD_FIELDS = (
    "videoFile.url",
    "thumbnail.url",
    VideoFields.TITLE,
    VideoFields.DESCRIPTION,
    VideoFields.DURATION,
    VideoFields.VIEWS,
    VideoFields.IS_PUBLISHED,
    CommonFields.CREATED_AT,
)


# ---------------------------------------------------------------------------
# Stage helpers
# ---------------------------------------------------------------------------

def literal_regex(text: str) -> Dict[str, str]:
    """Case-insensitive regex matching `text` literally."""
    return {"$regex": re.escape(text), "$options": "i"}


def any_keyword_regex(keywords: Sequence[str]) -> Dict[str, str]:
    """Case-insensitive regex matching any of the literal keywords."""
    return {"$regex": "|".join(re.escape(k) for k in keywords), "$options": "i"}


def project(*fields: str, **extra: Any) -> Dict[str, Any]:
    projection: Dict[str, Any] = {field: 1 for field in fields}
    projection.update(extra)
    return {"$project": projection}


def viewer_flag(viewer_id: Optional[ObjectId], array_path: str) -> Dict[str, Any]:
    """True when the viewer's id appears in a joined array; literal False for anonymous viewers."""
    if viewer_id is None:
        return {"$literal": False}
    return {"$in": [viewer_id, array_path]}


def owner_lookup(
    fields: Sequence[str] = OWNER_SUMMARY_FIELDS,
    local_field: str = CommonFields.OWNER,
    as_field: str = CommonFields.OWNER,
    extra_stages: Optional[Pipeline] = None,
) -> Pipeline:
    """Join one user onto `as_field` and unwind it into an object."""
    users = get_settings().users_collection
    inner: Pipeline = list(extra_stages or [])
    inner.append(project(*fields))
    return [
        {
            "$lookup": {
                "from": users,
                "localField": local_field,
                "foreignField": CommonFields.MONGO_ID,
                "as": as_field,
                "pipeline": inner,
            }
        },
        {"$unwind": f"${as_field}"},
    ]


def subscriber_count_stages(viewer_id: Optional[ObjectId] = None, with_flag: bool = False) -> Pipeline:
    """Stages run against a users document: add subscribersCount (and isSubscribed)."""
    subscriptions = get_settings().subscriptions_collection
    fields: Dict[str, Any] = {"subscribersCount": {"$size": "$subscribers"}}
    if with_flag:
        fields["isSubscribed"] = viewer_flag(viewer_id, f"$subscribers.{SubscriptionFields.SUBSCRIBER}")
    return [
        {
            "$lookup": {
                "from": subscriptions,
                "localField": CommonFields.MONGO_ID,
                "foreignField": SubscriptionFields.CHANNEL,
                "as": "subscribers",
            }
        },
        {"$addFields": fields},
    ]


def likes_stages(target_field: str, viewer_id: Optional[ObjectId] = None) -> Pipeline:
    """Join likes pointing at this document and add likesCount/isLiked."""
    likes = get_settings().likes_collection
    return [
        {
            "$lookup": {
                "from": likes,
                "localField": CommonFields.MONGO_ID,
                "foreignField": target_field,
                "as": "likes",
            }
        },
        {
            "$addFields": {
                "likesCount": {"$size": "$likes"},
                "isLiked": viewer_flag(viewer_id, f"$likes.{LikeFields.LIKED_BY}"),
            }
        },
    ]


def paginate(page: int, limit: int) -> Pipeline:
    return [{"$skip": (page - 1) * limit}, {"$limit": limit}]


def video_card_stages(owner_fields: Sequence[str] = OWNER_SUMMARY_FIELDS) -> Pipeline:
    """Owner join plus the projection used for every video list item."""
    return owner_lookup(fields=owner_fields) + [project(*VIDEO_CARD_FIELDS, owner=1)]


# ---------------------------------------------------------------------------
# Users
# ---------------------------------------------------------------------------

def channel_profile_pipeline(username: str, viewer_id: Optional[ObjectId] = None) -> Pipeline:
    subscriptions = get_settings().subscriptions_collection
    return [
        {"$match": {UserFields.USERNAME: username.strip().lower()}},
        {
            "$lookup": {
                "from": subscriptions,
                "localField": CommonFields.MONGO_ID,
                "foreignField": SubscriptionFields.CHANNEL,
                "as": "subscribers",
            }
        },
        {
            "$lookup": {
                "from": subscriptions,
                "localField": CommonFields.MONGO_ID,
                "foreignField": SubscriptionFields.SUBSCRIBER,
                "as": "subscribedTo",
            }
        },
        {
            "$addFields": {
                "subscribersCount": {"$size": "$subscribers"},
                "subscribedToCount": {"$size": "$subscribedTo"},
                "isSubscribed": viewer_flag(viewer_id, f"$subscribers.{SubscriptionFields.SUBSCRIBER}"),
            }
        },
        project(
            UserFields.FULL_NAME,
            UserFields.USERNAME,
            UserFields.EMAIL,
            "avatar.url",
            "coverImage.url",
            "subscribersCount",
            "subscribedToCount",
            "isSubscribed",
            CommonFields.CREATED_AT,
        ),
    ]


def watch_history_pipeline(user_id: ObjectId) -> Pipeline:
    videos = get_settings().videos_collection
    return [
        {"$match": {CommonFields.MONGO_ID: user_id}},
        {
            "$lookup": {
                "from": videos,
                "localField": UserFields.WATCH_HISTORY,
                "foreignField": CommonFields.MONGO_ID,
                "as": UserFields.WATCH_HISTORY,
                "pipeline": video_card_stages(),
            }
        },
        project(UserFields.WATCH_HISTORY, **{CommonFields.MONGO_ID: 0}),
    ]


# ---------------------------------------------------------------------------
# Videos
# ---------------------------------------------------------------------------

def video_search_pipeline(
    query: str,
    page: int,
    limit: int,
    sort_by: str,
    ascending: bool,
    owner_id: Optional[ObjectId] = None,
) -> Pipeline:
    match: Dict[str, Any] = {VideoFields.IS_PUBLISHED: True}
    if query:
        match[VideoFields.TITLE] = literal_regex(query)
    if owner_id is not None:
        match[CommonFields.OWNER] = owner_id

    direction = 1 if ascending else -1
    return (
        [
            {"$match": match},
            # _id breaks ties so pages never overlap
            {"$sort": {sort_by: direction, CommonFields.MONGO_ID: direction}},
        ]
        + paginate(page, limit)
        + owner_lookup()
        + [
            project(
                "videoFile.url",
                "thumbnail.url",
                VideoFields.TITLE,
                VideoFields.DURATION,
                VideoFields.VIEWS,
                CommonFields.CREATED_AT,
                CommonFields.OWNER,
            )
        ]
    )


def video_detail_pipeline(video_id: ObjectId, viewer_id: Optional[ObjectId] = None) -> Pipeline:
    comments = get_settings().comments_collection
    return (
        [{"$match": {CommonFields.MONGO_ID: video_id}}]
        + likes_stages(LikeFields.VIDEO, viewer_id)
        + owner_lookup(
            fields=(UserFields.USERNAME, UserFields.FULL_NAME, "avatar.url", "subscribersCount", "isSubscribed"),
            extra_stages=subscriber_count_stages(viewer_id, with_flag=True),
        )
        + [
            {
                "$lookup": {
                    "from": comments,
                    "localField": CommonFields.MONGO_ID,
                    "foreignField": CommentFields.VIDEO,
                    "as": "comments",
                    "pipeline": [project(CommonFields.MONGO_ID)],
                }
            },
            {"$addFields": {"commentsCount": {"$size": "$comments"}}},
            project(
                "videoFile.url",
                "thumbnail.url",
                VideoFields.TITLE,
                VideoFields.DESCRIPTION,
                VideoFields.DURATION,
                VideoFields.VIEWS,
                VideoFields.IS_PUBLISHED,
                CommonFields.CREATED_AT,
                CommonFields.UPDATED_AT,
                "likesCount",
                "isLiked",
                "commentsCount",
                CommonFields.OWNER,
            ),
        ]
    )


def recommended_videos_pipeline(video_id: ObjectId, keywords: Sequence[str], limit: int = 10) -> Pipeline:
    pattern = any_keyword_regex(keywords)
    return [
        {
            "$match": {
                CommonFields.MONGO_ID: {"$ne": video_id},
                VideoFields.IS_PUBLISHED: True,
                "$or": [
                    {VideoFields.TITLE: pattern},
                    {VideoFields.DESCRIPTION: pattern},
                ],
            }
        },
        {"$sort": {VideoFields.VIEWS: -1, CommonFields.CREATED_AT: -1}},
        {"$limit": limit},
    ] + video_card_stages(owner_fields=(UserFields.FULL_NAME, "avatar.url"))


def published_videos_by_owner_pipeline(owner_id: ObjectId) -> Pipeline:
    return [
        {"$match": {CommonFields.OWNER: owner_id, VideoFields.IS_PUBLISHED: True}},
        {"$sort": {CommonFields.CREATED_AT: -1}},
    ] + video_card_stages(owner_fields=(UserFields.FULL_NAME, "avatar.url"))


def channel_videos_with_likes_pipeline(owner_id: ObjectId) -> Pipeline:
    return (
        [
            {"$match": {CommonFields.OWNER: owner_id}},
            {"$sort": {CommonFields.CREATED_AT: -1}},
        ]
        + likes_stages(LikeFields.VIDEO)
        + [project(*VIDEO_CARD_FIELDS, "likesCount")]
    )


def channel_stats_pipeline(owner_id: ObjectId) -> Pipeline:
    return [
        {"$match": {CommonFields.OWNER: owner_id}},
        {
            "$group": {
                CommonFields.MONGO_ID: None,
                "totalViews": {"$sum": f"${VideoFields.VIEWS}"},
                "totalVideos": {"$sum": 1},
            }
        },
    ]


# ---------------------------------------------------------------------------
# Comments
# ---------------------------------------------------------------------------

def video_comments_pipeline(
    video_id: ObjectId,
    page: int,
    limit: int,
    viewer_id: Optional[ObjectId] = None,
) -> Pipeline:
    return (
        [
            {"$match": {CommentFields.VIDEO: video_id}},
            {"$sort": {CommonFields.CREATED_AT: -1, CommonFields.MONGO_ID: -1}},
        ]
        + paginate(page, limit)
        + owner_lookup()
        + likes_stages(LikeFields.COMMENT, viewer_id)
        + [
            project(
                CommentFields.CONTENT,
                CommonFields.CREATED_AT,
                CommonFields.UPDATED_AT,
                CommonFields.OWNER,
                "likesCount",
                "isLiked",
            )
        ]
    )


# ---------------------------------------------------------------------------
# Likes
# ---------------------------------------------------------------------------

def liked_videos_pipeline(user_id: ObjectId) -> Pipeline:
    videos = get_settings().videos_collection
    return [
        {"$match": {LikeFields.LIKED_BY: user_id, LikeFields.VIDEO: {"$exists": True, "$ne": None}}},
        {"$sort": {CommonFields.CREATED_AT: -1}},
        {
            "$lookup": {
                "from": videos,
                "localField": LikeFields.VIDEO,
                "foreignField": CommonFields.MONGO_ID,
                "as": "likedVideo",
                "pipeline": video_card_stages(),
            }
        },
        {"$unwind": "$likedVideo"},
        {"$replaceRoot": {"newRoot": "$likedVideo"}},
    ]


def owner_video_likes_pipeline(owner_id: ObjectId) -> Pipeline:
    videos = get_settings().videos_collection
    return [
        {"$match": {LikeFields.VIDEO: {"$exists": True, "$ne": None}}},
        {
            "$lookup": {
                "from": videos,
                "localField": LikeFields.VIDEO,
                "foreignField": CommonFields.MONGO_ID,
                "as": "videoDetails",
            }
        },
        {"$unwind": "$videoDetails"},
        {"$match": {"videoDetails.owner": owner_id}},
        {"$count": "totalLikes"},
    ]


# ---------------------------------------------------------------------------
# Subscriptions
# ---------------------------------------------------------------------------

def channel_subscribers_pipeline(channel_id: ObjectId) -> Pipeline:
    return (
        [
            {"$match": {SubscriptionFields.CHANNEL: channel_id}},
            {"$sort": {CommonFields.CREATED_AT: -1}},
        ]
        + owner_lookup(local_field=SubscriptionFields.SUBSCRIBER, as_field="subscriberUser")
        + [{"$replaceRoot": {"newRoot": "$subscriberUser"}}]
    )


def subscribed_channels_pipeline(subscriber_id: ObjectId) -> Pipeline:
    return (
        [
            {"$match": {SubscriptionFields.SUBSCRIBER: subscriber_id}},
            {"$sort": {CommonFields.CREATED_AT: -1}},
        ]
        + owner_lookup(
            fields=OWNER_SUMMARY_FIELDS + ("subscribersCount",),
            local_field=SubscriptionFields.CHANNEL,
            as_field="channelUser",
            extra_stages=subscriber_count_stages(),
        )
        + [{"$replaceRoot": {"newRoot": "$channelUser"}}]
    )


# ---------------------------------------------------------------------------
# Playlists
# ---------------------------------------------------------------------------

def user_playlists_pipeline(owner_id: ObjectId) -> Pipeline:
    videos = get_settings().videos_collection
    return [
        {"$match": {CommonFields.OWNER: owner_id}},
        {"$sort": {CommonFields.CREATED_AT: -1}},
        {
            "$lookup": {
                "from": videos,
                "localField": PlaylistFields.VIDEOS,
                "foreignField": CommonFields.MONGO_ID,
                "as": PlaylistFields.VIDEOS,
                "pipeline": [project("thumbnail.url")],
            }
        },
        {"$addFields": {"totalVideos": {"$size": f"${PlaylistFields.VIDEOS}"}}},
        project(
            PlaylistFields.NAME,
            PlaylistFields.DESCRIPTION,
            PlaylistFields.VIDEOS,
            "totalVideos",
            CommonFields.OWNER,
            CommonFields.CREATED_AT,
            CommonFields.UPDATED_AT,
        ),
    ]


def playlist_detail_pipeline(playlist_id: ObjectId) -> Pipeline:
    videos = get_settings().videos_collection
    return (
        [{"$match": {CommonFields.MONGO_ID: playlist_id}}]
        + owner_lookup(
            fields=(UserFields.USERNAME, UserFields.FULL_NAME, "avatar.url", "subscribersCount"),
            extra_stages=subscriber_count_stages(),
        )
        + [
            {
                "$lookup": {
                    "from": videos,
                    "localField": PlaylistFields.VIDEOS,
                    "foreignField": CommonFields.MONGO_ID,
                    "as": PlaylistFields.VIDEOS,
                    "pipeline": [{"$match": {VideoFields.IS_PUBLISHED: True}}]
                    + video_card_stages(owner_fields=(UserFields.FULL_NAME, "avatar.url")),
                }
            },
            {
                "$addFields": {
                    "totalVideos": {"$size": f"${PlaylistFields.VIDEOS}"},
                    "totalViews": {"$sum": f"${PlaylistFields.VIDEOS}.{VideoFields.VIEWS}"},
                }
            },
            project(
                PlaylistFields.NAME,
                PlaylistFields.DESCRIPTION,
                PlaylistFields.VIDEOS,
                "totalVideos",
                "totalViews",
                CommonFields.OWNER,
                CommonFields.CREATED_AT,
                CommonFields.UPDATED_AT,
            ),
        ]
    )


# ---------------------------------------------------------------------------
# Tweets
# ---------------------------------------------------------------------------

def user_tweets_pipeline(owner_id: ObjectId, viewer_id: Optional[ObjectId] = None) -> Pipeline:
    return (
        [
            {"$match": {CommonFields.OWNER: owner_id}},
            {"$sort": {CommonFields.CREATED_AT: -1}},
        ]
        + likes_stages(LikeFields.TWEET, viewer_id)
        + owner_lookup()
        + [
            project(
                TweetFields.CONTENT,
                "likesCount",
                "isLiked",
                CommonFields.OWNER,
                CommonFields.CREATED_AT,
                CommonFields.UPDATED_AT,
            )
        ]
    )
