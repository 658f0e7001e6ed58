"""Constants for Comment, Like, Subscription, Playlist and Tweet field names"""


class CommentFields:
    CONTENT = "content"
    VIDEO = "video"


class LikeFields:
    LIKED_BY = "likedBy"
    VIDEO = "video"
    COMMENT = "comment"
    TWEET = "tweet"


class SubscriptionFields:
    SUBSCRIBER = "subscriber"
    CHANNEL = "channel"


class PlaylistFields:
    NAME = "name"
    DESCRIPTION = "description"
    VIDEOS = "videos"


class TweetFields:
    CONTENT = "content"
