"""Constants for Video model field names"""


class VideoFields:
    """Field name constants for Video model"""
    VIDEO_FILE = "videoFile"
    THUMBNAIL = "thumbnail"
    TITLE = "title"
    DESCRIPTION = "description"
    DURATION = "duration"
    VIEWS = "views"
    IS_PUBLISHED = "isPublished"

    # Columns the public listing may be sorted by
    SORTABLE = ("createdAt", "views", "duration", "title")
