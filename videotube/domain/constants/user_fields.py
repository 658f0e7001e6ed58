"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    USERNAME = "username"
    EMAIL = "email"
    FULL_NAME = "fullName"
    AVATAR = "avatar"
    COVER_IMAGE = "coverImage"
    PASSWORD = "password"
    WATCH_HISTORY = "watchHistory"
    REFRESH_TOKEN = "refreshToken"
