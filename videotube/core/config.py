
# Standard library imports
import os
from typing import Final, List, Optional
from dotenv import load_dotenv


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Load environment variables from .env file
        load_dotenv()

        # Timezone Configuration
        # Default to UTC, but can be set via TIMEZONE env var (e.g., "UTC", "America/New_York", "Asia/Kolkata")
        self.timezone: Final[str] = os.getenv("TIMEZONE", "UTC")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("DB_NAME", "videotube")

        # CORS (comma separated list of origins)
        self.cors_origin: Final[str] = os.getenv("CORS_ORIGIN", "*")

        # Token Configuration
        self.access_token_secret: Final[str] = os.getenv("ACCESS_TOKEN_SECRET", "change-me-access")
        self.access_token_expiry_minutes: Final[int] = int(
            os.getenv("ACCESS_TOKEN_EXPIRY_MINUTES", "15")
        )
        self.refresh_token_secret: Final[str] = os.getenv("REFRESH_TOKEN_SECRET", "change-me-refresh")
        self.refresh_token_expiry_days: Final[int] = int(
            os.getenv("REFRESH_TOKEN_EXPIRY_DAYS", "7")
        )
        self.jwt_algorithm: Final[str] = os.getenv("JWT_ALGORITHM", "HS256")
        self.bcrypt_rounds: Final[int] = int(os.getenv("BCRYPT_ROUNDS", "12"))

        # Cookie Configuration
        self.cookie_secure: Final[bool] = _env_bool("COOKIE_SECURE", "true")
        self.cookie_samesite: Final[str] = os.getenv("COOKIE_SAMESITE", "none")

        # Cloudinary Configuration (media host)
        self.cloudinary_cloud_name: Final[Optional[str]] = os.getenv("CLOUDINARY_CLOUD_NAME")
        self.cloudinary_api_key: Final[Optional[str]] = os.getenv("CLOUDINARY_API_KEY")
        self.cloudinary_api_secret: Final[Optional[str]] = os.getenv("CLOUDINARY_API_SECRET")
        self.cloudinary_folder: Final[str] = os.getenv("CLOUDINARY_FOLDER", "videotube")

        # Collection Names
        self.users_collection: Final[str] = os.getenv("USERS_COLLECTION", "users")
        self.videos_collection: Final[str] = os.getenv("VIDEOS_COLLECTION", "videos")
        self.comments_collection: Final[str] = os.getenv("COMMENTS_COLLECTION", "comments")
        self.likes_collection: Final[str] = os.getenv("LIKES_COLLECTION", "likes")
        self.subscriptions_collection: Final[str] = os.getenv("SUBSCRIPTIONS_COLLECTION", "subscriptions")
        self.playlists_collection: Final[str] = os.getenv("PLAYLISTS_COLLECTION", "playlists")
        self.tweets_collection: Final[str] = os.getenv("TWEETS_COLLECTION", "tweets")

    @property
    def allowed_origins(self) -> List[str]:
        """Parse CORS_ORIGIN comma-separated string into list."""
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
