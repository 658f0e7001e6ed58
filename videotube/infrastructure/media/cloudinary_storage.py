"""
Cloudinary Media Storage
========================

Concrete implementation of MediaStorage on top of the Cloudinary SDK.
"""
import logging
from typing import BinaryIO, Optional

import cloudinary
import cloudinary.uploader
from cloudinary.exceptions import Error as CloudinaryError

from videotube.core.config import Settings, get_settings
from videotube.domain.models.media import MediaAsset
from videotube.domain.storage.media_storage import MediaStorage

logger = logging.getLogger(__name__)


class CloudinaryMediaStorage(MediaStorage):
    """
    Cloudinary implementation of MediaStorage.

    Uploads use resource_type="auto" so one call handles images and videos;
    the detected type is kept on the asset because destroy() needs it.
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Configure the SDK from settings."""
        self._settings = settings or get_settings()
        cloudinary.config(
            cloud_name=self._settings.cloudinary_cloud_name,
            api_key=self._settings.cloudinary_api_key,
            api_secret=self._settings.cloudinary_api_secret,
            secure=True,
        )
        self._folder = self._settings.cloudinary_folder

    def upload(self, file: BinaryIO, filename: str) -> Optional[MediaAsset]:
        """Upload a file and return its hosted reference."""
        if file is None:
            return None

        try:
            result = cloudinary.uploader.upload(
                file,
                resource_type="auto",
                folder=self._folder,
                filename_override=filename,
                use_filename=True,
            )
        except CloudinaryError as e:
            logger.error(f"Cloudinary upload failed for '{filename}': {e}")
            return None

        logger.info(f"Uploaded '{filename}' to Cloudinary as {result.get('public_id')}")
        return MediaAsset(
            url=result.get("secure_url") or result.get("url"),
            public_id=result.get("public_id"),
            resource_type=result.get("resource_type", "image"),
            duration=result.get("duration"),
        )

    def delete(self, public_id: str, resource_type: str = "image") -> bool:
        """Delete an asset; Cloudinary answers {"result": "ok"} on success."""
        if not public_id:
            return False

        try:
            result = cloudinary.uploader.destroy(public_id, resource_type=resource_type)
        except CloudinaryError as e:
            logger.error(f"Cloudinary delete failed for {public_id}: {e}")
            return False

        if result.get("result") != "ok":
            logger.warning(f"Cloudinary did not delete {public_id}: {result}")
            return False

        logger.info(f"Deleted {resource_type} {public_id} from Cloudinary")
        return True
