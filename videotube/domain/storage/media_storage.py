"""
Media Storage Interface
=======================

Abstract contract for the external media host that keeps avatars,
cover images, thumbnails and video files.
"""
from abc import ABC, abstractmethod
from typing import BinaryIO, Optional

from videotube.domain.models.media import MediaAsset


class MediaStorage(ABC):
    """
    Abstract media host client.

    Implementations report failures through their return values (None/False)
    and leave the choice of HTTP error to the calling service.
    """

    @abstractmethod
    def upload(self, file: BinaryIO, filename: str) -> Optional[MediaAsset]:
        """
        Upload a file, letting the host detect its resource type.

        Args:
            file: Readable binary stream
            filename: Original client filename (used for logging and naming)

        Returns:
            The hosted asset, or None if the upload failed
        """
        pass

    @abstractmethod
    def delete(self, public_id: str, resource_type: str = "image") -> bool:
        """
        Delete a hosted asset.

        Args:
            public_id: Host identifier of the asset
            resource_type: "image" or "video"

        Returns:
            True if the host confirmed the deletion
        """
        pass
