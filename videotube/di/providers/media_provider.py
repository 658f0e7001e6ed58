from typing import TYPE_CHECKING

from ...domain.storage.media_storage import MediaStorage
from ...infrastructure.media.cloudinary_storage import CloudinaryMediaStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MediaProvider:
    """Media host provider - registers the MediaStorage implementation"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(MediaStorage, CloudinaryMediaStorage())
