"""
Media Asset Model
=================

A file hosted on the external media service, referenced by its public id.
"""
from dataclasses import dataclass
from typing import BinaryIO, Optional


@dataclass
class MediaAsset:
    """
    Hosted media reference embedded in users and videos.

    public_id is what the media host needs to delete the asset later;
    resource_type is "image" or "video" (the host keeps them in separate namespaces).
    """
    url: str
    public_id: str
    resource_type: str = "image"
    duration: Optional[float] = None


@dataclass
class FileUpload:
    """A file received from a client, before it is sent to the media host."""
    file: BinaryIO
    filename: str
    content_type: Optional[str] = None
