"""
Document Helpers
================

Conversions between Mongo documents and domain values shared by every
Mongo repository.
"""
from typing import Any, Dict, List, Optional

from bson import ObjectId

from videotube.domain.constants.common_fields import MediaFields
from videotube.domain.models.media import MediaAsset


def to_object_id(value: Optional[str]) -> Optional[ObjectId]:
    """Convert a hex id to ObjectId (None stays None)."""
    if value is None:
        return None
    if isinstance(value, ObjectId):
        return value
    return ObjectId(value)


def to_object_ids(values: List[str]) -> List[ObjectId]:
    return [to_object_id(v) for v in values]


def id_str(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


def serialize_document(value: Any) -> Any:
    """Recursively turn ObjectIds into hex strings so views are JSON ready."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: serialize_document(v) for k, v in value.items()}
    if isinstance(value, list):
        return [serialize_document(v) for v in value]
    return value


def serialize_documents(docs) -> List[Dict[str, Any]]:
    return [serialize_document(doc) for doc in docs]


def media_to_document(asset: Optional[MediaAsset]) -> Optional[Dict[str, Any]]:
    if asset is None:
        return None
    return {
        MediaFields.URL: asset.url,
        MediaFields.PUBLIC_ID: asset.public_id,
        MediaFields.RESOURCE_TYPE: asset.resource_type,
    }


def media_from_document(doc: Optional[Dict[str, Any]], resource_type: str = "image") -> Optional[MediaAsset]:
    """Build a MediaAsset from an embedded doc; legacy docs may lack resourceType."""
    if not doc or not doc.get(MediaFields.URL):
        return None
    return MediaAsset(
        url=doc.get(MediaFields.URL),
        public_id=doc.get(MediaFields.PUBLIC_ID),
        resource_type=doc.get(MediaFields.RESOURCE_TYPE, resource_type),
    )
