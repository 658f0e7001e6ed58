"""Identifier helpers shared by services and repositories."""
from typing import Any

from bson import ObjectId

from videotube.domain.exceptions import BadRequestError


def is_valid_object_id(value: Any) -> bool:
    """True for 24-char hex strings (or ObjectId instances) MongoDB accepts as _id."""
    if isinstance(value, ObjectId):
        return True
    return isinstance(value, str) and len(value) == 24 and ObjectId.is_valid(value)


def require_object_id(value: Any, entity: str) -> str:
    """
    Validate an id taken from a request path.

    Raises:
        BadRequestError: "<entity> id is not valid"
    """
    if not is_valid_object_id(value):
        raise BadRequestError(f"{entity} id is not valid")
    return str(value)
