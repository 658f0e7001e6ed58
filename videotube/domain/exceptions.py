"""
Domain Exceptions
=================

Errors raised by services and use cases. Each carries the HTTP status the
API layer renders it with, so controllers never translate them by hand.
"""
from typing import Any, List, Optional


class ApiError(Exception):
    """Base error rendered as a {statusCode, success, message, errors} envelope."""

    status_code: int = 500
    default_message: str = "Something went wrong"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Any]] = None,
        status_code: Optional[int] = None,
    ):
        self.message = message or self.default_message
        self.errors = errors or []
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BadRequestError(ApiError):
    status_code = 400
    default_message = "Bad request"


class UnauthorizedError(ApiError):
    status_code = 401
    default_message = "Unauthorized request"


class NotFoundError(ApiError):
    status_code = 404
    default_message = "Resource not found"


class ConflictError(ApiError):
    status_code = 409
    default_message = "Resource already exists"


class MediaStorageError(ApiError):
    """Media host upload/delete failure."""
    status_code = 500
    default_message = "Media storage operation failed"


class PermissionDeniedError(UnauthorizedError):
    """Authenticated user is not the owner of the resource."""
    default_message = "You do not have permission to perform this action"
