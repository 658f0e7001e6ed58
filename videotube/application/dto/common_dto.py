"""
Common DTOs
===========

Response envelope and base model shared by every endpoint.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model exposing camelCase field names on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MediaResponse(CamelModel):
    """Public part of a hosted asset (the publicId stays server side)."""
    url: str


class ApiResponse(CamelModel):
    """DTO for every successful response: {statusCode, data, message, success}."""
    status_code: int = 200
    data: Any = None
    message: str = "Success"

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "statusCode": 200,
                "data": {},
                "message": "Success",
                "success": True,
            }
        }
    )

    @computed_field
    @property
    def success(self) -> bool:
        return self.status_code < 400


class ErrorResponse(CamelModel):
    """DTO for error responses rendered by the exception handlers."""
    status_code: int
    success: bool = False
    message: str
    errors: list = Field(default_factory=list)
