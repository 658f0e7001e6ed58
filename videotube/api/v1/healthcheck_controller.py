"""
Healthcheck Controller
======================

Liveness endpoint.
"""
from fastapi import APIRouter

from videotube.application.dto.common_dto import ApiResponse

router = APIRouter(tags=["healthcheck"])


@router.get("", response_model=ApiResponse, summary="Health check")
def healthcheck() -> ApiResponse:
    """Always OK while the process is serving requests."""
    return ApiResponse(data=None, message="Health check OK")
