"""
API/Presentation Layer
======================

HTTP API layer using FastAPI.
This layer turns HTTP requests into service calls and wraps the results
in the response envelope.

Contains:
- v1: FastAPI routers (controllers) and their dependencies
- errors: exception handlers rendering ApiError and friends
"""
