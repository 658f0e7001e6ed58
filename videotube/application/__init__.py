"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities, repositories and the media host.

Contains:
- Use Cases: Business operations (register user, publish video, delete video, etc.)
- Services: Application services behind each group of endpoints
- DTO: Pydantic request/response models
"""
