"""
Domain Layer
============

Entities, repository interfaces and errors.
Nothing in here knows about FastAPI, MongoDB or Cloudinary.
"""
