"""Pydantic models and SQLModel ORM entities used by the service."""

from .schemas import ErrorResponse, GalleryCreate, GalleryRead  # noqa: F401
