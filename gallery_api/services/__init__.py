"""Service layer orchestrating gallery persistence and image storage."""

from .galleries import GalleryService  # noqa: F401
