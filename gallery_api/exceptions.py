"""Domain errors raised by the gallery service and image storage."""

from typing import Optional


class GalleryError(Exception):
    """Base class for errors that map to a client-facing HTTP status."""


class GalleryNotFoundError(GalleryError):
    def __init__(self, gallery_id: int) -> None:
        super().__init__(f"Gallery with id: {gallery_id} not found")
        self.gallery_id = gallery_id


class InvalidFileTypeError(GalleryError):
    def __init__(self, filename: Optional[str], content_type: Optional[str]) -> None:
        super().__init__(f"File '{filename or 'unnamed'}' has unsupported content type '{content_type or 'unknown'}'")
        self.filename = filename
        self.content_type = content_type
