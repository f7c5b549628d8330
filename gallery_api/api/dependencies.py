from fastapi import Depends
from sqlmodel import Session

from gallery_api.config import settings
from gallery_api.db import get_session
from gallery_api.repositories.galleries import GalleryRepository
from gallery_api.services.galleries import GalleryService
from gallery_api.storage import ImageStorage


def get_image_storage() -> ImageStorage:
    return ImageStorage(settings.storage_root, settings.allowed_content_types)


def get_gallery_service(
    session: Session = Depends(get_session),
    storage: ImageStorage = Depends(get_image_storage),
) -> GalleryService:
    return GalleryService(GalleryRepository(session), storage)
