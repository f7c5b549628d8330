from __future__ import annotations

import logging
import os
from typing import List, Optional, Sequence

from fastapi import UploadFile

from gallery_api.exceptions import GalleryNotFoundError
from gallery_api.models.schemas import GalleryCreate, GalleryRead
from gallery_api.repositories.galleries import GalleryRepository
from gallery_api.storage import ImageStorage

logger = logging.getLogger(__name__)


class GalleryService:
    """Keeps gallery rows and their image directories in step.

    The two stores share no transaction. Creation validates uploads before
    inserting the row and undoes the insert if writing images fails; deletion
    removes images before the row.
    """

    def __init__(self, repository: GalleryRepository, storage: ImageStorage) -> None:
        self.repository = repository
        self.storage = storage

    def create_gallery(self, payload: GalleryCreate, files: Optional[Sequence[UploadFile]] = None) -> GalleryRead:
        uploads = list(files or [])
        has_images = bool(uploads) and not _is_blank(uploads[0])
        if has_images:
            self.storage.validate(uploads)

        gallery = self.repository.create(payload)
        if not has_images:
            gallery.images = []
            logger.info("Created gallery %s without images", gallery.id)
            return gallery

        try:
            gallery.images = self.storage.save_images(gallery.id, uploads)
        except Exception:
            logger.exception("Storing images for gallery %s failed, rolling back", gallery.id)
            self.storage.delete_images(gallery.id)
            self.repository.delete(gallery.id)
            raise

        logger.info("Created gallery %s with %d images", gallery.id, len(gallery.images))
        return gallery

    def list_galleries(self) -> List[GalleryRead]:
        galleries = self.repository.list()
        for gallery in galleries:
            gallery.images = self.storage.get_images(gallery.id)
        return galleries

    def get_gallery(self, gallery_id: int) -> GalleryRead:
        gallery = self.repository.get(gallery_id)
        if gallery is None:
            raise GalleryNotFoundError(gallery_id)
        gallery.images = self.storage.get_images(gallery_id)
        return gallery

    def delete_gallery(self, gallery_id: int) -> None:
        if self.repository.get_entity(gallery_id) is None:
            raise GalleryNotFoundError(gallery_id)
        self.storage.delete_images(gallery_id)
        # Another request may have removed the row since the lookup above.
        if not self.repository.delete(gallery_id):
            raise GalleryNotFoundError(gallery_id)
        logger.info("Deleted gallery %s", gallery_id)


def _is_blank(upload: UploadFile) -> bool:
    """A part with no bytes counts as "no image", whatever its filename."""
    if upload.size is not None:
        return upload.size == 0
    position = upload.file.tell()
    upload.file.seek(0, os.SEEK_END)
    length = upload.file.tell()
    upload.file.seek(position)
    return length == 0
