from __future__ import annotations

from typing import List, Optional

from sqlmodel import Session, select

from gallery_api.models.entities import Gallery
from gallery_api.models.schemas import GalleryCreate, GalleryRead


class GalleryRepository:
    """Repository encapsulating database operations for gallery rows."""

    def __init__(self, session: Session) -> None:
        self.session = session

    # ---------------------------------------------------------------------
    # CRUD helpers
    # ---------------------------------------------------------------------
    def create(self, payload: GalleryCreate) -> GalleryRead:
        entity = Gallery(title=payload.title, description=payload.description)
        self.session.add(entity)
        self.session.commit()
        self.session.refresh(entity)
        return self._to_read(entity)

    def get(self, gallery_id: int) -> Optional[GalleryRead]:
        entity = self.get_entity(gallery_id)
        if entity is None:
            return None
        return self._to_read(entity)

    def get_entity(self, gallery_id: int) -> Optional[Gallery]:
        return self.session.exec(select(Gallery).where(Gallery.id == gallery_id)).first()

    def list(self) -> List[GalleryRead]:
        results = self.session.exec(select(Gallery).order_by(Gallery.id)).all()
        return [self._to_read(item) for item in results]

    def delete(self, gallery_id: int) -> bool:
        """Delete a gallery row, returning False when it was already gone."""
        entity = self.get_entity(gallery_id)
        if entity is None:
            return False
        self.session.delete(entity)
        self.session.commit()
        return True

    # ---------------------------------------------------------------------
    # Mapping helpers
    # ---------------------------------------------------------------------
    def _to_read(self, entity: Gallery) -> GalleryRead:
        return GalleryRead(
            id=entity.id,
            title=entity.title,
            description=entity.description,
            created_at=entity.created_at,
        )
