from __future__ import annotations

import logging
import mimetypes
import shutil
import uuid
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from fastapi import UploadFile

from gallery_api.exceptions import InvalidFileTypeError

logger = logging.getLogger(__name__)


class ImageStorage:
    """Stores gallery images on the host filesystem, one directory per gallery id."""

    def __init__(self, root: Path, allowed_content_types: Iterable[str]) -> None:
        self.root = root
        self.allowed_content_types = {item.lower() for item in allowed_content_types}
        self.root.mkdir(parents=True, exist_ok=True)

    def gallery_path(self, gallery_id: int) -> Path:
        """Return the directory holding images for a gallery (not created)."""
        return self.root / str(gallery_id)

    def validate(self, files: Sequence[UploadFile]) -> None:
        """Raise `InvalidFileTypeError` for the first file with a disallowed content type."""
        for upload in files:
            content_type = (upload.content_type or "").split(";")[0].strip().lower()
            if content_type not in self.allowed_content_types:
                raise InvalidFileTypeError(upload.filename, upload.content_type)

    def save_images(self, gallery_id: int, files: Sequence[UploadFile]) -> List[str]:
        """Write every upload under the gallery directory and return the stored names.

        Nothing is written when any file has a disallowed content type. If a
        write fails part-way, files written by this call are removed before
        the error propagates.
        """
        self.validate(files)

        folder = self.gallery_path(gallery_id)
        folder.mkdir(parents=True, exist_ok=True)

        written: List[Path] = []
        names: List[str] = []
        try:
            for upload in files:
                name = self._unique_name(folder, self._safe_filename(upload.filename, upload.content_type))
                destination = folder / name
                upload.file.seek(0)
                written.append(destination)
                with destination.open("wb") as handle:
                    shutil.copyfileobj(upload.file, handle)
                names.append(name)
        except Exception:
            logger.warning("Removing %d partially stored images for gallery %s", len(written), gallery_id)
            for path in written:
                path.unlink(missing_ok=True)
            raise

        return names

    def get_images(self, gallery_id: int) -> List[str]:
        """Return the filenames currently stored for a gallery, sorted by name."""
        folder = self.gallery_path(gallery_id)
        if not folder.is_dir():
            return []
        return sorted(path.name for path in folder.iterdir() if path.is_file())

    def delete_images(self, gallery_id: int) -> None:
        """Remove the gallery directory and everything in it."""
        folder = self.gallery_path(gallery_id)
        if folder.exists():
            shutil.rmtree(folder)

    @staticmethod
    def _safe_filename(name: Optional[str], content_type: Optional[str]) -> str:
        base = Path((name or "").replace("\\", "/")).name.strip()
        base = "".join(char if char.isalnum() or char in ("-", "_", ".") else "_" for char in base)
        base = base.lstrip(".")
        if len(base) > 150:
            stem, suffix = Path(base).stem, Path(base).suffix
            base = stem[: 150 - len(suffix)] + suffix
        if base:
            return base
        extension = mimetypes.guess_extension(content_type or "") or ""
        return f"{uuid.uuid4().hex}{extension}"

    @staticmethod
    def _unique_name(folder: Path, name: str) -> str:
        candidate = name
        stem, suffix = Path(name).stem, Path(name).suffix
        counter = 1
        while (folder / candidate).exists():
            candidate = f"{stem}-{counter}{suffix}"
            counter += 1
        return candidate
