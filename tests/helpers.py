from io import BytesIO

from fastapi import UploadFile
from starlette.datastructures import Headers

ALLOWED_TYPES = ["image/jpeg", "image/png", "image/gif"]
PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
JPEG_BYTES = b"\xff\xd8\xff\xe0" + b"\x00" * 16


def make_upload(filename: str, content_type: str, data: bytes = PNG_BYTES) -> UploadFile:
    return UploadFile(
        file=BytesIO(data),
        size=len(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def gallery_form(title: str = "Holiday", description: str = "Pictures from the coast") -> dict[str, str]:
    return {"title": title, "description": description}


def image_part(filename: str, content_type: str = "image/png", data: bytes = PNG_BYTES) -> tuple:
    return ("gallery_images", (filename, data, content_type))
