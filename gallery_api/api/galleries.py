from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from gallery_api.api.dependencies import get_gallery_service
from gallery_api.models import ErrorResponse, GalleryCreate, GalleryRead
from gallery_api.services.galleries import GalleryService

router = APIRouter(responses={status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse}})


def gallery_form(
    title: str = Form(..., description="Short title shown for the gallery."),
    description: str = Form(..., description="Free-form description of the gallery."),
) -> GalleryCreate:
    try:
        return GalleryCreate(title=title, description=description)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors()) from exc


@router.post("", response_model=GalleryRead, responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}})
async def create_gallery(
    payload: GalleryCreate = Depends(gallery_form),
    gallery_images: Optional[List[UploadFile]] = File(None, description="Image files to attach to the gallery."),
    service: GalleryService = Depends(get_gallery_service),
) -> GalleryRead:
    return service.create_gallery(payload, gallery_images or [])


@router.get("", response_model=List[GalleryRead])
async def list_galleries(service: GalleryService = Depends(get_gallery_service)) -> List[GalleryRead]:
    return service.list_galleries()


@router.get("/{gallery_id}", response_model=GalleryRead, responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}})
async def get_gallery(gallery_id: int, service: GalleryService = Depends(get_gallery_service)) -> GalleryRead:
    return service.get_gallery(gallery_id)


@router.delete("/{gallery_id}", responses={status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}})
async def delete_gallery(gallery_id: int, service: GalleryService = Depends(get_gallery_service)) -> Response:
    service.delete_gallery(gallery_id)
    return Response(status_code=status.HTTP_200_OK)
