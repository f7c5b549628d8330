"""Translate every failure into the uniform JSON error body."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any, Dict, Iterable, List, Mapping, Optional, Type

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gallery_api.exceptions import GalleryError, GalleryNotFoundError, InvalidFileTypeError
from gallery_api.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)

ERROR_STATUS: Dict[Type[GalleryError], HTTPStatus] = {
    GalleryNotFoundError: HTTPStatus.NOT_FOUND,
    InvalidFileTypeError: HTTPStatus.BAD_REQUEST,
}

# Leading location segments FastAPI adds to request validation errors.
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def error_response(
    status: int, messages: Iterable[str], headers: Optional[Mapping[str, str]] = None
) -> JSONResponse:
    status = int(status)
    body = ErrorResponse(status=status, error=HTTPStatus(status).phrase, messages=list(messages))
    return JSONResponse(status_code=status, content=body.model_dump(mode="json"), headers=headers)


def validation_messages(errors: Iterable[Mapping[str, Any]]) -> List[str]:
    """Render one "<field>: <reason>" message per violation."""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        reason = str(error.get("msg", "invalid value")).removeprefix("Value error, ")
        messages.append(f"{'.'.join(loc)}: {reason}" if loc else reason)
    return messages


async def gallery_error_handler(request: Request, exc: GalleryError) -> JSONResponse:
    status = next(
        (ERROR_STATUS[cls] for cls in type(exc).__mro__ if cls in ERROR_STATUS),
        HTTPStatus.INTERNAL_SERVER_ERROR,
    )
    logger.warning("%s %s failed: %s", request.method, request.url.path, exc)
    return error_response(status, [str(exc)])


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(HTTPStatus.BAD_REQUEST, validation_messages(exc.errors()) or [str(exc)])


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, [str(exc.detail)], headers=exc.headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return error_response(HTTPStatus.INTERNAL_SERVER_ERROR, [str(exc) or exc.__class__.__name__])


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GalleryError, gallery_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
