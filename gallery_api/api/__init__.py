"""FastAPI routers for the gallery service."""

from fastapi import APIRouter

from .galleries import router as galleries_router

api_router = APIRouter(prefix="/api")
api_router.include_router(galleries_router, prefix="/gallery", tags=["gallery"])
