from datetime import datetime, timezone
from typing import List

from pydantic import BaseModel, Field, field_validator


class GalleryCreate(BaseModel):
    title: str = Field(..., max_length=100, description="Short title shown for the gallery.")
    description: str = Field(..., max_length=1000, description="Free-form description of the gallery.")

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be blank")
        return value


class GalleryRead(BaseModel):
    id: int
    title: str
    description: str
    created_at: datetime
    images: List[str] = Field(default_factory=list)


class ErrorResponse(BaseModel):
    """Uniform body returned for every failed request."""

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    status: int
    error: str
    messages: List[str] = Field(default_factory=list)
