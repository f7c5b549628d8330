from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Central application configuration parsed from environment variables."""

    api_host: str = Field("0.0.0.0", description="Host interface for the API server.")
    api_port: int = Field(8080, description="Port for the API server.")

    database_url: str = Field("sqlite:///./data/gallery.db", description="SQL database URL.")
    storage_root: Path = Field(
        Path("./data/images"), validate_default=True, description="Base path for uploaded gallery images."
    )

    allowed_content_types: List[str] = Field(
        default_factory=lambda: ["image/jpeg", "image/png", "image/gif"],
        description="Content types accepted for uploaded images.",
    )
    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:4200"],
        description="Origins allowed to call the API from a browser.",
    )
    log_level: str = Field("INFO", description="Root logging level for the server process.")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", env_prefix="GALLERY_", extra="ignore")

    @field_validator("storage_root", mode="before")
    @classmethod
    def expand_storage_root(cls, value: Path) -> Path:
        """Expand user and environment variables for storage root paths."""
        return Path(value).expanduser().resolve()

    @field_validator("allowed_content_types")
    @classmethod
    def normalize_content_types(cls, value: List[str]) -> List[str]:
        return [item.strip().lower() for item in value if item.strip()]

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        return value.upper()


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached `Settings` instance to avoid reparsing the environment."""
    return Settings()


settings = get_settings()
