from datetime import datetime, timezone
from typing import Optional

from sqlmodel import Field, SQLModel


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Gallery(SQLModel, table=True):
    """SQLModel entity representing a gallery row.

    Image filenames are not stored here; they live on disk in a directory
    named after the gallery id.
    """

    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    title: str = Field(max_length=100, nullable=False)
    description: str = Field(max_length=1000, nullable=False)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
