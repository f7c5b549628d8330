from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, Iterator

from sqlalchemy import make_url
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from gallery_api.config import settings


def build_engine(database_url: str, **engine_kwargs: Any) -> Engine:
    """Create an engine, preparing the database file when the URL points at SQLite."""
    connect_args: Dict[str, Any] = {}
    url = make_url(database_url)
    if url.drivername.startswith("sqlite"):
        # Threadpool workers share connections with the event loop thread.
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            Path(url.database).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)
    return create_engine(database_url, echo=False, connect_args=connect_args, **engine_kwargs)


engine = build_engine(settings.database_url)


def create_tables(target: Engine) -> None:
    import gallery_api.models.entities  # noqa: F401  (ensure models are registered)

    SQLModel.metadata.create_all(target)


def init_db() -> None:
    """Create the gallery table on the configured database if it is missing."""
    create_tables(engine)


@contextmanager
def session_scope() -> Iterator[Session]:
    with Session(engine) as session:
        yield session


def get_session() -> Iterator[Session]:
    """FastAPI dependency yielding one session per request."""
    with session_scope() as session:
        yield session
