import os
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine.base import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel

from tests.helpers import ALLOWED_TYPES

# Settings are read once at import, so point them at a scratch directory first.
_SCRATCH = Path(tempfile.mkdtemp(prefix="gallery-api-tests-"))
os.environ.update(
    {
        "GALLERY_DATABASE_URL": f"sqlite:///{_SCRATCH / 'gallery.db'}",
        "GALLERY_STORAGE_ROOT": str(_SCRATCH / "images"),
    }
)


@pytest.fixture
def engine() -> Generator[Engine]:
    """In-memory SQLite engine shared across threads for one test."""
    from gallery_api.db import build_engine, create_tables

    engine = build_engine("sqlite://", poolclass=StaticPool)
    create_tables(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db_session(engine: Engine) -> Generator[Session]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def storage_root(tmp_path: Path) -> Path:
    return tmp_path / "images"


@pytest.fixture
def storage(storage_root: Path):
    from gallery_api.storage import ImageStorage

    return ImageStorage(storage_root, ALLOWED_TYPES)


@pytest.fixture
def repo(db_session: Session):
    from gallery_api.repositories import GalleryRepository

    return GalleryRepository(db_session)


@pytest.fixture
def service(repo, storage):
    from gallery_api.services import GalleryService

    return GalleryService(repo, storage)


def _override(engine: Engine, storage) -> None:
    from gallery_api.api.dependencies import get_image_storage
    from gallery_api.db import get_session
    from gallery_api.main import app

    def override_get_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_image_storage] = lambda: storage


@pytest.fixture
def client(engine: Engine, storage) -> Generator[TestClient]:
    """Test client wired to the in-memory database and a temporary image root."""
    from gallery_api.main import app

    _override(engine, storage)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def lenient_client(engine: Engine, storage) -> Generator[TestClient]:
    """Like `client`, but returns 500 responses instead of re-raising server errors."""
    from gallery_api.main import app

    _override(engine, storage)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client
    app.dependency_overrides.clear()
