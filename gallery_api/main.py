import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from gallery_api.api import api_router
from gallery_api.api.errors import register_exception_handlers
from gallery_api.config import settings
from gallery_api.db import init_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database ready, serving images from %s", settings.storage_root)
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Image Upload APIs",
        version="0.1.0",
        description="Create, list, view and delete image galleries.",
        license_info={"name": "Apache 2.0", "url": "https://www.apache.org/licenses/LICENSE-2.0.html"},
        openapi_tags=[
            {
                "name": "gallery",
                "description": "upload, view, delete APIs",
                "externalDocs": {
                    "description": "GitHub Page",
                    "url": "https://github.com/tbandawa/spring-image-upload",
                },
            },
            {"name": "health", "description": "Liveness probe."},
        ],
        lifespan=lifespan,
    )

    @app.get("/healthz", tags=["health"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    app.include_router(api_router)
    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    settings.storage_root.mkdir(parents=True, exist_ok=True)
    app.mount("/images", StaticFiles(directory=str(settings.storage_root)), name="images")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)-5s [%(name)s] %(message)s",
    )
    uvicorn.run(
        "gallery_api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        factory=False,
    )


if __name__ == "__main__":
    run()
