"""Icon browser FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from iconbrowser.config import Settings, get_settings
from iconbrowser.search.router import get_search_service
from iconbrowser.search.router import router as search_router
from iconbrowser.search.service import (
    FileSnapshotSource,
    LiveSnapshotSource,
    SearchService,
    SnapshotSource,
)

VERSION = "0.1.0"

logger = logging.getLogger(__name__)


def build_snapshot_source(settings: Settings) -> SnapshotSource:
    """Precomputed snapshot when one is configured, live traversal otherwise."""
    if settings.snapshot_path is not None:
        return FileSnapshotSource(settings.snapshot_path)
    return LiveSnapshotSource(
        settings.icon_root,
        max_depth=settings.max_depth,
        mount_prefix=settings.icon_mount_prefix,
        public_dir=settings.public_dir,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Wire the search service from settings."""
    settings: Settings = app.state.settings
    source = build_snapshot_source(settings)
    if isinstance(source, FileSnapshotSource):
        logger.info("Serving icons from snapshot %s", source.path)
    else:
        logger.info("Serving icons from live directory %s", settings.icon_root)

    search_svc = SearchService(source)
    app.dependency_overrides[get_search_service] = lambda: search_svc

    yield

    app.dependency_overrides.pop(get_search_service, None)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; settings default to the environment."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Icon Browser",
        description="Ranked filename and path search over a tree of image assets",
        version=VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    app.include_router(search_router)

    @app.get("/api/health")
    async def health() -> dict:
        return {"status": "ok", "version": VERSION}

    # Serves the bytes behind each record's path.
    app.mount(
        settings.icon_mount_prefix,
        StaticFiles(directory=settings.icon_root, check_dir=False),
        name="icons",
    )

    return app


app = create_app()
