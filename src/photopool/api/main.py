"""FastAPI application entry point."""

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from photopool.api.errors import photo_pool_error_handler
from photopool.api.static import PoolStaticFiles
from photopool.application import PhotoListing, PhotoMutations
from photopool.application.ports import DescriptionStore, PhotoStorage
from photopool.domain.errors import PhotoPoolError
from photopool.infrastructure import (
    FilesystemPhotoStorage,
    Settings,
    build_description_store,
    build_photo_storage,
    get_settings,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings: Settings = app.state.settings
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Environment: {settings.environment}")
    logger.info(f"Photo pool: {settings.upload_dir} (descriptions: {settings.description_backend})")

    yield

    logger.info("Shutdown complete")


def create_app(
    settings: Settings | None = None,
    storage: PhotoStorage | None = None,
    descriptions: DescriptionStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    ``storage`` and ``descriptions`` default to the adapters named in settings;
    pass them explicitly to run against other backends.
    """
    settings = settings or get_settings()
    storage = storage or build_photo_storage(settings)
    descriptions = descriptions or build_description_store(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description="Upload, browse, search and annotate a pool of photos",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.listing = PhotoListing(
        storage,
        descriptions,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
    app.state.mutations = PhotoMutations(
        storage,
        descriptions,
        max_upload_bytes=settings.max_upload_bytes,
        max_description_length=settings.max_description_length,
        name_retry_budget=settings.name_retry_budget,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
        return response

    app.add_exception_handler(PhotoPoolError, photo_pool_error_handler)

    # Register routes
    from photopool.api.routes import router

    app.include_router(router)

    # Serve the pool itself so record URLs resolve
    if isinstance(storage, FilesystemPhotoStorage):
        app.mount(settings.public_path, PoolStaticFiles(directory=storage.root), name="uploads")

    return app
