"""
API routes for the photo pool service.

Synchronous handlers run in Starlette's threadpool, so blocking filesystem
calls for one request never stall another.
"""

from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, File, Query, Request, UploadFile
from fastapi.concurrency import run_in_threadpool
from loguru import logger
from pydantic import BaseModel, Field
from starlette.datastructures import UploadFile as StarletteUploadFile

from photopool.api.dependencies import (
    get_app_settings,
    get_listing,
    get_mutations,
    request_origin,
)
from photopool.application.use_cases import PhotoListing, PhotoMutations
from photopool.domain.entities.photo import PhotoRecord, UploadOutcome
from photopool.domain.errors import FileTooLarge, InvalidInput
from photopool.infrastructure.settings import Settings

router = APIRouter()


# ============================================================================
# Request/Response Models
# ============================================================================


class PhotoResponse(BaseModel):
    """A photo in the pool."""

    filename: str
    mimetype: str
    size: int = Field(..., description="Size in bytes, read live from storage")
    url: str
    description: str | None = None

    @classmethod
    def from_record(cls, record: PhotoRecord) -> "PhotoResponse":
        return cls(
            filename=record.filename,
            mimetype=record.mimetype,
            size=record.size_bytes,
            url=record.url,
            description=record.description,
        )


class UploadResponse(BaseModel):
    message: str
    photo: PhotoResponse


class BatchItemResponse(BaseModel):
    """Outcome for one file of a batch upload."""

    original_name: str
    ok: bool
    photo: PhotoResponse | None = None
    error: str | None = None
    message: str = ""

    @classmethod
    def from_outcome(cls, outcome: UploadOutcome) -> "BatchItemResponse":
        return cls(
            original_name=outcome.original_name,
            ok=outcome.ok,
            photo=PhotoResponse.from_record(outcome.photo) if outcome.photo else None,
            error=outcome.error,
            message=outcome.message,
        )


class BatchUploadResponse(BaseModel):
    results: list[BatchItemResponse]
    uploaded: int
    failed: int


class PhotoListResponse(BaseModel):
    items: list[PhotoResponse]
    total: int
    page: int
    limit: int


class DeleteResponse(BaseModel):
    message: str
    filename: str


class DescriptionUpdate(BaseModel):
    """Request body for description updates."""

    description: str | None = Field(None, description="Free-text description, must not be blank")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response with storage status."""

    status: str
    timestamp: str
    services: dict[str, str]


# ============================================================================
# Health Endpoints
# ============================================================================


@router.get("/health", response_model=HealthResponse, tags=["health"])
async def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=settings.app_version,
    )


@router.get("/health/ready", response_model=ReadinessResponse, tags=["health"])
def readiness_check(mutations: PhotoMutations = Depends(get_mutations)) -> ReadinessResponse:
    """Readiness check: pool directory and sidecar store reachable."""
    services: dict[str, str] = {}

    for name, component in (("storage", mutations.storage), ("descriptions", mutations.descriptions)):
        check = getattr(component, "health_check", None)
        if check is None:
            services[name] = "unknown"
            continue
        services[name] = check().get("status", "unknown")

    status = "ready" if all(s == "healthy" for s in services.values()) else "degraded"
    return ReadinessResponse(
        status=status,
        timestamp=datetime.now(timezone.utc).isoformat(),
        services=services,
    )


@router.get("/health/live", tags=["health"])
async def liveness_check() -> dict[str, str]:
    """Kubernetes liveness probe endpoint."""
    return {"status": "alive"}


# ============================================================================
# Photo Endpoints
# ============================================================================


@router.post("/photos", response_model=UploadResponse, tags=["photos"])
def upload_photo(
    request: Request,
    photo: Optional[UploadFile] = File(None),
    mutations: PhotoMutations = Depends(get_mutations),
) -> UploadResponse:
    """Upload a single photo (multipart field ``photo``)."""
    if photo is None:
        raise InvalidInput("No file uploaded!")

    limit = mutations.max_upload_bytes
    if photo.size is not None and photo.size > limit:
        photo.file.close()
        name = photo.filename or "upload"
        raise FileTooLarge(f"{name} exceeds the {limit} byte limit", filename=name)

    # Never buffer more than one byte past the limit
    try:
        data = photo.file.read(limit + 1)
    finally:
        photo.file.close()

    record = mutations.upload(data, photo.filename or "", request_origin(request))
    return UploadResponse(message="File uploaded successfully!", photo=PhotoResponse.from_record(record))


@router.post("/photos/batch", response_model=BatchUploadResponse, tags=["photos"])
async def upload_photos(
    request: Request,
    mutations: PhotoMutations = Depends(get_mutations),
) -> BatchUploadResponse:
    """
    Upload several photos at once (multipart field ``photos[]``, ``photos`` also accepted).

    Every file gets its own outcome; an invalid file never stops the others.
    """
    form = await request.form()
    uploads = [
        f
        for f in (form.getlist("photos[]") or form.getlist("photos"))
        if isinstance(f, StarletteUploadFile)
    ]
    if not uploads:
        raise InvalidInput("No files uploaded!")

    limit = mutations.max_upload_bytes
    items: list[tuple[bytes, str]] = []
    for upload in uploads:
        try:
            items.append((await upload.read(limit + 1), upload.filename or ""))
        finally:
            await upload.close()

    outcomes = await run_in_threadpool(mutations.upload_many, items, request_origin(request))
    results = [BatchItemResponse.from_outcome(o) for o in outcomes]
    uploaded = sum(1 for r in results if r.ok)
    return BatchUploadResponse(results=results, uploaded=uploaded, failed=len(results) - uploaded)


@router.get("/photos", response_model=PhotoListResponse, tags=["photos"])
def list_photos(
    request: Request,
    page: Optional[int] = Query(None, description="1-based page number"),
    limit: Optional[int] = Query(None, description="Page size, capped by the server"),
    search: Optional[str] = Query(None, description="Case-sensitive filename substring"),
    listing: PhotoListing = Depends(get_listing),
) -> PhotoListResponse:
    """Browse photos in filename order with pagination."""
    result = listing.list(page=page, limit=limit, search=search, origin=request_origin(request))
    logger.debug(f"Listed {len(result.items)} of {result.total} photos (page {result.page})")
    return PhotoListResponse(
        items=[PhotoResponse.from_record(r) for r in result.items],
        total=result.total,
        page=result.page,
        limit=result.limit,
    )


@router.get("/photos/{filename}", response_model=PhotoResponse, tags=["photos"])
def get_photo(
    filename: str,
    request: Request,
    mutations: PhotoMutations = Depends(get_mutations),
) -> PhotoResponse:
    return PhotoResponse.from_record(mutations.get(filename, request_origin(request)))


@router.delete("/photos/{filename}", response_model=DeleteResponse, tags=["photos"])
def delete_photo(
    filename: str,
    mutations: PhotoMutations = Depends(get_mutations),
) -> DeleteResponse:
    """Delete a photo by filename."""
    mutations.delete(filename)
    return DeleteResponse(message="File deleted successfully!", filename=filename)


@router.patch("/photos/{filename}", response_model=PhotoResponse, tags=["photos"])
def update_photo_description(
    filename: str,
    body: DescriptionUpdate,
    request: Request,
    mutations: PhotoMutations = Depends(get_mutations),
) -> PhotoResponse:
    """Attach a free-text description to a photo."""
    record = mutations.update_description(filename, body.description, request_origin(request))
    return PhotoResponse.from_record(record)
