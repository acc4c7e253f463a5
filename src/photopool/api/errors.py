"""Translate core failures into HTTP responses."""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse
from loguru import logger

from photopool.domain.errors import IOFailure, NotFound, PhotoPoolError


async def photo_pool_error_handler(request: Request, exc: PhotoPoolError) -> JSONResponse:
    """Map each error kind to its status code and log at a matching level."""
    where = f"{request.method} {request.url.path}"
    if isinstance(exc, IOFailure):
        logger.opt(exception=exc).error(f"{where} failed: {exc.kind}: {exc.message}")
    elif isinstance(exc, NotFound):
        logger.info(f"{where}: {exc.kind}: {exc.message}")
    else:
        logger.warning(f"{where} rejected: {exc.kind}: {exc.message}")

    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())
