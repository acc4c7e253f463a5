"""Request-scoped accessors for the objects wired up in ``create_app``."""

from __future__ import annotations

from fastapi import Request

from photopool.application.use_cases import PhotoListing, PhotoMutations
from photopool.infrastructure.settings import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_listing(request: Request) -> PhotoListing:
    return request.app.state.listing


def get_mutations(request: Request) -> PhotoMutations:
    return request.app.state.mutations


def request_origin(request: Request) -> str:
    """Public base for photo URLs, e.g. ``http://host:5000/uploads``."""
    settings = get_app_settings(request)
    return f"{str(request.base_url).rstrip('/')}{settings.public_path}"
