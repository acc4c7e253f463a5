# src/photopool/infrastructure/__init__.py
"""Infrastructure layer - storage adapters, sidecar stores and configuration."""

from photopool.application.ports import DescriptionStore, PhotoStorage
from photopool.infrastructure.settings import Settings, get_settings
from photopool.infrastructure.sidecar import JsonDescriptionStore, SQLiteDescriptionStore
from photopool.infrastructure.storage import FilesystemPhotoStorage, InMemoryPhotoStorage


def build_photo_storage(settings: Settings | None = None) -> FilesystemPhotoStorage:
    """Create the filesystem pool described by settings."""
    settings = settings or get_settings()
    return FilesystemPhotoStorage(settings.upload_dir, name_retry_budget=settings.name_retry_budget)


def build_description_store(settings: Settings | None = None) -> DescriptionStore:
    """Create the configured sidecar description store."""
    settings = settings or get_settings()
    if settings.description_backend == "sqlite":
        return SQLiteDescriptionStore(settings.sqlite_path)
    return JsonDescriptionStore(settings.description_dir)


__all__ = [
    # Settings
    "Settings",
    "get_settings",
    # Storage
    "PhotoStorage",
    "FilesystemPhotoStorage",
    "InMemoryPhotoStorage",
    "build_photo_storage",
    # Sidecar
    "DescriptionStore",
    "JsonDescriptionStore",
    "SQLiteDescriptionStore",
    "build_description_store",
]
