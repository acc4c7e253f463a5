"""Photo pool storage implementations."""

from photopool.infrastructure.storage.filesystem import FilesystemPhotoStorage
from photopool.infrastructure.storage.memory import InMemoryPhotoStorage

__all__ = [
    "FilesystemPhotoStorage",
    "InMemoryPhotoStorage",
]
