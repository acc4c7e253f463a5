"""Turn pool entries into PhotoRecords."""

from __future__ import annotations

import os
from typing import Optional

from photopool.application.ports.photo_storage import PhotoStorage
from photopool.domain.entities.photo import PhotoRecord

DEFAULT_MIMETYPE = "application/octet-stream"

MIMETYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".gif": "image/gif",
}


def guess_mimetype(filename: str) -> str:
    _, ext = os.path.splitext(filename)
    return MIMETYPES.get(ext.lower(), DEFAULT_MIMETYPE)


def photo_url(origin: str, filename: str) -> str:
    return f"{origin.rstrip('/')}/{filename}"


class PhotoRecordBuilder:
    """Synthesizes a PhotoRecord from a filename plus its sidecar description.

    The only storage access is the size stat, so a missing file surfaces as
    ``NotFound`` from the backend.
    """

    def __init__(self, storage: PhotoStorage) -> None:
        self.storage = storage

    def build(self, filename: str, description: Optional[str], origin: str) -> PhotoRecord:
        stat = self.storage.stat(filename)
        return PhotoRecord(
            filename=filename,
            storage_path=self.storage.locate(filename),
            mimetype=guess_mimetype(filename),
            size_bytes=stat.size_bytes,
            url=photo_url(origin, filename),
            description=description,
        )
