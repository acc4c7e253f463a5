"""Create, delete and annotate photos in the pool."""

from __future__ import annotations

import os
import time
from typing import Callable, Iterable, Optional

from loguru import logger

from photopool.application.locks import KeyedLocks
from photopool.application.ports.description_store import DescriptionStore
from photopool.application.ports.photo_storage import PhotoStorage
from photopool.application.records import PhotoRecordBuilder
from photopool.domain.entities.photo import PhotoRecord, UploadOutcome
from photopool.domain.errors import (
    FileTooLarge,
    InvalidInput,
    NotFound,
    PhotoPoolError,
    UnsupportedFileType,
)
from photopool.domain.naming import check_pool_name, secure_name, stem_budget, truncate_utf8

ALLOWED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif"})


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class PhotoMutations:
    """Mediates every write to the pool and its sidecar descriptions.

    Delete, description update and single-photo reads take a per-filename
    lock, so an update racing a delete either lands before it or sees
    ``NotFound``. Creating the file itself needs no lock: the storage backend
    creates files exclusively and picks a fresh name when the generated one is
    taken. The new name is locked only while stale sidecar data is cleared.
    """

    def __init__(
        self,
        storage: PhotoStorage,
        descriptions: DescriptionStore,
        max_upload_bytes: int = 10 * 1024 * 1024,
        max_description_length: int = 1000,
        name_retry_budget: int = 5,
        clock: Callable[[], int] = _epoch_millis,
        locks: Optional[KeyedLocks] = None,
    ) -> None:
        """Initialize the mutation coordinator.

        Args:
            storage: Photo pool backend
            descriptions: Sidecar description store
            max_upload_bytes: Largest accepted upload
            max_description_length: Longest accepted description
            name_retry_budget: Retry suffixes the storage backend may append to a name
            clock: Millisecond timestamp source for generated names
            locks: Per-filename lock registry (shared with other users of the pool)
        """
        self.storage = storage
        self.descriptions = descriptions
        self.builder = PhotoRecordBuilder(storage)
        self.max_upload_bytes = max_upload_bytes
        self.max_description_length = max_description_length
        self.name_retry_budget = name_retry_budget
        self.clock = clock
        self.locks = locks if locks is not None else KeyedLocks()

    def _generate_name(self, original_name: str, ext: str) -> str:
        prefix = f"{self.clock()}-"
        stem, _ = os.path.splitext(os.path.basename(original_name.replace("\\", "/")))
        stem = secure_name(stem)
        # Leave room for a "-N" retry suffix and the sidecar's ".json"
        stem = truncate_utf8(stem, stem_budget(prefix, ext, self.name_retry_budget))
        return f"{prefix}{stem or 'photo'}{ext}"

    def upload(self, data: bytes, original_name: str, origin: str = "") -> PhotoRecord:
        """Validate and store one photo, returning its record."""
        _, ext = os.path.splitext(original_name or "")
        ext = ext.lower()
        if ext not in ALLOWED_EXTENSIONS:
            raise UnsupportedFileType(
                f"Only image files are allowed! Unsupported extension: {ext or '(none)'}",
                filename=original_name,
            )
        if not data:
            raise InvalidInput("No file uploaded!", filename=original_name)
        if len(data) > self.max_upload_bytes:
            raise FileTooLarge(
                f"{original_name} exceeds the {self.max_upload_bytes} byte limit",
                filename=original_name,
            )

        filename = self.storage.put(self._generate_name(original_name, ext), data)
        with self.locks.hold(filename):
            # A name reused after an outside deletion must not inherit its old description
            if self.descriptions.delete(filename):
                logger.warning(f"Dropped stale description for reused name {filename}")
            record = self.builder.build(filename, None, origin)
        logger.info(f"Stored photo: {filename} ({len(data)} bytes)")
        return record

    def upload_many(self, items: Iterable[tuple[bytes, str]], origin: str = "") -> list[UploadOutcome]:
        """Upload each item independently; one failure never affects the rest."""
        outcomes: list[UploadOutcome] = []
        for data, original_name in items:
            try:
                record = self.upload(data, original_name, origin)
            except PhotoPoolError as e:
                logger.warning(f"Batch item {original_name} failed: {e.kind}: {e.message}")
                outcomes.append(
                    UploadOutcome(original_name=original_name, error=e.kind, message=e.message)
                )
                continue
            outcomes.append(
                UploadOutcome(original_name=original_name, photo=record, message="File uploaded successfully!")
            )

        stored = sum(1 for outcome in outcomes if outcome.ok)
        logger.info(f"Batch upload: {stored}/{len(outcomes)} stored")
        return outcomes

    def get(self, filename: str, origin: str = "") -> PhotoRecord:
        check_pool_name(filename)
        with self.locks.hold(filename):
            return self.builder.build(filename, self.descriptions.get(filename), origin)

    def delete(self, filename: str) -> None:
        """Remove the photo and purge its description."""
        check_pool_name(filename)
        with self.locks.hold(filename):
            self.storage.remove(filename)
            self.descriptions.delete(filename)
        logger.info(f"Deleted photo: {filename}")

    def update_description(self, filename: str, text: Optional[str], origin: str = "") -> PhotoRecord:
        """Persist a description for an existing photo and return the refreshed record."""
        check_pool_name(filename)
        description = (text or "").strip()
        if not description:
            raise InvalidInput("Description cannot be empty", filename=filename)
        if len(description) > self.max_description_length:
            raise InvalidInput(
                f"Description exceeds {self.max_description_length} characters",
                filename=filename,
            )

        with self.locks.hold(filename):
            self.storage.stat(filename)
            self.descriptions.put(filename, description)
            record = self.builder.build(filename, description, origin)
        logger.info(f"Updated description for {filename}")
        return record

    def purge_orphan_descriptions(self, dry_run: bool = False) -> list[str]:
        """Drop sidecar entries whose photo no longer exists.

        Only needed when files were removed behind the API's back.
        """
        candidates = sorted(self.descriptions.keys() - self.storage.list_names())
        orphans: list[str] = []
        for filename in candidates:
            with self.locks.hold(filename):
                try:
                    self.storage.stat(filename)
                    continue
                except NotFound:
                    pass
                if not dry_run:
                    self.descriptions.delete(filename)
            orphans.append(filename)
            logger.info(f"{'Would purge' if dry_run else 'Purged'} orphan description: {filename}")
        return orphans
