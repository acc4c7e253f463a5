"""Paginated, searchable listing over the photo pool."""

from __future__ import annotations

from typing import Optional

from loguru import logger

from photopool.application.ports.description_store import DescriptionStore
from photopool.application.ports.photo_storage import PhotoStorage
from photopool.application.records import PhotoRecordBuilder
from photopool.domain.entities.photo import ListingPage, PhotoRecord
from photopool.domain.errors import NotFound


class PhotoListing:
    """Snapshot listing of the pool.

    Flow:
    1. Enumerate the pool (IOFailure propagates to the caller)
    2. Keep names containing ``search`` (case-sensitive)
    3. Sort by filename so pages stay stable between calls
    4. Slice the requested page
    5. Build records, joining sidecar descriptions

    An entry whose file disappears between enumeration and stat is dropped
    from the page instead of failing the whole listing.
    """

    def __init__(
        self,
        storage: PhotoStorage,
        descriptions: DescriptionStore,
        default_limit: int = 10,
        max_limit: int = 100,
    ) -> None:
        self.storage = storage
        self.descriptions = descriptions
        self.builder = PhotoRecordBuilder(storage)
        self.default_limit = default_limit
        self.max_limit = max_limit

    def normalize(self, page: Optional[int], limit: Optional[int]) -> tuple[int, int]:
        """Apply defaults to missing or non-positive values and cap ``limit``."""
        page = page if page and page > 0 else 1
        limit = limit if limit and limit > 0 else self.default_limit
        return page, min(limit, self.max_limit)

    def list(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        search: Optional[str] = None,
        origin: str = "",
    ) -> ListingPage:
        page, limit = self.normalize(page, limit)

        names = self.storage.list_names()
        if search:
            names = {name for name in names if search in name}
        ordered = sorted(names)
        total = len(ordered)

        start = min((page - 1) * limit, total)
        end = min(page * limit, total)
        window = ordered[start:end]

        descriptions = self.descriptions.get_many(window)
        items: list[PhotoRecord] = []
        for name in window:
            try:
                items.append(self.builder.build(name, descriptions.get(name), origin))
            except NotFound:
                logger.debug(f"Dropping {name} from listing: removed after enumeration")

        return ListingPage(items=items, total=total, page=page, limit=limit)
