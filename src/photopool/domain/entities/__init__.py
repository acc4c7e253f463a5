"""Domain entities."""

from photopool.domain.entities.photo import ListingPage, PhotoRecord, PhotoStat, UploadOutcome

__all__ = [
    "ListingPage",
    "PhotoRecord",
    "PhotoStat",
    "UploadOutcome",
]
