"""Domain models, entities and errors."""

from photopool.domain.entities import ListingPage, PhotoRecord, PhotoStat, UploadOutcome
from photopool.domain.errors import (
    FileTooLarge,
    InvalidInput,
    IOFailure,
    NotFound,
    PhotoPoolError,
    UnsupportedFileType,
    WriteConflict,
)

__all__ = [
    # Entities
    "ListingPage",
    "PhotoRecord",
    "PhotoStat",
    "UploadOutcome",
    # Errors
    "PhotoPoolError",
    "NotFound",
    "UnsupportedFileType",
    "InvalidInput",
    "FileTooLarge",
    "WriteConflict",
    "IOFailure",
]
