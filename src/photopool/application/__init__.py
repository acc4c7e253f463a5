"""Application layer - listing and mutation logic over the photo pool."""

from photopool.application.locks import KeyedLocks
from photopool.application.records import PhotoRecordBuilder, guess_mimetype
from photopool.application.use_cases import PhotoListing, PhotoMutations

__all__ = [
    "KeyedLocks",
    "PhotoListing",
    "PhotoMutations",
    "PhotoRecordBuilder",
    "guess_mimetype",
]
