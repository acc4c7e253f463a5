"""Use cases operating on the photo pool."""

from photopool.application.use_cases.list_photos import PhotoListing
from photopool.application.use_cases.mutate_photos import ALLOWED_EXTENSIONS, PhotoMutations

__all__ = [
    "ALLOWED_EXTENSIONS",
    "PhotoListing",
    "PhotoMutations",
]
