"""Ports implemented by the infrastructure layer."""

from photopool.application.ports.description_store import DescriptionStore
from photopool.application.ports.photo_storage import PhotoStorage

__all__ = [
    "DescriptionStore",
    "PhotoStorage",
]
