"""Sidecar description store implementations."""

from photopool.infrastructure.sidecar.json_store import JsonDescriptionStore
from photopool.infrastructure.sidecar.sqlite_store import SQLiteDescriptionStore

__all__ = [
    "JsonDescriptionStore",
    "SQLiteDescriptionStore",
]
