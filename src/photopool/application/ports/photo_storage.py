from __future__ import annotations
from typing import Protocol
from photopool.domain.entities.photo import PhotoStat


class PhotoStorage(Protocol):
    """The physical pool. Every call reflects live state, nothing is cached."""

    def put(self, name_hint: str, data: bytes) -> str: ...
    def stat(self, filename: str) -> PhotoStat: ...
    def remove(self, filename: str) -> None: ...
    def list_names(self) -> set[str]: ...
    def locate(self, filename: str) -> str: ...
