from __future__ import annotations
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PhotoStat:
    size_bytes: int
    exists: bool = True


@dataclass(frozen=True)
class PhotoRecord:
    filename: str
    # Recomputed from the pool root on every read, never persisted
    storage_path: str
    mimetype: str
    size_bytes: int
    url: str
    description: Optional[str] = None


@dataclass(frozen=True)
class UploadOutcome:
    original_name: str
    photo: Optional[PhotoRecord] = None
    error: Optional[str] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.photo is not None


@dataclass(frozen=True)
class ListingPage:
    items: list[PhotoRecord]
    total: int
    page: int
    limit: int
