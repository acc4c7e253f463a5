from __future__ import annotations
from typing import Iterable, Optional, Protocol


class DescriptionStore(Protocol):
    """Sidecar key-value store: filename -> description."""

    def get(self, filename: str) -> Optional[str]: ...
    def get_many(self, filenames: Iterable[str]) -> dict[str, str]: ...
    def put(self, filename: str, description: str) -> None: ...
    def delete(self, filename: str) -> bool: ...
    def keys(self) -> set[str]: ...
