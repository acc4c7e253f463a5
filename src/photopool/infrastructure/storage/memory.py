"""In-process photo pool with the same contract as the filesystem one."""

from __future__ import annotations

import threading

from photopool.domain.entities.photo import PhotoStat
from photopool.domain.errors import NotFound, WriteConflict
from photopool.domain.naming import candidate_names, check_pool_name


class InMemoryPhotoStorage:
    def __init__(self, name_retry_budget: int = 5) -> None:
        self.name_retry_budget = name_retry_budget
        self._files: dict[str, bytes] = {}
        self._lock = threading.Lock()

    def locate(self, filename: str) -> str:
        return f"memory://{check_pool_name(filename)}"

    def put(self, name_hint: str, data: bytes) -> str:
        check_pool_name(name_hint)
        with self._lock:
            for candidate in candidate_names(name_hint, self.name_retry_budget):
                if candidate not in self._files:
                    self._files[candidate] = bytes(data)
                    return candidate
        raise WriteConflict(
            f"No free name for {name_hint} after {self.name_retry_budget} retries",
            filename=name_hint,
        )

    def stat(self, filename: str) -> PhotoStat:
        check_pool_name(filename)
        with self._lock:
            data = self._files.get(filename)
        if data is None:
            raise NotFound(f"Photo not found: {filename}", filename=filename)
        return PhotoStat(size_bytes=len(data))

    def remove(self, filename: str) -> None:
        check_pool_name(filename)
        with self._lock:
            if self._files.pop(filename, None) is None:
                raise NotFound(f"Photo not found: {filename}", filename=filename)

    def list_names(self) -> set[str]:
        with self._lock:
            return set(self._files)

    def health_check(self) -> dict[str, str]:
        return {"status": "healthy", "root": "memory://"}
