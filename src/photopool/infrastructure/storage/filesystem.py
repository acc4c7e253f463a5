"""Directory-backed photo pool."""

from __future__ import annotations

import os
import uuid
from pathlib import Path

from loguru import logger

from photopool.domain.entities.photo import PhotoStat
from photopool.domain.errors import IOFailure, NotFound, WriteConflict
from photopool.domain.naming import candidate_names, check_pool_name

TMP_PREFIX = ".tmp-"


class FilesystemPhotoStorage:
    """Photo pool stored as one regular file per photo in a single directory.

    New content is staged in a hidden temp file and hard-linked into place, so
    a name that already exists is never replaced and readers never observe a
    half-written photo.
    """

    def __init__(self, root: str | Path, name_retry_budget: int = 5) -> None:
        self.root = Path(root).resolve()
        self.name_retry_budget = name_retry_budget
        self.root.mkdir(parents=True, exist_ok=True)

    def _path(self, filename: str) -> Path:
        return self.root / check_pool_name(filename)

    def locate(self, filename: str) -> str:
        return str(self._path(filename))

    def put(self, name_hint: str, data: bytes) -> str:
        check_pool_name(name_hint)
        tmp_path = self.root / f"{TMP_PREFIX}{uuid.uuid4().hex}"
        try:
            with open(tmp_path, "xb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())

            for candidate in candidate_names(name_hint, self.name_retry_budget):
                try:
                    os.link(tmp_path, self.root / candidate)
                except FileExistsError:
                    logger.debug(f"Name taken, regenerating: {candidate}")
                    continue
                return candidate
        except OSError as e:
            raise IOFailure(f"Unable to write {name_hint}: {e}", filename=name_hint) from e
        finally:
            try:
                tmp_path.unlink()
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.warning(f"Could not remove staging file {tmp_path.name}: {e}")

        raise WriteConflict(
            f"No free name for {name_hint} after {self.name_retry_budget} retries",
            filename=name_hint,
        )

    def stat(self, filename: str) -> PhotoStat:
        path = self._path(filename)
        try:
            st = path.stat()
        except FileNotFoundError as e:
            raise NotFound(f"Photo not found: {filename}", filename=filename) from e
        except OSError as e:
            raise IOFailure(f"Unable to stat {filename}: {e}", filename=filename) from e
        if not path.is_file():
            raise NotFound(f"Photo not found: {filename}", filename=filename)
        return PhotoStat(size_bytes=st.st_size)

    def remove(self, filename: str) -> None:
        path = self._path(filename)
        if path.is_dir():
            raise NotFound(f"Photo not found: {filename}", filename=filename)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise NotFound(f"Photo not found: {filename}", filename=filename) from e
        except OSError as e:
            raise IOFailure(f"Unable to delete {filename}: {e}", filename=filename) from e

    def list_names(self) -> set[str]:
        try:
            with os.scandir(self.root) as entries:
                return {
                    entry.name
                    for entry in entries
                    if not entry.name.startswith(".") and entry.is_file()
                }
        except OSError as e:
            raise IOFailure(f"Unable to scan directory {self.root}: {e}") from e

    def health_check(self) -> dict[str, str]:
        """Check the pool directory is present and writable."""
        if self.root.is_dir() and os.access(self.root, os.W_OK):
            return {"status": "healthy", "root": str(self.root)}
        return {"status": "unhealthy", "root": str(self.root)}
