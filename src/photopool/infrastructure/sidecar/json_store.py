"""Sidecar descriptions stored as one JSON document per photo."""

from __future__ import annotations

import json
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Optional

from loguru import logger

from photopool.domain.errors import IOFailure
from photopool.domain.naming import check_pool_name

SUFFIX = ".json"


class JsonDescriptionStore:
    """Keeps ``<filename>.json`` documents in a directory.

    One document per photo keeps writers for different photos independent.
    Each write goes to a temp file first and is swapped in with
    ``os.replace``.
    """

    def __init__(self, directory: str | Path) -> None:
        self.directory = Path(directory).resolve()
        self.directory.mkdir(parents=True, exist_ok=True)

    def _doc_path(self, filename: str) -> Path:
        return self.directory / f"{check_pool_name(filename)}{SUFFIX}"

    def _load(self, filename: str) -> Optional[dict[str, Any]]:
        path = self._doc_path(filename)
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return None
        except json.JSONDecodeError as e:
            logger.warning(f"Ignoring unreadable sidecar {path.name}: {e}")
            return None
        except OSError as e:
            raise IOFailure(f"Unable to read description for {filename}: {e}", filename=filename) from e
        return data if isinstance(data, dict) else None

    def get(self, filename: str) -> Optional[str]:
        data = self._load(filename)
        if data is None:
            return None
        description = data.get("description")
        return description if isinstance(description, str) else None

    def get_many(self, filenames: Iterable[str]) -> dict[str, str]:
        found: dict[str, str] = {}
        for name in filenames:
            description = self.get(name)
            if description is not None:
                found[name] = description
        return found

    def put(self, filename: str, description: str) -> None:
        path = self._doc_path(filename)
        tmp_path = self.directory / f".tmp-{uuid.uuid4().hex}"
        doc = {
            "filename": filename,
            "description": description,
            "updated_at": datetime.now(timezone.utc).isoformat(),
        }
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(doc, f, ensure_ascii=False, indent=2, sort_keys=True)
            os.replace(tmp_path, path)
        except OSError as e:
            tmp_path.unlink(missing_ok=True)
            raise IOFailure(f"Unable to save description for {filename}: {e}", filename=filename) from e

    def delete(self, filename: str) -> bool:
        try:
            self._doc_path(filename).unlink()
        except FileNotFoundError:
            return False
        except OSError as e:
            raise IOFailure(f"Unable to delete description for {filename}: {e}", filename=filename) from e
        return True

    def keys(self) -> set[str]:
        try:
            return {
                p.name[: -len(SUFFIX)]
                for p in self.directory.iterdir()
                if p.name.endswith(SUFFIX) and not p.name.startswith(".")
            }
        except OSError as e:
            raise IOFailure(f"Unable to scan sidecar directory {self.directory}: {e}") from e

    def health_check(self) -> dict[str, str]:
        if self.directory.is_dir() and os.access(self.directory, os.W_OK):
            return {"status": "healthy", "backend": "json"}
        return {"status": "unhealthy", "backend": "json"}
