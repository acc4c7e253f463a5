"""Filename rules shared by the storage adapters and the upload path."""

from __future__ import annotations

import os
from typing import Iterator

from photopool.domain.errors import InvalidInput


def secure_name(name: str) -> str:
    """Reduce a client-supplied filename to a safe basename."""
    name = os.path.basename(name.replace("\\", "/")).replace(" ", "_")
    name = "".join(c for c in name if c.isalnum() or c in ("_", "-", "."))
    return name.lstrip(".")


def check_pool_name(filename: str) -> str:
    """Reject names that can never refer to a file directly inside the pool."""
    if (
        not filename
        or filename.startswith(".")
        or "/" in filename
        or "\\" in filename
        or "\x00" in filename
    ):
        raise InvalidInput(f"Invalid filename: {filename!r}", filename=filename)
    return filename


def candidate_names(name_hint: str, retry_budget: int) -> Iterator[str]:
    """Yield ``name_hint`` then ``stem-1.ext`` ... ``stem-N.ext``."""
    yield name_hint
    stem, ext = os.path.splitext(name_hint)
    for attempt in range(1, retry_budget + 1):
        yield f"{stem}-{attempt}{ext}"


# Common limit for a single path component (ext4, APFS, NTFS)
MAX_NAME_BYTES = 255

# Longest suffix a stored name picks up elsewhere: the sidecar's ".json"
SIDECAR_SUFFIX_BYTES = len(".json")


def truncate_utf8(text: str, max_bytes: int) -> str:
    """Cut ``text`` to at most ``max_bytes`` UTF-8 bytes without splitting a character."""
    if max_bytes <= 0:
        return ""
    return text.encode("utf-8")[:max_bytes].decode("utf-8", "ignore")


def stem_budget(prefix: str, ext: str, retry_budget: int) -> int:
    """Bytes left for the stem of ``<prefix><stem>-<retry><ext>`` plus a sidecar suffix."""
    used = (
        len(prefix.encode("utf-8"))
        + len(ext.encode("utf-8"))
        + len(f"-{retry_budget}")
        + SIDECAR_SUFFIX_BYTES
    )
    return MAX_NAME_BYTES - used
