"""SQLite-backed sidecar description store."""

from __future__ import annotations

import sqlite3
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator, Iterable, Optional

from loguru import logger

from photopool.domain.errors import IOFailure


class SQLiteDescriptionStore:
    """Descriptions keyed by filename in a single SQLite table."""

    def __init__(self, db_path: str | Path = "./data/descriptions.db"):
        self.db_path = Path(db_path)
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Create database and table if they don't exist."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)

        with self._connection() as conn:
            conn.executescript("""
                PRAGMA journal_mode=WAL;

                CREATE TABLE IF NOT EXISTS descriptions (
                    filename TEXT PRIMARY KEY,
                    description TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );
            """)
        logger.info(f"Description database initialized at {self.db_path}")

    @contextmanager
    def _connection(self) -> Generator[sqlite3.Connection, None, None]:
        """Context manager for database connections."""
        try:
            conn = sqlite3.connect(self.db_path, timeout=30.0)
        except sqlite3.Error as e:
            raise IOFailure(f"Unable to open {self.db_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            raise IOFailure(f"Description store error: {e}") from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def get(self, filename: str) -> Optional[str]:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT description FROM descriptions WHERE filename = ?",
                (filename,),
            ).fetchone()
        return row["description"] if row else None

    def get_many(self, filenames: Iterable[str]) -> dict[str, str]:
        names = list(filenames)
        if not names:
            return {}
        placeholders = ",".join("?" for _ in names)
        with self._connection() as conn:
            rows = conn.execute(
                f"SELECT filename, description FROM descriptions WHERE filename IN ({placeholders})",
                names,
            ).fetchall()
        return {row["filename"]: row["description"] for row in rows}

    def put(self, filename: str, description: str) -> None:
        now = datetime.now(timezone.utc).isoformat()
        with self._connection() as conn:
            conn.execute(
                """INSERT INTO descriptions (filename, description, updated_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT(filename) DO UPDATE SET
                       description = excluded.description,
                       updated_at = excluded.updated_at""",
                (filename, description, now),
            )

    def delete(self, filename: str) -> bool:
        with self._connection() as conn:
            cursor = conn.execute("DELETE FROM descriptions WHERE filename = ?", (filename,))
            return cursor.rowcount > 0

    def keys(self) -> set[str]:
        with self._connection() as conn:
            rows = conn.execute("SELECT filename FROM descriptions").fetchall()
        return {row["filename"] for row in rows}

    def health_check(self) -> dict[str, str]:
        try:
            with self._connection() as conn:
                conn.execute("SELECT 1")
            return {"status": "healthy", "backend": "sqlite"}
        except IOFailure as e:
            logger.error(f"Description store health check failed: {e}")
            return {"status": "unhealthy", "backend": "sqlite", "error": str(e)}
