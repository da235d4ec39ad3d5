# src/tolist/storage/blob_store.py

from __future__ import annotations

import contextlib
import logging
import os
import sqlite3
import time
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "todoTasks"


class SQLiteBlobStorage:
    """
    One named slot in a SQLite key-value table.

    Thread-safety:
    - each method opens its own SQLite connection
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3", key: str = DEFAULT_STORAGE_KEY) -> None:
        if not key or not key.strip():
            raise ValueError("storage key is required")
        self._db_path = Path(db_path)
        self._key = key.strip()
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()

    def __repr__(self) -> str:
        return f"SQLiteBlobStorage(db={self._db_path}, key={self._key})"

    def close(self) -> None:
        """Compatibility hook for shutdown (no persistent connections to close)."""
        return

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        with contextlib.suppress(sqlite3.DatabaseError):
            conn.execute("PRAGMA journal_mode=WAL")
        return conn

    def _ensure_schema(self) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS kv (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    updated_at REAL NOT NULL
                )
                """
            )
            conn.commit()
        finally:
            conn.close()

    # ---- BlobStorage ----

    def load(self) -> str | None:
        conn = self._get_conn()
        try:
            cur = conn.execute("SELECT value FROM kv WHERE key = ?", (self._key,))
            row = cur.fetchone()
            return None if row is None else str(row[0])
        finally:
            conn.close()

    def save(self, blob: str) -> None:
        conn = self._get_conn()
        try:
            conn.execute(
                """
                INSERT INTO kv(key, value, updated_at)
                VALUES (?, ?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = excluded.updated_at
                """,
                (self._key, blob, time.time()),
            )
            conn.commit()
            logger.debug("Saved blob key=%s bytes=%d", self._key, len(blob))
        finally:
            conn.close()


class JsonFileBlobStorage:
    """
    A single file holding the blob.

    Writes go to a sibling temp file and are moved into place with os.replace,
    so readers never see a half-written blob.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def __repr__(self) -> str:
        return f"JsonFileBlobStorage(path={self._path})"

    def load(self) -> str | None:
        if not self._path.exists():
            return None
        return self._path.read_text("utf-8")

    def save(self, blob: str) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp.write_text(blob, "utf-8")
        os.replace(tmp, self._path)
        logger.debug("Saved blob path=%s bytes=%d", self._path, len(blob))
