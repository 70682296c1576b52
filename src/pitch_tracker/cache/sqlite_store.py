from __future__ import annotations

import sqlite3
import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from pathlib import Path

_SCHEMA = (
    "CREATE TABLE IF NOT EXISTS response_cache ("
    "  namespace TEXT NOT NULL,"
    "  key TEXT NOT NULL,"
    "  value TEXT NOT NULL,"
    "  expires_at REAL NOT NULL,"
    "  PRIMARY KEY (namespace, key)"
    ")"
)


class SqliteCacheStore:
    """TTL cache for Stats API response bodies.

    One connection is shared between threads; access is serialized with a lock
    so the enrichment fan-out can read and write concurrently.
    """

    def __init__(self, db_path: Path, clock: Callable[[], float] = time.time) -> None:
        self._db_path = db_path
        self._clock = clock
        self._lock = threading.Lock()
        self._conn: sqlite3.Connection | None = None

    def _connect(self) -> sqlite3.Connection:
        if self._conn is None:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path), check_same_thread=False)
            conn.execute("PRAGMA busy_timeout=5000")
            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute(_SCHEMA)
            self._conn = conn
        return self._conn

    @contextmanager
    def _connection(self) -> Iterator[sqlite3.Connection]:
        with self._lock:
            conn = self._connect()
            yield conn
            conn.commit()

    def get(self, namespace: str, key: str) -> str | None:
        with self._connection() as conn:
            row = conn.execute(
                "SELECT value, expires_at FROM response_cache WHERE namespace = ? AND key = ?",
                (namespace, key),
            ).fetchone()
            if row is None:
                return None
            value, expires_at = row
            if self._clock() >= expires_at:
                conn.execute("DELETE FROM response_cache WHERE namespace = ? AND key = ?", (namespace, key))
                return None
            return value

    def put(self, namespace: str, key: str, value: str, ttl_seconds: int) -> None:
        with self._connection() as conn:
            conn.execute(
                "INSERT OR REPLACE INTO response_cache (namespace, key, value, expires_at) VALUES (?, ?, ?, ?)",
                (namespace, key, value, self._clock() + ttl_seconds),
            )

    def invalidate(self, namespace: str, key: str | None = None) -> None:
        with self._connection() as conn:
            if key is not None:
                conn.execute("DELETE FROM response_cache WHERE namespace = ? AND key = ?", (namespace, key))
            else:
                conn.execute("DELETE FROM response_cache WHERE namespace = ?", (namespace,))

    def purge_expired(self) -> int:
        """Delete every expired entry and return how many were removed."""
        with self._connection() as conn:
            cursor = conn.execute("DELETE FROM response_cache WHERE expires_at <= ?", (self._clock(),))
            return cursor.rowcount

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
