"""SQLite-backed cache that survives process restarts."""
from __future__ import annotations

import json
import logging
import sqlite3
import time
from pathlib import Path
from typing import Callable

from domain.entities import Annotation, AnnotationSet
from domain.interfaces import CacheStore

logger = logging.getLogger(__name__)


class SqliteCacheStore(CacheStore):
    """Stores annotation sets as JSON rows with their creation time and TTL."""

    def __init__(
        self,
        db_path: str | Path = "keywordsuggest.db",
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._db_path = Path(db_path)
        self._clock = clock
        self._ensure_schema()

    def _connect(self) -> sqlite3.Connection:
        return sqlite3.connect(self._db_path)

    def _ensure_schema(self) -> None:
        if self._db_path.parent != Path("."):
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS keyword_cache (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL,
                    created_at REAL NOT NULL,
                    ttl REAL NOT NULL
                )
                """
            )

    def get(self, key: str) -> AnnotationSet | None:
        with self._connect() as conn:
            row = conn.execute(
                "SELECT value, created_at, ttl FROM keyword_cache WHERE key = ?",
                (key,),
            ).fetchone()
            if row is None:
                return None
            value, created_at, ttl = row
            if self._clock() > created_at + ttl:
                conn.execute(
                    "DELETE FROM keyword_cache WHERE key = ? AND created_at = ?",
                    (key, created_at),
                )
                return None
        return tuple(Annotation.from_dict(item) for item in json.loads(value))

    def put(self, key: str, value: AnnotationSet, ttl: float) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        payload = json.dumps([annotation.to_dict() for annotation in value], ensure_ascii=False)
        with self._connect() as conn:
            conn.execute(
                "REPLACE INTO keyword_cache (key, value, created_at, ttl) VALUES (?, ?, ?, ?)",
                (key, payload, self._clock(), ttl),
            )

    def purge_expired(self) -> int:
        """Delete every expired row and return how many were removed."""
        with self._connect() as conn:
            cursor = conn.execute(
                "DELETE FROM keyword_cache WHERE created_at + ttl < ?",
                (self._clock(),),
            )
            removed = cursor.rowcount
        if removed:
            logger.debug("Purged %d expired cache rows.", removed)
        return removed


__all__ = ["SqliteCacheStore"]
