"""Process-local cache of annotation sets with per-entry expiry."""
from __future__ import annotations

import threading
import time
from typing import Callable

from domain.entities import AnnotationSet, CacheEntry
from domain.interfaces import CacheStore


class InMemoryCacheStore(CacheStore):
    """Keeps entries in a dict guarded by a lock.

    Expired entries are dropped lazily when read. With ``max_entries`` set,
    ``put`` first discards expired entries and then the oldest ones until the
    store fits.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._entries: dict[str, CacheEntry] = {}
        self._lock = threading.Lock()
        self._max_entries = max_entries or None
        self._clock = clock

    def get(self, key: str) -> AnnotationSet | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock()):
                del self._entries[key]
                return None
            return entry.value

    def put(self, key: str, value: AnnotationSet, ttl: float) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be positive")
        with self._lock:
            now = self._clock()
            self._entries.pop(key, None)
            self._entries[key] = CacheEntry(key=key, value=tuple(value), created_at=now, ttl=ttl)
            if self._max_entries is not None and len(self._entries) > self._max_entries:
                self._evict(now)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def _evict(self, now: float) -> None:
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]
        # dicts keep insertion order, so the first keys are the oldest writes
        while len(self._entries) > self._max_entries:
            del self._entries[next(iter(self._entries))]


__all__ = ["InMemoryCacheStore"]
