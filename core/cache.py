# core/cache.py

"""
In-memory cache for full-collection snapshots.

Contract: a collection's snapshot is invalidated on every create, update
or delete made through its repository, so the next listing after a write
always goes back to the store. Entries also expire after
``LIST_CACHE_TTL_SECONDS`` to bound staleness from writes made by other
processes (last write wins; there is no version check).
"""

import copy
import time
from threading import Lock
from typing import Any, Optional

from core.logging_config import get_logger

log = get_logger("cache")


class CacheEntry:
    """Represents a cached value with expiration time."""

    def __init__(self, value: Any, ttl_seconds: float):
        self.value = value
        self.expires_at = time.monotonic() + ttl_seconds

    def is_expired(self) -> bool:
        return time.monotonic() >= self.expires_at


class SnapshotCache:
    """
    Thread-safe TTL cache. Values are deep-copied on the way in and out so
    callers can never mutate a cached snapshot in place.
    """

    def __init__(self):
        self._entries: dict[str, CacheEntry] = {}
        self._lock = Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            if entry.is_expired():
                del self._entries[key]
                return None

            return copy.deepcopy(entry.value)

    def set(self, key: str, value: Any, ttl_seconds: float = 15):
        with self._lock:
            self._entries[key] = CacheEntry(copy.deepcopy(value), ttl_seconds)

    def delete(self, key: str):
        with self._lock:
            self._entries.pop(key, None)

    def clear(self):
        with self._lock:
            self._entries.clear()


# Global cache instance
_cache = SnapshotCache()


def snapshot_key(collection) -> str:
    return f"snapshot:{collection}"


def cache_get(key: str) -> Optional[Any]:
    return _cache.get(key)


def cache_set(key: str, value: Any, ttl_seconds: float = 15):
    _cache.set(key, value, ttl_seconds)


def cache_clear():
    _cache.clear()


def invalidate_collection(collection):
    """Drop the cached listing of ``collection``; the next read refetches."""
    _cache.delete(snapshot_key(collection))
    log.debug("Invalidated snapshot of %s", collection)
