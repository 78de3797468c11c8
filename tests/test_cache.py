# tests/test_cache.py

"""
Tests for the collection snapshot cache.
"""

from core.cache import (
    SnapshotCache,
    cache_clear,
    cache_get,
    cache_set,
    invalidate_collection,
    snapshot_key,
)


def test_cache_set_and_get():
    cache_set("test_key", "test_value", ttl_seconds=60)
    assert cache_get("test_key") == "test_value"


def test_cache_expiration():
    cache = SnapshotCache()
    cache.set("expiring_key", "value", ttl_seconds=0)
    assert cache.get("expiring_key") is None
    assert "expiring_key" not in cache._entries


def test_cached_values_are_copies():
    cache_set("docs", [{"id": "1"}], ttl_seconds=60)

    first = cache_get("docs")
    first[0]["id"] = "mutated"

    assert cache_get("docs") == [{"id": "1"}]


def test_cache_clear():
    cache_set("key1", "value1")
    cache_set("key2", "value2")

    cache_clear()

    assert cache_get("key1") is None
    assert cache_get("key2") is None


def test_invalidate_collection_drops_only_that_snapshot():
    cache_set(snapshot_key("units"), [{"id": "u"}], ttl_seconds=60)
    cache_set(snapshot_key("properties"), [{"id": "p"}], ttl_seconds=60)

    invalidate_collection("units")

    assert cache_get(snapshot_key("units")) is None
    assert cache_get(snapshot_key("properties")) == [{"id": "p"}]
