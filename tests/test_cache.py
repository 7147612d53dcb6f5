"""Tests for the in-memory cache."""

from coffee_tracker.services.cache import InMemoryCache


def test_cache_set_get_delete() -> None:
    cache = InMemoryCache()

    cache.set("token", 7, ttl_seconds=60)
    assert cache.get("token") == 7

    cache.delete("token")
    assert cache.get("token") is None

    cache.delete("token")


def test_cache_expires_entries() -> None:
    cache = InMemoryCache()

    cache.set("token", 7, ttl_seconds=0)

    assert cache.get("token") is None


def test_clear_drops_all_entries() -> None:
    cache = InMemoryCache()
    cache.set("a", 1, ttl_seconds=60)
    cache.set("b", 2, ttl_seconds=60)

    assert cache.clear() == 2
    assert cache.get("a") is None
    assert cache.clear() == 0
