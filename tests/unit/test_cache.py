"""Tests for the in-process TTL cache."""

import threading

from conftest import FakeClock

from moviedash.services.cache import ResponseCache, TTLCache


class TestTTLCache:
    def test_get_missing_key_returns_none(self, clock: FakeClock) -> None:
        cache = TTLCache(clock=clock)
        assert cache.get("nothing") is None

    def test_set_then_get_returns_value(self, clock: FakeClock) -> None:
        cache = TTLCache(clock=clock)
        cache.set("key", b"value", ttl_seconds=60)
        assert cache.get("key") == b"value"

    def test_value_still_present_just_before_expiry(self, clock: FakeClock) -> None:
        cache = TTLCache(clock=clock)
        cache.set("key", b"value", ttl_seconds=60)
        clock.advance(59.9)
        assert cache.get("key") == b"value"

    def test_expired_entry_is_a_miss_and_evicted(self, clock: FakeClock) -> None:
        cache = TTLCache(clock=clock)
        cache.set("key", b"value", ttl_seconds=60)
        clock.advance(60)
        assert cache.get("key") is None
        assert len(cache) == 0

    def test_keys_are_independent(self, clock: FakeClock) -> None:
        cache = TTLCache(clock=clock)
        cache.set("a", 1, ttl_seconds=10)
        cache.set("b", 2, ttl_seconds=100)
        clock.advance(50)
        assert cache.get("a") is None
        assert cache.get("b") == 2

    def test_concurrent_writers_leave_a_consistent_entry(self, clock: FakeClock) -> None:
        cache = TTLCache(clock=clock)
        values = [f"value-{i}".encode() for i in range(20)]

        def write(value: bytes) -> None:
            for _ in range(200):
                cache.set("key", value, ttl_seconds=60)
                cache.get("key")

        threads = [threading.Thread(target=write, args=(v,)) for v in values]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert cache.get("key") in values
        assert len(cache) == 1


class TestResponseCache:
    def test_empty_cache_is_a_miss(self, clock: FakeClock) -> None:
        assert ResponseCache(clock=clock).get() is None

    def test_set_then_get_within_ttl(self, clock: FakeClock) -> None:
        cache = ResponseCache(ttl_seconds=3600, clock=clock)
        cache.set(b"[]")
        assert cache.get() == b"[]"

    def test_miss_after_one_hour(self, clock: FakeClock) -> None:
        cache = ResponseCache(ttl_seconds=3600, clock=clock)
        cache.set(b"[]")
        clock.advance(3600)
        assert cache.get() is None

    def test_set_replaces_value_and_expiry(self, clock: FakeClock) -> None:
        cache = ResponseCache(ttl_seconds=3600, clock=clock)
        cache.set(b"old")
        clock.advance(3000)
        cache.set(b"new")
        clock.advance(3000)
        assert cache.get() == b"new"

    def test_explicit_ttl_overrides_default(self, clock: FakeClock) -> None:
        cache = ResponseCache(ttl_seconds=3600, clock=clock)
        cache.set(b"[]", ttl_seconds=5)
        clock.advance(5)
        assert cache.get() is None
