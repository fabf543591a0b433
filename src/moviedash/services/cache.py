"""In-process TTL cache for the raw Radarr response."""

import logging
import threading
import time
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 3600


class TTLCache:
    """
    Key/value store where every entry expires after a fixed time-to-live.

    Expired entries are evicted lazily on lookup. Safe to share between
    concurrent requests; overlapping writes resolve as last writer wins.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._store: dict[str, tuple[Any, float]] = {}

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._store[key]
                return None
            return value

    def set(self, key: str, value: Any, ttl_seconds: float) -> None:
        with self._lock:
            self._store[key] = (value, self._clock() + ttl_seconds)

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)


class ResponseCache:
    """Single-entry cache holding the most recent Radarr response body."""

    KEY = "movies"

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self._cache = TTLCache(clock=clock)

    def get(self) -> Any | None:
        """Return the cached body, or None when nothing fresh is stored."""
        return self._cache.get(self.KEY)

    def set(self, raw: bytes, ttl_seconds: float | None = None) -> None:
        """Replace the cached body and restart its expiry."""
        ttl = self.ttl_seconds if ttl_seconds is None else ttl_seconds
        self._cache.set(self.KEY, raw, ttl)
        logger.debug(f"Cached {len(raw)} bytes for {ttl}s")
