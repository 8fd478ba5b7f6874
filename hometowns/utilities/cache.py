"""In-memory fetch cache with a freshness window.

Holds the most recent decoded response per key. Each key carries its own
timestamp, so refreshing a roster never makes a stale schedule look fresh.

Not thread-safe: used only from the event loop that owns it.
"""

import logging
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

logger = logging.getLogger(__name__)

# Default freshness window (seconds)
CACHE_DURATION = 5 * 60


def make_cache_key(*parts: str) -> str:
    """Build a cache key from parts, e.g. ("roster", "TOR") -> "roster-TOR"."""
    return "-".join(str(p) for p in parts)


@dataclass
class CacheEntry:
    """A cached value and the clock reading when it was stored."""

    value: Any
    stored_at: float


class FetchCache:
    """Key -> decoded response cache with a fixed TTL.

    Args:
        ttl_seconds: Freshness window applied to every key
        clock: Monotonic time source (seconds); injectable for tests
    """

    def __init__(
        self,
        ttl_seconds: float = CACHE_DURATION,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._ttl = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}
        self._hits = 0
        self._misses = 0

    @property
    def ttl_seconds(self) -> float:
        return self._ttl

    def _is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.stored_at < self._ttl

    def get(self, key: str) -> Any | None:
        """Get a fresh value, or None if missing or stale."""
        entry = self._entries.get(key)
        if entry is None or not self._is_fresh(entry):
            return None
        return entry.value

    def set(self, key: str, value: Any) -> None:
        self._entries[key] = CacheEntry(value=value, stored_at=self._clock())

    async def get_or_fetch(
        self,
        key: str,
        fetch_fn: Callable[[], Awaitable[Any]],
        force_fresh: bool = False,
    ) -> Any:
        """Return the cached value for key, or fetch and store a new one.

        A fresh entry is returned without calling fetch_fn unless force_fresh
        is set. If fetch_fn raises, the existing entry is left untouched and
        the exception propagates.

        Args:
            key: Cache key (e.g. "schedules", "roster-TOR")
            fetch_fn: Zero-argument coroutine function producing the value
            force_fresh: Skip the cache lookup and always fetch

        Returns:
            Cached or freshly fetched value
        """
        if not force_fresh:
            entry = self._entries.get(key)
            if entry is not None and self._is_fresh(entry):
                self._hits += 1
                logger.debug("[CACHE] Hit: %s", key)
                return entry.value

        self._misses += 1
        logger.debug("[CACHE] Miss: %s (force_fresh=%s)", key, force_fresh)
        value = await fetch_fn()
        self.set(key, value)
        return value

    def invalidate(self, key: str) -> None:
        """Drop a single key."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop all entries and reset counters."""
        self._entries.clear()
        self._hits = 0
        self._misses = 0

    def stats(self) -> dict:
        """Get cache statistics."""
        now = self._clock()
        return {
            "entries": len(self._entries),
            "hits": self._hits,
            "misses": self._misses,
            "ttl_seconds": self._ttl,
            "ages": {
                key: round(now - entry.stored_at, 1) for key, entry in self._entries.items()
            },
        }
