"""In-memory remote store implementation."""

import math
import time
from collections.abc import Callable
from datetime import timedelta
from typing import Any, NamedTuple

from cachetools import TLRUCache  # type: ignore[import-untyped]


class _StoredValue(NamedTuple):
    value: Any
    ttl: float | None


def _time_to_use(key: str, stored: _StoredValue, now: float) -> float:
    if stored.ttl is None:
        return math.inf
    return now + stored.ttl


class InMemoryRemoteStore:
    """Single-process stand-in for a shared remote store.

    Supports per-key TTL and TTL refresh through cachetools' TLRUCache.
    Values are kept as-is, without serialization. Suitable for tests and
    local development; use RedisRemoteStore to share a region between
    processes.
    """

    def __init__(
        self,
        maxsize: int = 10000,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory store.

        Args:
            maxsize: Maximum number of entries kept.
            timer: Clock used for expiry, in seconds.
        """
        self._maxsize = maxsize
        self._cache: TLRUCache[str, _StoredValue] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )

    async def get(self, key: str) -> Any | None:
        """Retrieve a stored value.

        Args:
            key: The key to retrieve.

        Returns:
            The stored value, or None if not found or expired.
        """
        stored = self._cache.get(key)
        return stored.value if stored is not None else None

    async def set(
        self,
        key: str,
        value: Any,
        ttl: timedelta | None = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The key.
            value: The value to store.
            ttl: Optional time-to-live. If None, the entry never expires.
        """
        seconds = ttl.total_seconds() if ttl is not None else None
        self._cache[key] = _StoredValue(value, seconds)

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Reset the time-to-live of an entry.

        Args:
            key: The key.
            ttl: The new time-to-live, counted from now.

        Returns:
            True if the key existed, False otherwise.
        """
        stored = self._cache.get(key)
        if stored is None:
            return False
        self._cache[key] = _StoredValue(stored.value, ttl.total_seconds())
        return True

    async def delete(self, key: str) -> bool:
        """Delete a stored value.

        Args:
            key: The key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        try:
            del self._cache[key]
            return True
        except KeyError:
            return False

    def __contains__(self, key: object) -> bool:
        return key in self._cache

    def __len__(self) -> int:
        """Return the number of live entries."""
        self._cache.expire()
        return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum number of entries."""
        return self._maxsize
