"""Region cache - caching facade over a shared remote store."""

import copy
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from regioncache.core.entities.region_cache_config import RegionCacheConfig
from regioncache.core.entities.region_key import RegionKey
from regioncache.core.exceptions import InvalidArgumentError
from regioncache.core.interfaces.remote_store import IRemoteStore

logger = logging.getLogger(__name__)

V = TypeVar("V")


class RegionCache(Generic[V]):
    """Cache scoped to one region of a shared remote store.

    Every key is prefixed with the region name, writes honor the
    region's TTL policy, and reads substitute the region's default value
    where the operation calls for it. The cache keeps no state besides
    its configuration, so one instance can be shared by any number of
    tasks, and any number of processes may use the same region on the
    same store.

    Remote store failures are not caught, retried or masked.
    """

    def __init__(
        self,
        store: IRemoteStore[V],
        config: RegionCacheConfig,
    ) -> None:
        """Initialize the region cache.

        Args:
            store: The remote store holding the entries.
            config: The region's configuration.
        """
        self._store = store
        self._config = config

    @property
    def config(self) -> RegionCacheConfig:
        """Get the region configuration."""
        return self._config

    @property
    def region(self) -> str:
        """Get the region name."""
        return self._config.region

    async def get_if_present(self, key: str) -> V | None:
        """Get the value stored under key.

        Never substitutes the default value.

        Args:
            key: The caller's key.

        Returns:
            The stored value, or None if absent.
        """
        self._check_key(key)
        return await self._read(self._actual_key(key))

    async def get(self, key: str) -> V | None:
        """Get the value stored under key, or the default value on a miss.

        Args:
            key: The caller's key.

        Returns:
            The stored value, else a shallow copy of the configured default
            value (None if no default is configured).
        """
        self._check_key(key)
        value = await self._read(self._actual_key(key))
        if value is None:
            return self._default()
        return value

    async def get_or_compute(
        self,
        key: str,
        mapping_function: Callable[[str], V | None | Awaitable[V | None]],
    ) -> V | None:
        """Get the value stored under key, computing it on a miss.

        On a miss ``mapping_function(key)`` is called; it may return a
        value or an awaitable. A non-None result is stored and returned. A
        None result is not stored and the default value is returned.

        The read and the write are separate store calls. Concurrent
        callers missing the same key may each compute and write it, and
        the last write wins. Use an idempotent mapping function if that
        matters.

        Args:
            key: The caller's key.
            mapping_function: Computes the value for a missing key.

        Returns:
            The stored or computed value, else the default value.
        """
        self._check_key(key)
        if not callable(mapping_function):
            raise InvalidArgumentError("Mapping function must be callable")

        actual_key = self._actual_key(key)
        value = await self._read(actual_key)
        if value is not None:
            return value

        computed = mapping_function(key)
        if inspect.isawaitable(computed):
            computed = await computed

        if computed is None:
            logger.debug("Mapping function returned None for %s", actual_key)
            return self._default()

        await self._store.set(actual_key, computed, self._config.ttl)
        logger.debug("Stored computed value for %s", actual_key)
        return computed

    async def put(self, key: str, value: V) -> None:
        """Store value under key, with the region's TTL if enabled.

        Args:
            key: The caller's key.
            value: The value to store. Use ``invalidate`` to remove a key.
        """
        self._check_key(key)
        if value is None:
            raise InvalidArgumentError("Value cannot be None")

        await self._store.set(self._actual_key(key), value, self._config.ttl)

    async def invalidate(self, key: str) -> None:
        """Remove key from the store. Succeeds if the key is already absent.

        Args:
            key: The caller's key.
        """
        self._check_key(key)
        actual_key = self._actual_key(key)
        deleted = await self._store.delete(actual_key)
        logger.debug("Invalidated %s (existed=%s)", actual_key, deleted)

    async def invalidate_all(self) -> None:
        """Does nothing.

        Removing every key of a region needs a scan of the store, which
        this cache does not perform. Use an administrative operation of
        the store to clear a region.
        """

    async def _read(self, actual_key: str) -> V | None:
        """Read a physical key, refreshing its TTL if configured."""
        if self._config.refreshes_on_access:
            await self._store.expire(actual_key, self._config.ttl)

        value = await self._store.get(actual_key)
        if value is None:
            logger.debug("Cache miss for %s", actual_key)
        else:
            logger.debug("Cache hit for %s", actual_key)
        return value

    def _default(self) -> Any | None:
        """Return a shallow copy of the default value."""
        return copy.copy(self._config.default_value)

    def _actual_key(self, key: str) -> str:
        return str(RegionKey(self._config.region, key))

    @staticmethod
    def _check_key(key: Any) -> None:
        if not isinstance(key, str) or not key:
            raise InvalidArgumentError("Key must be a non-empty string")
