"""regioncache - region-scoped, TTL-aware caching over a shared remote store.

Every key of a region is stored as ``<region>:<key>`` in the remote
store, written with the region's TTL, and read with optional TTL
refresh and default-value substitution.

Example with Redis:
    from datetime import timedelta

    from regioncache import RegionCache, RegionCacheConfig
    from regioncache.infrastructure.stores.redis_store import RedisRemoteStore

    store = RedisRemoteStore(redis_url="redis://localhost:6379")
    config = RegionCacheConfig.for_region(
        "org-units",
        expire_after=timedelta(hours=1),
        refresh_expiry_on_access=True,
    )
    cache = RegionCache(store, config)

    await cache.put("ImspTQPwCqd", {"name": "Sierra Leone"})
    unit = await cache.get_or_compute("O6uvpzGd5pu", load_org_unit)

Memoizing a coroutine function:
    from regioncache import memoize

    @memoize(cache, key="{uid}")
    async def load_org_unit(uid: str) -> dict:
        return await db.fetch_org_unit(uid)
"""

from regioncache.core.entities import KEY_SEPARATOR, RegionCacheConfig, RegionKey
from regioncache.core.exceptions import InvalidArgumentError, RegionCacheError
from regioncache.core.interfaces import ICache, IRemoteStore, ISerializer
from regioncache.core.services import RegionCache
from regioncache.decorators import memoize
from regioncache.infrastructure import (
    InMemoryRemoteStore,
    JsonSerializer,
    SerializationError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "KEY_SEPARATOR",
    "RegionCacheConfig",
    "RegionKey",
    # Exceptions
    "RegionCacheError",
    "InvalidArgumentError",
    "SerializationError",
    # Core interfaces
    "ICache",
    "IRemoteStore",
    "ISerializer",
    # Core services
    "RegionCache",
    # Infrastructure implementations
    "InMemoryRemoteStore",
    "JsonSerializer",
    # Decorators
    "memoize",
]
