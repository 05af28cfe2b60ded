"""Remote store implementations.

RedisRemoteStore lives in ``regioncache.infrastructure.stores.redis_store`` and
needs the ``redis`` extra.
"""

from regioncache.infrastructure.stores.memory import InMemoryRemoteStore

__all__ = ["InMemoryRemoteStore"]
