"""Core domain layer for regioncache."""

from regioncache.core.entities import KEY_SEPARATOR, RegionCacheConfig, RegionKey
from regioncache.core.exceptions import InvalidArgumentError, RegionCacheError
from regioncache.core.interfaces import ICache, IRemoteStore, ISerializer
from regioncache.core.services import RegionCache

__all__ = [
    # Entities
    "KEY_SEPARATOR",
    "RegionCacheConfig",
    "RegionKey",
    # Exceptions
    "RegionCacheError",
    "InvalidArgumentError",
    # Interfaces
    "ICache",
    "IRemoteStore",
    "ISerializer",
    # Services
    "RegionCache",
]
