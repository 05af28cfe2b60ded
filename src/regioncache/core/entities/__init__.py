"""Domain entities for regioncache."""

from regioncache.core.entities.region_cache_config import RegionCacheConfig
from regioncache.core.entities.region_key import KEY_SEPARATOR, RegionKey

__all__ = [
    "KEY_SEPARATOR",
    "RegionCacheConfig",
    "RegionKey",
]
