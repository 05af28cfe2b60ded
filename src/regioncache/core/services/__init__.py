"""Domain services for regioncache."""

from regioncache.core.services.region_cache import RegionCache

__all__ = [
    "RegionCache",
]
