"""Exceptions raised by regioncache."""


class RegionCacheError(Exception):
    """Base class for regioncache errors."""

    pass


class InvalidArgumentError(RegionCacheError, ValueError):
    """Raised when a caller passes an argument the cache cannot accept.

    Always raised before any call reaches the remote store.
    """

    pass
