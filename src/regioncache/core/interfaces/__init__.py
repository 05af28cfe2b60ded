"""Core interfaces (Protocol classes) for regioncache."""

from regioncache.core.interfaces.cache import ICache
from regioncache.core.interfaces.remote_store import IRemoteStore
from regioncache.core.interfaces.serializer import ISerializer

__all__ = [
    "ICache",
    "IRemoteStore",
    "ISerializer",
]
