"""Infrastructure layer implementations for regioncache."""

from regioncache.infrastructure.serializers import JsonSerializer, SerializationError
from regioncache.infrastructure.stores import InMemoryRemoteStore

__all__ = [
    "InMemoryRemoteStore",
    "JsonSerializer",
    "SerializationError",
]
