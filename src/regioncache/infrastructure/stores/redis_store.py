"""Redis remote store implementation."""

from datetime import timedelta
from typing import Any, Optional

import redis.asyncio as redis

from regioncache.core.interfaces.serializer import ISerializer
from regioncache.infrastructure.serializers.json import JsonSerializer


class RedisRemoteStore:
    """Redis remote store for regions shared between processes.

    Values go through a serializer on their way in and out. Redis errors
    are raised to the caller unchanged.
    """

    def __init__(
        self,
        client: Optional[redis.Redis] = None,
        redis_url: str = "redis://localhost:6379",
        serializer: Optional[ISerializer] = None,
    ) -> None:
        """Initialize the Redis remote store.

        Args:
            client: An existing Redis client. Created from redis_url if None.
            redis_url: Redis connection URL.
            serializer: Value serializer. Defaults to JsonSerializer.
        """
        self._redis: redis.Redis = (
            client if client is not None else redis.from_url(redis_url)  # type: ignore
        )
        self._serializer = serializer or JsonSerializer()

    async def get(self, key: str) -> Optional[Any]:
        """Retrieve a stored value.

        Args:
            key: The key to retrieve.

        Returns:
            The deserialized value, or None if not found or expired.
        """
        data = await self._redis.get(key)
        if data is None:
            return None
        return self._serializer.deserialize(data)

    async def set(
        self,
        key: str,
        value: Any,
        ttl: Optional[timedelta] = None,
    ) -> None:
        """Store value with optional TTL.

        Args:
            key: The key.
            value: The value to store.
            ttl: Optional time-to-live. If None, the entry never expires.
        """
        data = self._serializer.serialize(value)

        if ttl is not None:
            await self._redis.setex(key, int(ttl.total_seconds()), data)
        else:
            await self._redis.set(key, data)

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Reset the time-to-live of an entry.

        Args:
            key: The key.
            ttl: The new time-to-live, counted from now.

        Returns:
            True if the key existed, False otherwise.
        """
        return bool(await self._redis.expire(key, int(ttl.total_seconds())))

    async def delete(self, key: str) -> bool:
        """Delete a stored value.

        Args:
            key: The key to delete.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        result = await self._redis.delete(key)
        return result > 0

    async def close(self) -> None:
        """Close the Redis connection."""
        await self._redis.aclose()

    async def __aenter__(self) -> "RedisRemoteStore":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: type, exc_val: Exception, exc_tb: object) -> None:
        """Async context manager exit."""
        await self.close()
