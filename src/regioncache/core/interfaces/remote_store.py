"""Remote store interface."""

from datetime import timedelta
from typing import Protocol, TypeVar

V = TypeVar("V")


class IRemoteStore(Protocol[V]):
    """Contract for the shared key-value store behind a cache region.

    Stores own serialization, connection handling and their own
    eviction. Single-key operations are expected to be atomic at the
    store. Failures are raised to the caller unchanged.
    """

    async def get(self, key: str) -> V | None:
        """Retrieve a stored value.

        Args:
            key: The physical key.

        Returns:
            The stored value, or None if absent or expired.
        """
        ...

    async def set(
        self,
        key: str,
        value: V,
        ttl: timedelta | None = None,
    ) -> None:
        """Store a value.

        Args:
            key: The physical key.
            value: The value to store.
            ttl: Time-to-live. If None, the entry never expires.
        """
        ...

    async def expire(self, key: str, ttl: timedelta) -> bool:
        """Reset the time-to-live of an entry.

        Args:
            key: The physical key.
            ttl: The new time-to-live, counted from now.

        Returns:
            True if the key existed, False otherwise.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete an entry.

        Args:
            key: The physical key.

        Returns:
            True if the key existed and was deleted, False otherwise.
        """
        ...
