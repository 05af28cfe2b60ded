"""Cache interface."""

from collections.abc import Awaitable, Callable
from typing import Protocol, TypeVar

V = TypeVar("V")


class ICache(Protocol[V]):
    """Contract exposed to cache consumers.

    Absence is always represented by None, never by an exception.
    """

    async def get_if_present(self, key: str) -> V | None:
        """Return the cached value, or None on a miss."""
        ...

    async def get(self, key: str) -> V | None:
        """Return the cached value, or the default value on a miss."""
        ...

    async def get_or_compute(
        self,
        key: str,
        mapping_function: Callable[[str], V | None | Awaitable[V | None]],
    ) -> V | None:
        """Return the cached value, computing and storing it on a miss."""
        ...

    async def put(self, key: str, value: V) -> None:
        """Store a value under the key."""
        ...

    async def invalidate(self, key: str) -> None:
        """Remove the key from the cache."""
        ...

    async def invalidate_all(self) -> None:
        """Remove every key of the cache, where the implementation supports it.

        May be a no-op; RegionCache does not delete anything.
        """
        ...
