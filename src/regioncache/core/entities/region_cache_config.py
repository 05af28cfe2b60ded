"""Region cache configuration entity."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from regioncache.core.entities.region_key import KEY_SEPARATOR
from regioncache.core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class RegionCacheConfig:
    """Configuration of a single cache region.

    Fixed when the cache is constructed and never changed afterwards.

    Attributes:
        region: Name of the region. Prefixed to every key in the store.
        expiry: Time-to-live applied to written entries.
        expiry_enabled: If False, entries are written without a TTL.
        refresh_expiry_on_access: If True (and expiry is enabled), reads
            reset the remaining TTL of the entry.
        default_value: Returned by ``get`` on a miss. Never stored.
    """

    region: str
    expiry: timedelta = timedelta(0)
    expiry_enabled: bool = False
    refresh_expiry_on_access: bool = False
    default_value: Any | None = None

    def __post_init__(self) -> None:
        """Validate region name and expiry."""
        if not isinstance(self.region, str) or not self.region:
            raise InvalidArgumentError("Region must be a non-empty string")
        if KEY_SEPARATOR in self.region:
            raise InvalidArgumentError(
                f"Region must not contain {KEY_SEPARATOR!r}: {self.region!r}"
            )
        if self.expiry < timedelta(0):
            raise InvalidArgumentError("Expiry cannot be negative")
        if self.expiry_enabled and self.expiry_seconds == 0:
            raise InvalidArgumentError(
                "Expiry must be at least one second when enabled"
            )

    @property
    def expiry_seconds(self) -> int:
        """TTL in whole seconds, as sent to the store."""
        return int(self.expiry.total_seconds())

    @property
    def ttl(self) -> timedelta | None:
        """TTL to write entries with, or None when expiry is disabled."""
        if not self.expiry_enabled:
            return None
        return timedelta(seconds=self.expiry_seconds)

    @property
    def refreshes_on_access(self) -> bool:
        """Whether reads reset the TTL of the entry they hit."""
        return self.expiry_enabled and self.refresh_expiry_on_access

    @classmethod
    def for_region(
        cls,
        region: str,
        expire_after: timedelta | int | None = None,
        refresh_expiry_on_access: bool = False,
        default_value: Any | None = None,
    ) -> "RegionCacheConfig":
        """Create a configuration for a region.

        Args:
            region: Name of the region.
            expire_after: TTL as a timedelta or in seconds. None disables
                expiry.
            refresh_expiry_on_access: Whether reads reset the TTL.
            default_value: Value returned by ``get`` on a miss.

        Returns:
            A new RegionCacheConfig instance.
        """
        if expire_after is None:
            return cls(
                region=region,
                refresh_expiry_on_access=refresh_expiry_on_access,
                default_value=default_value,
            )

        if isinstance(expire_after, int):
            expire_after = timedelta(seconds=expire_after)

        return cls(
            region=region,
            expiry=expire_after,
            expiry_enabled=True,
            refresh_expiry_on_access=refresh_expiry_on_access,
            default_value=default_value,
        )
