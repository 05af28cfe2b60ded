"""Region key value object."""

from dataclasses import dataclass

KEY_SEPARATOR = ":"


@dataclass(frozen=True)
class RegionKey:
    """Immutable physical key for an entry in a cache region.

    The physical key is ``region + ":" + key``. Region names may not
    contain the separator, so the first separator in a physical key
    always ends the region and keys from distinct regions never collide.
    The caller's key may contain the separator.
    """

    region: str
    key: str

    def __str__(self) -> str:
        """Return the physical key used in the remote store."""
        return f"{self.region}{KEY_SEPARATOR}{self.key}"

    @classmethod
    def parse(cls, physical_key: str) -> "RegionKey":
        """Split a physical key back into region and caller key.

        Args:
            physical_key: A key previously produced by ``str(RegionKey(...))``.

        Returns:
            The RegionKey the physical key was built from.

        Raises:
            ValueError: If the key has no separator.
        """
        region, sep, key = physical_key.partition(KEY_SEPARATOR)
        if not sep:
            raise ValueError(f"Not a region key: {physical_key!r}")
        return cls(region=region, key=key)
