"""Pytest configuration for regioncache tests."""

from unittest.mock import AsyncMock

import pytest

from regioncache import InMemoryRemoteStore


class FakeClock:
    """Manually advanced clock for expiry tests."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """Create a fake clock starting at zero."""
    return FakeClock()


@pytest.fixture
def store(clock: FakeClock) -> InMemoryRemoteStore:
    """Create an in-memory store driven by the fake clock."""
    return InMemoryRemoteStore(maxsize=100, timer=clock)


@pytest.fixture
def mock_store() -> AsyncMock:
    """Create a call-counting store double that always misses."""
    store = AsyncMock()
    store.get.return_value = None
    store.expire.return_value = False
    store.delete.return_value = False
    return store
