"""Abstract cache of lookup results with per-key single-flight locking."""

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

from ..core.error import BaseError


class CacheError(BaseError):
    """Base class for cache-related errors."""


class BaseCache(ABC):
    """Abstract cache interface."""

    def __init__(self):
        """Initialize the cache instance."""
        self._leaders: Dict[str, "CacheKeyLock"] = {}

    @abstractmethod
    async def get(self, key: str) -> Any:
        """
        Get an item from the cache.

        Args:
            key: the key to retrieve an item for

        Returns:
            The stored value, or `None` when absent or expired

        """

    @abstractmethod
    async def set(self, key: str, value: Any, ttl: Optional[float] = None):
        """
        Store an item, replacing any previous value.

        Args:
            key: the key to store the item under
            value: the value to store
            ttl: seconds the item stays valid, forever when not given

        """

    @abstractmethod
    async def clear(self, key: str):
        """Remove an item from the cache, if present."""

    @abstractmethod
    async def flush(self):
        """Remove all items from the cache."""

    def acquire(self, key: str) -> "CacheKeyLock":
        """
        Claim the right to produce the value for a key.

        The first claim on a key leads. Claims made while it is held follow
        the leader and pick up its result once it finishes.
        """
        leader = self._leaders.get(key)
        lock = CacheKeyLock(self, key, leader)
        if not leader:
            self._leaders[key] = lock
        return lock

    def release(self, lock: "CacheKeyLock"):
        """Drop a leading claim so that the next acquirer leads."""
        if self._leaders.get(lock.key) is lock:
            del self._leaders[lock.key]

    def __repr__(self) -> str:
        """Human readable representation of this instance."""
        return "<{}>".format(self.__class__.__name__)


class CacheKeyLock:
    """
    A claim on a single cache key, used as an async context manager.

    Entering a following lock waits for its leader. When the leader produced
    nothing, typically because the lookup failed, the follower falls back to
    the cache and otherwise produces the value itself. Not thread safe.
    """

    def __init__(
        self, cache: BaseCache, key: str, leader: Optional["CacheKeyLock"] = None
    ):
        """Initialize the key lock."""
        self.cache = cache
        self.key = key
        self.leader = leader
        self.exception: Optional[BaseException] = None
        self._future: asyncio.Future = asyncio.get_running_loop().create_future()

    @property
    def done(self) -> bool:
        """Accessor for the done state."""
        return self._future.done()

    @property
    def result(self) -> Any:
        """Fetch the current result, if any."""
        return self._future.result() if self.done else None

    async def set_result(self, value: Any, ttl: Optional[float] = None):
        """Publish the produced value to followers and to the cache."""
        if self.done:
            raise CacheError(f"Result already set for cache key {self.key}")
        self._future.set_result(value)
        if value is not None:
            await self.cache.set(self.key, value, ttl)

    def __await__(self):
        """Wait for a result to be produced."""
        return self._future.__await__()

    async def __aenter__(self):
        """Async context manager entry."""
        found = None
        if self.leader:
            # a cancelled follower must not cancel the leader's future
            found = await asyncio.shield(self.leader._future)
        if found is None:
            found = await self.cache.get(self.key)
        if found is not None:
            self._future.set_result(found)
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """
        Async context manager exit.

        Followers still waiting receive `None` if no value was produced.
        """
        if exc_val:
            self.exception = exc_val
        if not self.done:
            self._future.set_result(None)
        self.cache.release(self)
