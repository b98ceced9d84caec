"""Process local cache implementation."""

import time
from typing import Any, Dict, Optional, Tuple

from .base import BaseCache


class InMemoryCache(BaseCache):
    """In-memory cache with per-item expiry.

    Values are kept by reference: a cached partner lookup hands back the very
    object that was stored until it expires or is cleared.
    """

    def __init__(self):
        """Initialize an `InMemoryCache` instance."""
        super().__init__()
        # key -> (expiry on the perf_counter clock or None, value)
        self._entries: Dict[str, Tuple[Optional[float], Any]] = {}

    @staticmethod
    def _expired(expires: Optional[float]) -> bool:
        return expires is not None and time.perf_counter() >= expires

    def _purge(self):
        for key in [k for k, (exp, _) in self._entries.items() if self._expired(exp)]:
            del self._entries[key]

    async def get(self, key: str) -> Any:
        """Get an unexpired item from the cache, or `None`."""
        entry = self._entries.get(key)
        if not entry:
            return None
        expires, value = entry
        if self._expired(expires):
            del self._entries[key]
            return None
        return value

    async def set(self, key: str, value: Any, ttl: Optional[float] = None):
        """Store an item, purging anything that has expired meanwhile."""
        self._purge()
        expires = time.perf_counter() + ttl if ttl else None
        self._entries[key] = (expires, value)

    async def clear(self, key: str):
        """Remove an item from the cache, if present."""
        self._entries.pop(key, None)

    async def flush(self):
        """Remove all items from the cache."""
        self._entries.clear()
