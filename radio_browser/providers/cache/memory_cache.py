"""In-memory cache provider using cachetools.LRUCache.

Bounded, process-local store for station lists.  Suitable for a single
process; swap in another ICacheProvider for anything shared.
"""

from __future__ import annotations

import threading
from typing import Any

import structlog
from cachetools import LRUCache

from radio_browser.interfaces.cache_provider import ICacheProvider
from radio_browser.models.station import RadioStation

logger = structlog.get_logger(logger_name=__name__)


class _EvictionLoggingLRUCache(LRUCache):
    """LRUCache that reports each evicted key."""

    def popitem(self) -> tuple[Any, Any]:
        key, value = super().popitem()
        logger.debug("cache_evict", key=key)
        return key, value


class MemoryCacheProvider(ICacheProvider):
    """Fixed-capacity least-recently-used cache backed by ``cachetools.LRUCache``.

    Every ``get`` and ``set`` runs under one lock that guards the whole
    structure, so a single recency order is kept across all callers.  The
    lock is a ``threading.Lock`` and is never held across an ``await``,
    which makes the provider safe from both asyncio tasks and OS threads.

    Parameters
    ----------
    capacity:
        Maximum number of keys held at once.  Inserting a new key into a
        full cache evicts the least recently used one.  A capacity of 0
        keeps nothing.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._lock = threading.Lock()
        self._cache: LRUCache[str, list[RadioStation]] | None = (
            _EvictionLoggingLRUCache(maxsize=capacity) if capacity > 0 else None
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    def __len__(self) -> int:
        if self._cache is None:
            return 0
        with self._lock:
            return len(self._cache)

    def __bool__(self) -> bool:
        """An empty cache is still a usable cache."""
        return True

    # ------------------------------------------------------------------
    # ICacheProvider implementation
    # ------------------------------------------------------------------

    async def get(self, key: str) -> list[RadioStation] | None:
        """Return a copy of the list cached under *key*, or ``None``.

        A hit moves *key* to the most-recently-used position.
        """
        if self._cache is None:
            logger.debug("cache_miss", key=key)
            return None

        with self._lock:
            value = self._cache.get(key)

        if value is None:
            logger.debug("cache_miss", key=key)
            return None
        logger.debug("cache_hit", key=key, count=len(value))
        return list(value)

    async def set(self, key: str, value: list[RadioStation]) -> None:
        """Store a copy of *value* under *key* as the most recently used entry."""
        if self._cache is None:
            # Capacity 0: the entry is evicted as soon as it would be stored.
            logger.debug("cache_evict", key=key)
            return

        with self._lock:
            self._cache[key] = list(value)
        logger.debug("cache_set", key=key, count=len(value))
