"""Pass-through cache provider that never stores anything."""

from __future__ import annotations

from radio_browser.interfaces.cache_provider import ICacheProvider
from radio_browser.models.station import RadioStation


class NullCacheProvider(ICacheProvider):
    """Cache that always misses, so every lookup goes to the network.

    Selected with ``cache_backend="none"``.  Useful when freshness matters
    more than request volume, or when a caller caches at a higher level.
    """

    async def get(self, key: str) -> list[RadioStation] | None:
        return None

    async def set(self, key: str, value: list[RadioStation]) -> None:
        return None
