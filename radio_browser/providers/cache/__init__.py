"""Cache providers.

Station lists are cached per (tag, limit) query so that repeated lookups
within one process do not hit the directory service again.

MemoryCacheProvider is a bounded LRU store: fast but not shared across
processes.  NullCacheProvider disables caching entirely.  Any other backend
only has to implement ICacheProvider.
"""

from radio_browser.providers.cache.memory_cache import MemoryCacheProvider
from radio_browser.providers.cache.null_cache import NullCacheProvider

__all__ = ["MemoryCacheProvider", "NullCacheProvider"]
