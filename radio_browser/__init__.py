"""Cached tag lookups against the radio-browser.info station directory.

Typical use::

    async with RadioBrowserClient() as client:
        stations = await client.search_by_tag("jazz", 10)
"""

from radio_browser.interfaces.cache_provider import ICacheProvider
from radio_browser.interfaces.http_transport import HttpResponse, IHttpTransport
from radio_browser.models.station import RadioStation
from radio_browser.providers.cache.memory_cache import MemoryCacheProvider
from radio_browser.providers.cache.null_cache import NullCacheProvider
from radio_browser.providers.transport.httpx_transport import HttpxTransport
from radio_browser.services.station_lookup import RadioBrowserClient, build_search_cache_key
from radio_browser.utils.errors import ApiError, ErrorKind, RadioBrowserError, TransportError

__version__ = "0.1.0"

__all__ = [
    "ApiError",
    "ErrorKind",
    "HttpResponse",
    "HttpxTransport",
    "ICacheProvider",
    "IHttpTransport",
    "MemoryCacheProvider",
    "NullCacheProvider",
    "RadioBrowserClient",
    "RadioStation",
    "RadioBrowserError",
    "TransportError",
    "build_search_cache_key",
]
