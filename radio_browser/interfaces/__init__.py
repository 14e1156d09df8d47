"""Public interface definitions for the client's collaborators.

The lookup client reaches the cache and the network only through the
abstract base classes in this package.  Concrete adapters live in
``radio_browser/providers/`` and are injected at construction time, so a
test can hand in a fake transport and a production service can hand in a
shared cache without touching the lookup logic.

    Interface         →  Concrete implementations (in radio_browser/providers/)
    ─────────────────────────────────────────────────────────────────────
    ICacheProvider    →  MemoryCacheProvider, NullCacheProvider
    IHttpTransport    →  HttpxTransport
"""

from radio_browser.interfaces.cache_provider import ICacheProvider
from radio_browser.interfaces.http_transport import HttpResponse, IHttpTransport

__all__ = [
    "HttpResponse",
    "ICacheProvider",
    "IHttpTransport",
]
