"""Tag-based station lookup against the radio-browser directory.

``RadioBrowserClient`` wires two injected collaborators: a cache
(:class:`ICacheProvider`) and an HTTP transport (:class:`IHttpTransport`).
A lookup goes through these steps:

1. **Key**      -- ``search:<tag>:<limit>``, built by plain string composition.
2. **Cache**    -- a hit is returned as-is; the network is not touched.
3. **Fetch**    -- on a miss, GET ``<base>/json/stations/search?tag=..&limit=..``.
4. **Classify** -- transport failure -> TransportError, non-2xx -> ApiError,
                   2xx body that is not a station list -> ApiError.
5. **Store**    -- the decoded list is cached, even when it is empty.

Cache access and the network call are strictly sequential, so no cache
lock is ever held while waiting on I/O.  Two concurrent misses for the
same key may both fetch; the last write wins.  Retries, backoff and
stale-on-error fallbacks are left to the caller.
"""

from __future__ import annotations

from types import TracebackType
from urllib.parse import urlencode

import structlog
from pydantic import ValidationError

from radio_browser.config.settings import DEFAULT_BASE_URL, DEFAULT_CACHE_CAPACITY
from radio_browser.interfaces.cache_provider import ICacheProvider
from radio_browser.interfaces.http_transport import HttpResponse, IHttpTransport
from radio_browser.models.station import STATION_LIST_ADAPTER, RadioStation
from radio_browser.providers.cache.memory_cache import MemoryCacheProvider
from radio_browser.providers.transport.httpx_transport import HttpxTransport
from radio_browser.utils.errors import ApiError, TransportError

logger = structlog.get_logger(logger_name=__name__)

_SEARCH_PATH = "/json/stations/search"


def build_search_cache_key(tag: str, limit: int) -> str:
    """Return the cache key for a tag search.

    Plain composition rather than hashing, so distinct queries can never
    collide.
    """
    return f"search:{tag}:{limit}"


class RadioBrowserClient:
    """Look up radio stations by tag, caching results per query.

    Parameters
    ----------
    transport:
        HTTP transport used on cache misses.  Defaults to an
        :class:`HttpxTransport` owned (and closed) by this client.
    cache:
        Station-list cache.  Defaults to a :class:`MemoryCacheProvider`
        holding 100 queries.
    base_url:
        Root URL of the directory service.
    close_transport:
        Whether :meth:`aclose` closes the transport.  By default only a
        transport created by the client itself is closed.  Clients derived
        with :meth:`with_base_url` or :meth:`with_cache` share the transport
        and inherit this flag, so closing any one of them closes the
        transport for all.
    """

    def __init__(
        self,
        transport: IHttpTransport | None = None,
        cache: ICacheProvider | None = None,
        base_url: str = DEFAULT_BASE_URL,
        *,
        close_transport: bool | None = None,
    ) -> None:
        self._owns_transport = transport is None if close_transport is None else close_transport
        self._transport = transport if transport is not None else HttpxTransport()
        self._cache = cache if cache is not None else MemoryCacheProvider(DEFAULT_CACHE_CAPACITY)
        self._base_url = base_url.rstrip("/")
        self._logger = logger

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def cache(self) -> ICacheProvider:
        return self._cache

    # ------------------------------------------------------------------
    # Builders
    # ------------------------------------------------------------------

    def with_base_url(self, base_url: str) -> RadioBrowserClient:
        """Return a client for another host, sharing this transport and cache.

        The derived client inherits transport ownership; see :meth:`aclose`.
        """
        return self._derive(base_url=base_url, cache=self._cache)

    def with_cache(self, cache: ICacheProvider) -> RadioBrowserClient:
        """Return a client that uses *cache*, sharing this transport and host."""
        return self._derive(base_url=self._base_url, cache=cache)

    def _derive(self, base_url: str, cache: ICacheProvider) -> RadioBrowserClient:
        return RadioBrowserClient(
            transport=self._transport,
            cache=cache,
            base_url=base_url,
            close_transport=self._owns_transport,
        )

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    async def search_by_tag(self, tag: str, limit: int) -> list[RadioStation]:
        """Return up to *limit* stations tagged *tag*, in the service's order.

        Raises
        ------
        ValueError
            If *limit* is not a positive integer.
        TransportError
            If the HTTP exchange failed.
        ApiError
            If the service returned a non-2xx status or an undecodable body.
        """
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValueError(f"limit must be a positive integer, got {limit!r}")

        cache_key = build_search_cache_key(tag, limit)

        cached = await self._cache.get(cache_key)
        if cached is not None:
            self._logger.debug("station_search_cache_hit", key=cache_key, count=len(cached))
            return cached

        url = f"{self._base_url}{_SEARCH_PATH}?{urlencode({'tag': tag, 'limit': limit})}"
        stations = await self._fetch_stations(url)

        await self._cache.set(cache_key, stations)
        self._logger.info(
            "station_search_complete",
            tag=tag,
            limit=limit,
            count=len(stations),
        )
        return stations

    async def _fetch_stations(self, url: str) -> list[RadioStation]:
        self._logger.debug("station_search_fetch", url=url)
        try:
            response = await self._transport.get(url)
        except TransportError as exc:
            self._logger.warning("station_search_transport_failed", url=url, error=str(exc))
            raise
        except OSError as exc:
            self._logger.warning("station_search_transport_failed", url=url, error=str(exc))
            raise TransportError(message=f"GET {url} failed: {exc}") from exc

        if not response.is_success:
            self._logger.warning(
                "station_search_api_error",
                url=url,
                status=response.status_code,
            )
            raise ApiError(message=response.text, status_code=response.status_code)

        return self._decode(url, response)

    def _decode(self, url: str, response: HttpResponse) -> list[RadioStation]:
        try:
            return STATION_LIST_ADAPTER.validate_json(response.body)
        except ValidationError as exc:
            self._logger.warning(
                "station_search_decode_failed",
                url=url,
                error_count=exc.error_count(),
            )
            raise ApiError(
                message=f"Malformed station list: {exc}",
                status_code=response.status_code,
            ) from exc

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the transport if this client owns it.

        Ownership is shared with derived clients: after this call the
        transport is closed for them too.
        """
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> RadioBrowserClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
