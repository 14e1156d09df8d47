"""Factories that turn :class:`Settings` into a ready-to-use client.

Library users who are happy with the defaults can simply call
``RadioBrowserClient()``; these helpers exist for applications and the CLI
that read configuration from the environment.
"""

from __future__ import annotations

import structlog

from radio_browser.config.settings import Settings
from radio_browser.interfaces.cache_provider import ICacheProvider
from radio_browser.providers.cache.memory_cache import MemoryCacheProvider
from radio_browser.providers.cache.null_cache import NullCacheProvider
from radio_browser.providers.transport.httpx_transport import HttpxTransport
from radio_browser.services.station_lookup import RadioBrowserClient
from radio_browser.utils.errors import ConfigurationError

_logger = structlog.get_logger(logger_name=__name__)

_CACHE_BACKENDS = ("memory", "none")


def build_cache_provider(app_settings: Settings) -> ICacheProvider:
    """Select the cache implementation named by ``cache_backend``."""
    backend = app_settings.cache_backend.strip().lower()
    if backend == "memory":
        return MemoryCacheProvider(capacity=app_settings.cache_capacity)
    if backend == "none":
        return NullCacheProvider()
    raise ConfigurationError(
        f"Unknown cache_backend {app_settings.cache_backend!r}; "
        f"expected one of {', '.join(_CACHE_BACKENDS)}"
    )


def build_transport(app_settings: Settings) -> HttpxTransport:
    return HttpxTransport(
        user_agent=app_settings.user_agent,
        timeout=app_settings.http_timeout,
    )


def build_client(custom_settings: Settings | None = None) -> RadioBrowserClient:
    """Assemble a RadioBrowserClient from *custom_settings* (or the environment).

    The returned client owns its transport; close it with ``aclose()`` or
    use it as an async context manager.
    """
    app_settings = custom_settings or Settings()
    cache = build_cache_provider(app_settings)
    client = RadioBrowserClient(
        transport=build_transport(app_settings),
        cache=cache,
        base_url=app_settings.base_url,
        close_transport=True,
    )

    _logger.debug(
        "client_built",
        base_url=client.base_url,
        cache=type(cache).__name__,
    )
    return client
