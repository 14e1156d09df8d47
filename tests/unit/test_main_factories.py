"""Unit tests for Settings and the factory functions in radio_browser/main.py."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from radio_browser.config.settings import Settings
from radio_browser.main import build_cache_provider, build_client, build_transport
from radio_browser.providers.cache.memory_cache import MemoryCacheProvider
from radio_browser.providers.cache.null_cache import NullCacheProvider
from radio_browser.providers.transport.httpx_transport import HttpxTransport
from radio_browser.utils.errors import ConfigurationError


def _settings(**overrides) -> Settings:
    defaults = {
        "base_url": "http://directory.test",
        "cache_backend": "memory",
        "cache_capacity": 100,
        "http_timeout": 5.0,
        "user_agent": "radio-browser-test/0.1.0",
        "app_env": "test",
    }
    defaults.update(overrides)
    return Settings(**defaults)


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("BASE_URL", "CACHE_BACKEND", "CACHE_CAPACITY", "HTTP_TIMEOUT"):
            monkeypatch.delenv(f"RADIO_BROWSER_{name}", raising=False)
        settings = Settings(_env_file=None)
        assert settings.base_url == "https://de1.api.radio-browser.info"
        assert settings.cache_backend == "memory"
        assert settings.cache_capacity == 100
        assert settings.http_timeout == 10.0

    def test_reads_prefixed_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RADIO_BROWSER_BASE_URL", "http://mirror.test")
        monkeypatch.setenv("RADIO_BROWSER_CACHE_CAPACITY", "7")
        settings = Settings(_env_file=None)
        assert settings.base_url == "http://mirror.test"
        assert settings.cache_capacity == 7

    def test_negative_capacity_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _settings(cache_capacity=-1)

    def test_non_positive_timeout_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _settings(http_timeout=0)


class TestBuildCacheProvider:
    def test_memory_backend(self) -> None:
        cache = build_cache_provider(_settings(cache_capacity=42))
        assert isinstance(cache, MemoryCacheProvider)
        assert cache.capacity == 42

    def test_none_backend(self) -> None:
        assert isinstance(build_cache_provider(_settings(cache_backend="none")), NullCacheProvider)

    def test_backend_name_is_case_insensitive(self) -> None:
        assert isinstance(build_cache_provider(_settings(cache_backend=" Memory ")), MemoryCacheProvider)

    def test_unknown_backend_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="redis"):
            build_cache_provider(_settings(cache_backend="redis"))


class TestBuildClient:
    def test_build_transport(self) -> None:
        transport = build_transport(_settings(user_agent="ua/1", http_timeout=3.0))
        assert isinstance(transport, HttpxTransport)
        assert transport._headers["User-Agent"] == "ua/1"
        assert transport._http.timeout.read == 3.0

    @pytest.mark.asyncio
    async def test_wires_settings(self) -> None:
        client = build_client(_settings(base_url="http://mirror.test/", cache_capacity=5))
        try:
            assert client.base_url == "http://mirror.test"
            assert isinstance(client.cache, MemoryCacheProvider)
            assert client.cache.capacity == 5
            assert isinstance(client._transport, HttpxTransport)
        finally:
            await client.aclose()

    @pytest.mark.asyncio
    async def test_client_closes_built_transport(self) -> None:
        client = build_client(_settings())
        await client.aclose()
        assert client._transport._http.is_closed is True
