"""Configuration module: exports Settings and the library defaults."""

from radio_browser.config.settings import DEFAULT_BASE_URL, DEFAULT_CACHE_CAPACITY, Settings

__all__ = ["DEFAULT_BASE_URL", "DEFAULT_CACHE_CAPACITY", "Settings"]
