"""Lookup services built on the provider interfaces."""

from radio_browser.services.station_lookup import RadioBrowserClient, build_search_cache_key

__all__ = ["RadioBrowserClient", "build_search_cache_key"]
