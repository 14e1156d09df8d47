"""Data models for the radio-browser client."""

from radio_browser.models.station import STATION_LIST_ADAPTER, RadioStation

__all__ = ["STATION_LIST_ADAPTER", "RadioStation"]
