"""Concrete adapters for the interfaces in ``radio_browser.interfaces``."""
