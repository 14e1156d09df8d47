"""Utility modules for the radio-browser client.

- **errors** -- the lookup exception family rooted at RadioBrowserError,
  with exactly two lookup kinds (TransportError, ApiError) tagged by
  ErrorKind for exhaustive matching.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
"""

from radio_browser.utils.errors import (
    ApiError,
    ConfigurationError,
    ErrorKind,
    RadioBrowserError,
    TransportError,
)
from radio_browser.utils.logging import configure_logging, get_logger

__all__ = [
    "ApiError",
    "ConfigurationError",
    "ErrorKind",
    "RadioBrowserError",
    "TransportError",
    "configure_logging",
    "get_logger",
]
