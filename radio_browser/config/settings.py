"""Client settings loaded from environment variables via pydantic-settings.

Values come from two sources, highest priority first:

  1. Environment variables prefixed with ``RADIO_BROWSER_``
     (e.g. ``RADIO_BROWSER_CACHE_CAPACITY=500``).
  2. A ``.env`` file in the working directory.

Fields not set in either place fall back to the defaults below, which
match what ``RadioBrowserClient()`` uses when built without settings.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://de1.api.radio-browser.info"
DEFAULT_CACHE_CAPACITY = 100


class Settings(BaseSettings):
    """radio-browser client settings."""

    model_config = SettingsConfigDict(
        env_prefix="RADIO_BROWSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Remote directory ===
    base_url: str = DEFAULT_BASE_URL
    http_timeout: float = Field(default=10.0, gt=0)
    user_agent: str = "radio-browser/0.1.0"

    # === Cache ===
    # "memory" = bounded in-process LRU, "none" = always fetch.
    cache_backend: str = "memory"
    cache_capacity: int = Field(default=DEFAULT_CACHE_CAPACITY, ge=0)

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
