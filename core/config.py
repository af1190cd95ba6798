from __future__ import annotations

"""Application configuration bootstrap.

Why this module exists:
- Keep all env variables in one place.
- Provide safe defaults for local development.
- Refuse to build a config without the WeatherAPI credential.

Example .env:
    WEATHER_API_KEY=your_weatherapi_key
    LOG_LEVEL=DEBUG
    LOG_FILE=logs/weather.log
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from core.errors import ConfigurationError

# Automatically load .env (if present) for local runs.
# Shell variables still have priority by default.
load_dotenv()

LOGGER = logging.getLogger("weather.config")

API_KEY_ENV = "WEATHER_API_KEY"
DEFAULT_BASE_URL = "https://api.weatherapi.com/v1"
DEFAULT_TIMEOUT = 10.0


def _read_float_env(name: str, default: float) -> float:
    """Read float env var with fallback + warning on invalid values.

    Example:
    - WEATHERAPI_TIMEOUT=2.5 -> 2.5
    - WEATHERAPI_TIMEOUT=abc -> warning + default
    """
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        value = float(raw_value)
    except ValueError:
        LOGGER.warning("Invalid number %s=%r. Using default=%s.", name, raw_value, default)
        return default
    if value <= 0:
        LOGGER.warning("Non-positive %s=%r. Using default=%s.", name, raw_value, default)
        return default
    return value


@dataclass(frozen=True)
class AppConfig:
    """Immutable runtime configuration used by the server entrypoint."""

    # External API settings.
    weatherapi_key: str
    weatherapi_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = DEFAULT_TIMEOUT

    # Logging settings. Empty log_file means stderr (stdout carries the protocol).
    log_level: str = "INFO"
    log_file: str = ""

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Build configuration from environment variables.

        Raises:
            ConfigurationError: WEATHER_API_KEY is missing or blank.
        """
        api_key = os.getenv(API_KEY_ENV, "").strip()
        if not api_key:
            raise ConfigurationError(f"{API_KEY_ENV} environment variable is required")

        config = cls(
            weatherapi_key=api_key,
            weatherapi_base_url=os.getenv("WEATHERAPI_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            request_timeout=_read_float_env("WEATHERAPI_TIMEOUT", DEFAULT_TIMEOUT),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE", ""),
        )

        # Never log secrets (API keys). Log only safe metadata.
        LOGGER.debug(
            "Config loaded: base_url=%s timeout=%s log_level=%s log_file=%s",
            config.weatherapi_base_url,
            config.request_timeout,
            config.log_level,
            config.log_file or "<stderr>",
        )
        return config
