from __future__ import annotations

"""Start the WeatherAPI MCP server on stdio.

Run locally:
    WEATHER_API_KEY=... python main.py

MCP client config example:
    {"command": "weatherapi-mcp", "env": {"WEATHER_API_KEY": "..."}}
"""

import logging
import sys

import anyio

from core.config import AppConfig
from core.errors import ConfigurationError
from core.runtime import build_server, configure_logging
from server import serve_stdio


def main() -> int:
    try:
        config = AppConfig.from_env()
    except ConfigurationError as exc:
        # Logging is not configured yet; report straight to stderr.
        print(f"Cannot start WeatherAPI MCP server: {exc}", file=sys.stderr)
        return 1

    configure_logging(config)
    server = build_server(config)

    try:
        anyio.run(serve_stdio, server)
    except KeyboardInterrupt:
        logging.getLogger("weather.runtime").info("Server interrupted, shutting down")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
