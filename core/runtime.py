from __future__ import annotations

"""Runtime composition helpers.

This module wires together:
- logging,
- the WeatherAPI client and gateway,
- the MCP server.

Keeping this in one place keeps `main.py` and the tests free of setup code.
"""

import logging
import sys
from pathlib import Path

from mcp.server.lowlevel import Server

from core.config import AppConfig
from server import create_server
from tools import ToolRegistry, WeatherApiClient, WeatherGateway


def configure_logging(config: AppConfig) -> None:
    """Initialize logging according to AppConfig.

    Stdout carries the MCP stdio protocol, so logs go to stderr unless
    LOG_FILE is set.
    """
    log_format = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    if config.log_file:
        log_path = Path(config.log_file)
        # Example: logs/weather.log -> create logs/ if missing.
        if log_path.parent != Path("."):
            log_path.parent.mkdir(parents=True, exist_ok=True)
        logging.basicConfig(
            level=config.log_level,
            format=log_format,
            filename=config.log_file,
            encoding="utf-8",
        )
    else:
        logging.basicConfig(level=config.log_level, format=log_format, stream=sys.stderr)

    logging.getLogger("weather.runtime").info(
        "Logging configured: file=%s level=%s",
        config.log_file or "<stderr>",
        config.log_level,
    )


def build_gateway(config: AppConfig) -> WeatherGateway:
    """Build the gateway with its read-only upstream settings."""
    client = WeatherApiClient(
        api_key=config.weatherapi_key,
        base_url=config.weatherapi_base_url,
        timeout=config.request_timeout,
    )
    return WeatherGateway(client)


def build_server(config: AppConfig) -> Server:
    """Build the MCP server ready to run.

    Example:
        server = build_server(AppConfig.from_env())
        anyio.run(serve_stdio, server)
    """
    logger = logging.getLogger("weather.runtime")
    server = create_server(ToolRegistry(), build_gateway(config))
    logger.info("MCP server created: base_url=%s", config.weatherapi_base_url)
    return server
