from __future__ import annotations

"""Tool registry exposed to MCP clients.

Responsibilities:
1) Declare the closed set of weather tools.
2) Publish their MCP descriptors (name, description, input schema).
3) Provide input schemas for documentation.

The registry never touches the network or credentials.
"""

import logging
from enum import Enum
from typing import Any

from mcp import types

from core.errors import UnknownToolError

_LOCATION_PROPERTY = {
    "type": "string",
    "description": "Location (city name, coordinates, etc.)",
}


def _yes_no_property(description: str) -> dict[str, Any]:
    return {
        "type": "string",
        "description": description,
        "enum": ["yes", "no"],
        "default": "no",
    }


class ToolName(str, Enum):
    """Every tool the server can run."""

    CURRENT_WEATHER = "get_current_weather"
    WEATHER_FORECAST = "get_weather_forecast"
    WEATHER_HISTORY = "get_weather_history"

    @classmethod
    def parse(cls, name: str) -> "ToolName":
        try:
            return cls(name)
        except ValueError:
            raise UnknownToolError(name) from None


class ToolRegistry:
    def __init__(self) -> None:
        self._logger = logging.getLogger("weather.registry")

    def list_tools(self) -> list[types.Tool]:
        """Return tool descriptors in a fixed order.

        A fresh list is built on every call so callers may mutate it freely.
        """
        tools = [
            types.Tool(
                name=ToolName.CURRENT_WEATHER.value,
                description="Get current weather for a location",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "location": dict(_LOCATION_PROPERTY),
                        "aqi": _yes_no_property("Include air quality data (yes/no)"),
                    },
                    "required": ["location"],
                },
            ),
            types.Tool(
                name=ToolName.WEATHER_FORECAST.value,
                description="Get weather forecast for a location",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "location": dict(_LOCATION_PROPERTY),
                        "days": {
                            "type": "number",
                            "description": "Number of days (1-14)",
                            "minimum": 1,
                            "maximum": 14,
                            "default": 3,
                        },
                        "aqi": _yes_no_property("Include air quality data (yes/no)"),
                        "alerts": _yes_no_property("Include weather alerts (yes/no)"),
                    },
                    "required": ["location"],
                },
            ),
            types.Tool(
                name=ToolName.WEATHER_HISTORY.value,
                description="Get historical weather data",
                inputSchema={
                    "type": "object",
                    "properties": {
                        "location": dict(_LOCATION_PROPERTY),
                        "date": {
                            "type": "string",
                            "description": "Date in YYYY-MM-DD format",
                        },
                    },
                    "required": ["location", "date"],
                },
            ),
        ]
        self._logger.debug("Listing %s tools", len(tools))
        return tools

    def describe(self) -> dict[str, dict[str, Any]]:
        """Return tool input schemas for documentation or debugging.

        Output example:
            {
                "get_current_weather": {"type": "object", "properties": {...}, ...},
                ...
            }
        """
        return {tool.name: tool.inputSchema for tool in self.list_tools()}
