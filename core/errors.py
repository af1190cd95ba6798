from __future__ import annotations

"""Exception types used across the server.

Internal failures use the `WeatherServerError` family. The MCP boundary only
ever raises `InternalError`, which embeds the original message.
"""

from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR, ErrorData


class WeatherServerError(Exception):
    """Base class for errors raised inside the weather server."""


class ConfigurationError(WeatherServerError):
    """Required configuration (API credential) is missing."""


class UnknownToolError(WeatherServerError):
    def __init__(self, tool_name: str) -> None:
        self.tool_name = tool_name
        super().__init__(f"Unknown tool: {tool_name}")


class ToolValidationError(WeatherServerError):
    """Tool arguments do not match the tool input model."""

    def __init__(self, tool_name: str, detail: str) -> None:
        self.tool_name = tool_name
        self.detail = detail
        super().__init__(f"Invalid arguments for {tool_name}: {detail}")


class UpstreamError(WeatherServerError):
    """WeatherAPI answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class TransportError(WeatherServerError):
    """No response could be obtained from WeatherAPI."""


class InternalError(McpError):
    """Outward-facing failure of a tool call.

    Example message:
        Error calling tool get_weather_forecast: No matching location found.
    """

    def __init__(self, tool_name: str, message: str) -> None:
        self.tool_name = tool_name
        super().__init__(
            ErrorData(
                code=INTERNAL_ERROR,
                message=f"Error calling tool {tool_name}: {message}",
            )
        )
