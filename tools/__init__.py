"""Tool package exports.

This keeps the registry and the weather gateway in one import location.
"""

from .registry import ToolName, ToolRegistry
from .weather import WeatherApiClient, WeatherGateway

__all__ = ["ToolName", "ToolRegistry", "WeatherApiClient", "WeatherGateway"]
