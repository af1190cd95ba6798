from __future__ import annotations

"""Weather gateway backed by WeatherAPI.

Includes:
1) WeatherApiClient: one HTTP GET per call, status/error mapping.
2) WeatherGateway: current weather, forecast and history operations.

The gateway:
- validates tool arguments with Pydantic models,
- sends exactly one upstream request per operation,
- returns the formatted text report for the payload.
"""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Literal
from urllib.parse import quote, urlencode

import requests
from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictInt
from pydantic import ValidationError as PydanticValidationError

from core.errors import ToolValidationError, TransportError, UpstreamError
from tools.formatting import (
    format_current_weather,
    format_weather_forecast,
    format_weather_history,
)
from tools.registry import ToolName

Formatter = Callable[[dict[str, Any]], str]


class _ToolArgs(BaseModel):
    # Unknown keys are ignored, like the upstream query builder does.
    model_config = ConfigDict(extra="ignore")

    location: str = Field(min_length=1)


class CurrentWeatherArgs(_ToolArgs):
    """Arguments of get_current_weather.

    Expected call example:
        {"location": "Tokyo", "aqi": "yes"}
    """

    aqi: Literal["yes", "no"] = "no"


class ForecastArgs(_ToolArgs):
    """Arguments of get_weather_forecast.

    `days` is documented as 1-14 but any JSON number is passed to WeatherAPI
    as given. Booleans and strings are rejected.
    """

    days: StrictInt | StrictFloat = 3
    aqi: Literal["yes", "no"] = "no"
    alerts: Literal["yes", "no"] = "no"


class HistoryArgs(_ToolArgs):
    """Arguments of get_weather_history. `date` should be YYYY-MM-DD."""

    date: str = Field(min_length=1)


class WeatherApiClient:
    """Thin HTTP client for the WeatherAPI v1 endpoints."""

    def __init__(self, api_key: str, base_url: str, timeout: float = 10.0) -> None:
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._logger = logging.getLogger("weather.client")

    def build_query(self, params: Mapping[str, Any]) -> str:
        """Return the percent-encoded query string, API key first.

        Example:
            {"q": "New York, NY"} -> "key=...&q=New%20York%2C%20NY"
        """
        return urlencode({"key": self._api_key, **params}, quote_via=quote)

    def fetch(self, endpoint: str, params: Mapping[str, Any], fallback_message: str) -> dict[str, Any]:
        """Issue one GET request and return the decoded JSON body.

        Security:
        - API key is never written to logs.
        """
        url = f"{self._base_url}/{endpoint}"
        self._logger.info("WeatherAPI request: url=%s params=%s", url, dict(params))

        try:
            response = requests.get(url, params=self.build_query(params), timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Weather API request failed: {exc}") from exc

        self._logger.info("WeatherAPI response: status=%s", response.status_code)

        if not 200 <= response.status_code < 300:
            raise UpstreamError(self._error_message(response) or fallback_message, response.status_code)

        try:
            return response.json()
        except ValueError as exc:
            raise UpstreamError("Weather API returned non-JSON response", response.status_code) from exc

    def _error_message(self, response: requests.Response) -> str | None:
        """Extract `error.message` from an error body, if there is one."""
        try:
            payload = response.json()
        except ValueError:
            self._logger.debug("Error body is not JSON: %s", response.text[:200])
            return None
        if not isinstance(payload, dict):
            return None
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        return None


class WeatherGateway:
    """Runs weather tools by name.

    Expected call example:
        gateway.invoke("get_weather_forecast", {"location": "Tokyo", "days": 5})
    """

    def __init__(self, client: WeatherApiClient) -> None:
        self._client = client
        self._logger = logging.getLogger("weather.gateway")

    def invoke(self, name: str, arguments: Mapping[str, Any] | None) -> str:
        """Dispatch one tool call and return the formatted report."""
        tool = ToolName.parse(name)
        arguments = arguments or {}

        if tool is ToolName.CURRENT_WEATHER:
            return self.get_current_weather(arguments)
        if tool is ToolName.WEATHER_FORECAST:
            return self.get_weather_forecast(arguments)
        return self.get_weather_history(arguments)

    def get_current_weather(self, arguments: Mapping[str, Any]) -> str:
        args = _validate(ToolName.CURRENT_WEATHER, CurrentWeatherArgs, arguments)
        return self._call(
            "current.json",
            {"q": args.location, "aqi": args.aqi},
            "Failed to fetch current weather",
            format_current_weather,
        )

    def get_weather_forecast(self, arguments: Mapping[str, Any]) -> str:
        args = _validate(ToolName.WEATHER_FORECAST, ForecastArgs, arguments)
        return self._call(
            "forecast.json",
            {"q": args.location, "days": args.days, "aqi": args.aqi, "alerts": args.alerts},
            "Failed to fetch weather forecast",
            format_weather_forecast,
        )

    def get_weather_history(self, arguments: Mapping[str, Any]) -> str:
        args = _validate(ToolName.WEATHER_HISTORY, HistoryArgs, arguments)
        return self._call(
            "history.json",
            {"q": args.location, "dt": args.date},
            "Failed to fetch weather history",
            format_weather_history,
        )

    def _call(
        self,
        endpoint: str,
        params: dict[str, Any],
        fallback_message: str,
        formatter: Formatter,
    ) -> str:
        """Call endpoint, map status, format body."""
        data = self._client.fetch(endpoint, params, fallback_message)
        report = formatter(data)
        self._logger.debug("Formatted %s report: %s chars", endpoint, len(report))
        return report


def _validate(tool: ToolName, model: type[_ToolArgs], arguments: Mapping[str, Any]) -> Any:
    try:
        return model.model_validate(dict(arguments))
    except PydanticValidationError as exc:
        detail = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'arguments'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ToolValidationError(tool.value, detail) from exc
