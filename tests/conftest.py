"""Shared fixtures: canned WeatherAPI payloads and a fake HTTP response."""

from typing import Any
from unittest.mock import MagicMock

import pytest

from tools import WeatherApiClient, WeatherGateway

API_KEY = "test-secret-key"
BASE_URL = "https://api.weatherapi.test/v1"


def make_response(status_code: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    """Build an object shaped like `requests.Response`."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if payload is None:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def api_key() -> str:
    return API_KEY


@pytest.fixture
def response_factory():
    return make_response


@pytest.fixture
def gateway() -> WeatherGateway:
    return WeatherGateway(WeatherApiClient(api_key=API_KEY, base_url=BASE_URL, timeout=5))


@pytest.fixture
def location_payload() -> dict[str, Any]:
    return {
        "name": "London",
        "region": "City of London, Greater London",
        "country": "United Kingdom",
        "lat": 51.52,
        "lon": -0.11,
        "localtime": "2024-01-15 14:30",
    }


@pytest.fixture
def current_payload(location_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "location": location_payload,
        "current": {
            "temp_c": 8.0,
            "temp_f": 46.4,
            "feelslike_c": 5.3,
            "feelslike_f": 41.5,
            "condition": {"text": "Partly cloudy"},
            "humidity": 76,
            "wind_kph": 19.1,
            "wind_mph": 11.9,
            "wind_dir": "WSW",
            "pressure_mb": 1012.0,
            "vis_km": 10.0,
            "uv": 2.0,
        },
    }


@pytest.fixture
def air_quality_payload(current_payload: dict[str, Any]) -> dict[str, Any]:
    current_payload["current"]["air_quality"] = {
        "co": 230.3,
        "no2": 13.5,
        "o3": 54.4,
        "so2": 3.1,
        "pm2_5": 4.5,
        "pm10": 6.8,
    }
    return current_payload


def _forecast_day(day_date: str, max_c: float, min_c: float, text: str) -> dict[str, Any]:
    return {
        "date": day_date,
        "day": {
            "maxtemp_c": max_c,
            "maxtemp_f": round(max_c * 9 / 5 + 32, 1),
            "mintemp_c": min_c,
            "mintemp_f": round(min_c * 9 / 5 + 32, 1),
            "avgtemp_c": round((max_c + min_c) / 2, 1),
            "avgtemp_f": round(round((max_c + min_c) / 2, 1) * 9 / 5 + 32, 1),
            "condition": {"text": text},
            "daily_chance_of_rain": 40,
            "maxwind_kph": 22.3,
            "avghumidity": 81,
            "totalprecip_mm": 1.2,
            "uv": 1.0,
        },
        "hour": [],
    }


@pytest.fixture
def forecast_payload(location_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "location": location_payload,
        "forecast": {
            "forecastday": [
                _forecast_day("2024-01-15", 9.1, 4.2, "Light rain"),
                _forecast_day("2024-01-16", 7.5, 2.0, "Overcast"),
                _forecast_day("2024-01-17", 6.4, 1.3, "Sunny"),
            ]
        },
    }


@pytest.fixture
def history_payload(location_payload: dict[str, Any]) -> dict[str, Any]:
    return {
        "location": location_payload,
        "forecast": {"forecastday": [_forecast_day("2023-12-25", 11.2, 6.4, "Mist")]},
    }
