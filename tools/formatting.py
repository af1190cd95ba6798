from __future__ import annotations

"""Text reports for WeatherAPI payloads.

Each formatter takes the decoded JSON body of one endpoint and returns a
markdown-flavoured multi-line string. Formatters are pure: the same payload
always yields the same text.

Required fields are indexed directly, so a malformed payload raises
KeyError/TypeError instead of producing a partial report.
"""

from datetime import date
from typing import Any

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
_AIR_QUALITY_FIELDS = (
    ("CO", "co"),
    ("NO2", "no2"),
    ("O3", "o3"),
    ("PM2.5", "pm2_5"),
    ("PM10", "pm10"),
)


def _text(value: Any) -> str:
    # WeatherAPI sends 22.0 where it means 22, and null for unknown readings.
    if value is None:
        return "null"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _day_label(index: int, raw_date: str) -> str:
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    return _WEEKDAYS[date.fromisoformat(raw_date).weekday()]


def format_current_weather(data: dict[str, Any]) -> str:
    location = data["location"]
    current = data["current"]

    lines = [
        f"🌍 **{location['name']}, {location['country']}**",
        f"📍 {location['region']} ({_text(location['lat'])}, {_text(location['lon'])})",
        f"🕐 Local time: {location['localtime']}",
        "",
        "🌡️ **Current Weather:**",
        f"• Temperature: {_text(current['temp_c'])}°C ({_text(current['temp_f'])}°F)",
        f"• Feels like: {_text(current['feelslike_c'])}°C ({_text(current['feelslike_f'])}°F)",
        f"• Condition: {current['condition']['text']}",
        f"• Humidity: {_text(current['humidity'])}%",
        f"• Wind: {_text(current['wind_kph'])} km/h ({_text(current['wind_mph'])} mph) {current['wind_dir']}",
        f"• Pressure: {_text(current['pressure_mb'])} mb",
        f"• Visibility: {_text(current['vis_km'])} km",
        f"• UV Index: {_text(current['uv'])}",
    ]

    air_quality = current.get("air_quality")
    if air_quality:
        lines.append("")
        lines.append("🏭 **Air Quality:**")
        for label, key in _AIR_QUALITY_FIELDS:
            lines.append(f"• {label}: {_text(air_quality[key])} μg/m³")

    return "\n".join(lines) + "\n"


def format_weather_forecast(data: dict[str, Any]) -> str:
    location = data["location"]

    lines = [
        f"🌍 **{location['name']}, {location['country']}**",
        f"📍 {location['region']}",
        "",
        "📅 **Weather Forecast:**",
        "",
    ]

    for index, forecast_day in enumerate(data["forecast"]["forecastday"]):
        day = forecast_day["day"]
        lines.extend(
            [
                f"**{forecast_day['date']}** ({_day_label(index, forecast_day['date'])})",
                f"• High: {_text(day['maxtemp_c'])}°C ({_text(day['maxtemp_f'])}°F)",
                f"• Low: {_text(day['mintemp_c'])}°C ({_text(day['mintemp_f'])}°F)",
                f"• Condition: {day['condition']['text']}",
                f"• Chance of rain: {_text(day['daily_chance_of_rain'])}%",
                f"• Max wind: {_text(day['maxwind_kph'])} km/h",
                f"• Avg humidity: {_text(day['avghumidity'])}%",
                "",
            ]
        )

    alerts = (data.get("alerts") or {}).get("alert") or []
    if alerts:
        lines.append("⚠️ **Weather Alerts:**")
        for alert in alerts:
            lines.append(f"• {alert['headline']}")
            lines.append(f"  {alert['desc']}")
            lines.append("")

    return "\n".join(lines) + "\n"


def format_weather_history(data: dict[str, Any]) -> str:
    location = data["location"]
    history_day = data["forecast"]["forecastday"][0]
    day = history_day["day"]

    lines = [
        f"🌍 **{location['name']}, {location['country']}**",
        f"📍 {location['region']}",
        f"📅 Historical weather for {history_day['date']}",
        "",
        "🌡️ **Temperature:**",
        f"• Max: {_text(day['maxtemp_c'])}°C ({_text(day['maxtemp_f'])}°F)",
        f"• Min: {_text(day['mintemp_c'])}°C ({_text(day['mintemp_f'])}°F)",
        f"• Avg: {_text(day['avgtemp_c'])}°C ({_text(day['avgtemp_f'])}°F)",
        "",
        "🌤️ **Conditions:**",
        f"• {day['condition']['text']}",
        f"• Max wind: {_text(day['maxwind_kph'])} km/h",
        f"• Total precipitation: {_text(day['totalprecip_mm'])} mm",
        f"• Avg humidity: {_text(day['avghumidity'])}%",
        f"• UV Index: {_text(day['uv'])}",
    ]
    return "\n".join(lines) + "\n"
