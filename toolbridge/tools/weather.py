"""Weather lookup against an OpenWeatherMap-style current-weather API."""

import logging

import requests
from pydantic import BaseModel, FiniteFloat, ValidationError

from toolbridge.config import get_settings

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "No city or incorrect spelling"


class WeatherCondition(BaseModel):
    main: str


class Temperatures(BaseModel):
    temp_min: FiniteFloat
    temp_max: FiniteFloat


class Wind(BaseModel):
    speed: FiniteFloat


class WeatherReport(BaseModel):
    """The subset of the provider payload we display."""

    weather: list[WeatherCondition]
    main: Temperatures
    wind: Wind

    @property
    def condition(self) -> str:
        return self.weather[0].main if self.weather else "Unknown"


def fetch_weather(
    city: str, api_key: str | None = None, base_url: str | None = None
) -> WeatherReport | None:
    """Query the provider; None on any transport, status, or decode failure."""
    s = get_settings()
    params = {
        "q": city,
        "units": "metric",
        "appid": api_key or s.weather_api_key,
    }

    try:
        response = requests.get(
            base_url or s.weather_url, params=params, timeout=s.request_timeout
        )
    except requests.exceptions.RequestException as e:
        logger.warning(f"Weather request failed for {city!r}: {e}")
        return None

    if not response.ok:
        logger.warning(f"Weather provider returned HTTP {response.status_code} for {city!r}")
        return None

    try:
        return WeatherReport.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        logger.warning(f"Unexpected weather payload for {city!r}: {e}")
        return None


def format_report(city: str, report: WeatherReport) -> str:
    """Render a report; temperatures and wind are truncated, not rounded."""
    return (
        f"\nToday in {city}\n"
        f"{report.condition}\n"
        f"Low temperature: {int(report.main.temp_min)} °C,\n"
        f"High temperature: {int(report.main.temp_max)} °C,\n"
        f"Wind Speed: {int(report.wind.speed)} km/h"
    )


def get_weather(city: str, api_key: str | None = None, base_url: str | None = None) -> str:
    """Weather summary for ``city``, or the fixed not-found message."""
    report = fetch_weather(city, api_key=api_key, base_url=base_url)
    if report is None:
        return NOT_FOUND_MESSAGE
    return format_report(city, report)
