"""
Weather forecasts for UK regions using the Open-Meteo API.
"""
import logging
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Callable, List, Optional

import requests
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

WEATHER_URL = "https://api.open-meteo.com/v1/forecast"

# WMO weather interpretation codes
WEATHER_CODES = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Fog",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    56: "Light freezing drizzle",
    57: "Dense freezing drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    66: "Light freezing rain",
    67: "Heavy freezing rain",
    71: "Slight snowfall",
    73: "Moderate snowfall",
    75: "Heavy snowfall",
    77: "Snow grains",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    85: "Slight snow showers",
    86: "Heavy snow showers",
    95: "Thunderstorm",
    96: "Thunderstorm with slight hail",
    99: "Thunderstorm with heavy hail",
}


class UpstreamForecastError(Exception):
    """Raised when Open-Meteo cannot produce a forecast."""


class Region(Enum):
    """Forecast regions, each pinned to a representative location."""

    BIRMINGHAM = (52.49, -1.89)
    EDINBURGH = (55.95, -3.19)
    GLASGOW = (55.86, -4.25)
    LONDON = (51.51, -0.13)
    MANCHESTER = (53.48, -2.24)
    NORTH_ENGLAND = (54.98, -1.62)
    SOUTH_WEST_ENGLAND = (50.72, -3.53)
    SOUTH_EAST_ENGLAND = (50.82, -0.14)
    WALES = (51.48, -3.18)

    @property
    def latitude(self) -> float:
        return self.value[0]

    @property
    def longitude(self) -> float:
        return self.value[1]


class Day(Enum):
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6


@dataclass(frozen=True)
class Forecast:
    summary: str
    temperature: float
    date: date


class Forecaster:
    def __init__(
        self,
        weather_url: str = WEATHER_URL,
        timeout: float = 15,
        today: Optional[Callable[[], date]] = None,
    ):
        self.weather_url = weather_url
        self.timeout = timeout
        self._today = today or date.today

    def next_date(self, day: Day) -> date:
        """The next calendar date falling on day, today included."""
        return self._today() + relativedelta(weekday=day.value)

    def forecast_for(self, region: Region, day: Day) -> Forecast:
        """
        Fetch the forecast for region on the next occurrence of day.

        The summary describes the WMO weather code and the temperature is the
        daily maximum in Celsius.
        """
        target = self.next_date(day)
        params = {
            "latitude": region.latitude,
            "longitude": region.longitude,
            "daily": ["temperature_2m_max", "weather_code"],
            "start_date": target.isoformat(),
            "end_date": target.isoformat(),
            "temperature_unit": "celsius",
            "timezone": "Europe/London",
        }

        try:
            response = requests.get(self.weather_url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Weather API error: {e}")
            raise UpstreamForecastError(f"Failed to fetch forecast: {e}") from e

        daily = data.get("daily") if isinstance(data, dict) else None
        if not isinstance(daily, dict):
            logger.error("Weather API error: response has no daily data")
            raise UpstreamForecastError("Forecast response has no daily data")

        temperature = self._safe_get(daily.get("temperature_2m_max"), 0)
        code = self._safe_get(daily.get("weather_code"), 0)
        if temperature is None or code is None:
            message = f"Incomplete forecast for {region.name} on {target.isoformat()}"
            logger.error(f"Weather API error: {message}")
            raise UpstreamForecastError(message)

        try:
            summary = describe_weather_code(code)
            temperature = float(temperature)
        except (TypeError, ValueError) as e:
            logger.error(f"Weather API error: malformed daily data: {e}")
            raise UpstreamForecastError(
                f"Malformed forecast for {region.name} on {target.isoformat()}: {e}"
            ) from e

        return Forecast(summary=summary, temperature=temperature, date=target)

    def _safe_get(
        self, data_list: Optional[List], index: int, default: Any = None
    ) -> Any:
        """Safely get item from list at index."""
        if data_list and 0 <= index < len(data_list):
            value = data_list[index]
            return value if value is not None else default
        return default


def describe_weather_code(code: int) -> str:
    return WEATHER_CODES.get(int(code), "Unknown")
