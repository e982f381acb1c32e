"""
Unit tests for the Open-Meteo forecaster.
"""
from datetime import date
from unittest.mock import Mock, patch

import pytest
import requests

from open_meteo import Day, Forecast, Forecaster, Region, UpstreamForecastError
from open_meteo.forecaster import WEATHER_URL, describe_weather_code

# 2025-10-20 is a Monday
MONDAY = date(2025, 10, 20)


def make_response(payload):
    response = Mock()
    response.json.return_value = payload
    response.raise_for_status.return_value = None
    return response


def daily_payload(temperature=14.6, code=3, day="2025-10-24"):
    return {
        "daily": {
            "time": [day],
            "temperature_2m_max": [temperature],
            "weather_code": [code],
        }
    }


class TestForecasterInitialization:
    def test_defaults(self):
        forecaster = Forecaster()

        assert forecaster.weather_url == WEATHER_URL == "https://api.open-meteo.com/v1/forecast"
        assert forecaster.timeout == 15

    def test_custom_settings(self):
        forecaster = Forecaster(weather_url="http://localhost:8080/v1/forecast", timeout=2.5)

        assert forecaster.weather_url == "http://localhost:8080/v1/forecast"
        assert forecaster.timeout == 2.5


class TestRegions:
    def test_every_region_has_distinct_coordinates(self):
        coordinates = [(r.latitude, r.longitude) for r in Region]

        assert len(Region) == 9
        assert len(set(coordinates)) == 9

    def test_regions_are_in_the_uk(self):
        for region in Region:
            assert 49.0 < region.latitude < 61.0
            assert -8.5 < region.longitude < 2.0


class TestNextDate:
    def setup_method(self):
        self.forecaster = Forecaster(today=lambda: MONDAY)

    @pytest.mark.parametrize(
        "day,expected",
        [
            (Day.MONDAY, date(2025, 10, 20)),
            (Day.TUESDAY, date(2025, 10, 21)),
            (Day.FRIDAY, date(2025, 10, 24)),
            (Day.SUNDAY, date(2025, 10, 26)),
        ],
    )
    def test_next_date_from_monday(self, day, expected):
        assert self.forecaster.next_date(day) == expected

    def test_next_date_wraps_into_next_week(self):
        forecaster = Forecaster(today=lambda: date(2025, 10, 23))  # Thursday

        assert forecaster.next_date(Day.THURSDAY) == date(2025, 10, 23)
        assert forecaster.next_date(Day.WEDNESDAY) == date(2025, 10, 29)


class TestForecastFor:
    def setup_method(self):
        self.forecaster = Forecaster(today=lambda: MONDAY)

    @patch("requests.get")
    def test_forecast_success(self, mock_get):
        mock_get.return_value = make_response(daily_payload())

        forecast = self.forecaster.forecast_for(Region.LONDON, Day.FRIDAY)

        assert forecast == Forecast(summary="Overcast", temperature=14.6, date=date(2025, 10, 24))

        mock_get.assert_called_once()
        args, kwargs = mock_get.call_args
        assert args[0] == WEATHER_URL
        params = kwargs["params"]
        assert params["latitude"] == Region.LONDON.latitude
        assert params["longitude"] == Region.LONDON.longitude
        assert params["start_date"] == "2025-10-24"
        assert params["end_date"] == "2025-10-24"
        assert params["daily"] == ["temperature_2m_max", "weather_code"]
        assert kwargs["timeout"] == 15

    @patch("requests.get")
    def test_integer_temperature_is_converted(self, mock_get):
        mock_get.return_value = make_response(daily_payload(temperature=9, code=61))

        forecast = self.forecaster.forecast_for(Region.WALES, Day.FRIDAY)

        assert forecast.temperature == 9.0
        assert isinstance(forecast.temperature, float)
        assert forecast.summary == "Slight rain"

    @patch("requests.get")
    def test_network_error(self, mock_get):
        mock_get.side_effect = requests.ConnectionError("Network error")

        with pytest.raises(UpstreamForecastError, match="Failed to fetch forecast"):
            self.forecaster.forecast_for(Region.LONDON, Day.MONDAY)

    @patch("requests.get")
    def test_http_error(self, mock_get):
        response = Mock()
        response.raise_for_status.side_effect = requests.HTTPError("500 Server Error")
        mock_get.return_value = response

        with pytest.raises(UpstreamForecastError, match="500 Server Error"):
            self.forecaster.forecast_for(Region.LONDON, Day.MONDAY)

    @patch("requests.get")
    def test_invalid_json(self, mock_get):
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.side_effect = ValueError("Expecting value")
        mock_get.return_value = response

        with pytest.raises(UpstreamForecastError):
            self.forecaster.forecast_for(Region.LONDON, Day.MONDAY)

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"daily": "not a dict"},
            {"daily": {}},
            {"daily": {"temperature_2m_max": [], "weather_code": []}},
            {"daily": {"temperature_2m_max": [None], "weather_code": [1]}},
            {"daily": {"temperature_2m_max": [12.0], "weather_code": [None]}},
            {"daily": {"temperature_2m_max": ["hot"], "weather_code": [1]}},
            {"daily": {"temperature_2m_max": [12.0], "weather_code": ["rain"]}},
            {"daily": {"temperature_2m_max": [[12.0]], "weather_code": [1]}},
            ["not", "an", "object"],
        ],
    )
    @patch("requests.get")
    def test_incomplete_payload(self, mock_get, payload, caplog):
        mock_get.return_value = make_response(payload)

        with caplog.at_level("ERROR", logger="open_meteo.forecaster"):
            with pytest.raises(UpstreamForecastError):
                self.forecaster.forecast_for(Region.GLASGOW, Day.SATURDAY)

        assert any("Weather API error" in r.getMessage() for r in caplog.records)

    @patch("requests.get")
    def test_malformed_value_keeps_cause(self, mock_get):
        mock_get.return_value = make_response(daily_payload(temperature="hot"))

        with pytest.raises(UpstreamForecastError, match="Malformed forecast for GLASGOW") as exc_info:
            self.forecaster.forecast_for(Region.GLASGOW, Day.FRIDAY)

        assert isinstance(exc_info.value.__cause__, ValueError)


class TestSafeGet:
    def setup_method(self):
        self.forecaster = Forecaster()

    def test_valid_index(self):
        assert self.forecaster._safe_get([10, 20, 30], 1) == 20

    def test_invalid_index(self):
        assert self.forecaster._safe_get([10, 20, 30], 5) is None
        assert self.forecaster._safe_get([10, 20, 30], -1) is None

    def test_none_and_empty(self):
        assert self.forecaster._safe_get(None, 0) is None
        assert self.forecaster._safe_get([], 0, default=42) == 42

    def test_none_value_uses_default(self):
        assert self.forecaster._safe_get([10, None], 1, default=99) == 99


class TestDescribeWeatherCode:
    @pytest.mark.parametrize(
        "code,summary",
        [(0, "Clear sky"), (3, "Overcast"), (45, "Fog"), (95, "Thunderstorm"), (3.0, "Overcast")],
    )
    def test_known_codes(self, code, summary):
        assert describe_weather_code(code) == summary

    def test_unknown_code(self):
        assert describe_weather_code(42) == "Unknown"
