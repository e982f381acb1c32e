"""
Adapter from the Open-Meteo forecaster to our Forecaster interface.
"""
import open_meteo

from .forecaster import Forecaster
from .models import Day, Forecast, Region, to_day, to_region

REGIONS = {
    Region.BIRMINGHAM: open_meteo.Region.BIRMINGHAM,
    Region.EDINBURGH: open_meteo.Region.EDINBURGH,
    Region.GLASGOW: open_meteo.Region.GLASGOW,
    Region.LONDON: open_meteo.Region.LONDON,
    Region.MANCHESTER: open_meteo.Region.MANCHESTER,
    Region.NORTH_ENGLAND: open_meteo.Region.NORTH_ENGLAND,
    Region.SOUTH_WEST_ENGLAND: open_meteo.Region.SOUTH_WEST_ENGLAND,
    Region.SOUTH_EAST_ENGLAND: open_meteo.Region.SOUTH_EAST_ENGLAND,
    Region.WALES: open_meteo.Region.WALES,
}

DAYS = {
    Day.MONDAY: open_meteo.Day.MONDAY,
    Day.TUESDAY: open_meteo.Day.TUESDAY,
    Day.WEDNESDAY: open_meteo.Day.WEDNESDAY,
    Day.THURSDAY: open_meteo.Day.THURSDAY,
    Day.FRIDAY: open_meteo.Day.FRIDAY,
    Day.SATURDAY: open_meteo.Day.SATURDAY,
    Day.SUNDAY: open_meteo.Day.SUNDAY,
}


class WeatherForecasterAdapter:
    def __init__(self, weather_forecaster: open_meteo.Forecaster):
        self.weather_forecaster = weather_forecaster

    def forecast_for(self, region: Region, day: Day) -> Forecast:
        weather_region = REGIONS[to_region(region)]
        weather_day = DAYS[to_day(day)]
        forecast = self.weather_forecaster.forecast_for(weather_region, weather_day)
        return adapt_forecast(forecast)


def adapt_forecast(forecast: open_meteo.Forecast) -> Forecast:
    return Forecast(summary=forecast.summary, temperature=round(forecast.temperature))


def adapt(weather_forecaster: open_meteo.Forecaster) -> Forecaster:
    """Expose an Open-Meteo forecaster through our Forecaster interface."""
    return WeatherForecasterAdapter(weather_forecaster)
