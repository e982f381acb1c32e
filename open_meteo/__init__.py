"""
Open-Meteo backed weather forecaster.
"""
from .forecaster import Day, Forecast, Forecaster, Region, UpstreamForecastError

__all__ = ["Day", "Forecast", "Forecaster", "Region", "UpstreamForecastError"]
