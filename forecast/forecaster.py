"""
The forecaster capability shared by providers, adapters and caches.
"""
from typing import Protocol

from .models import Day, Forecast, Region


class Forecaster(Protocol):
    def forecast_for(self, region: Region, day: Day) -> Forecast:
        """Provide the forecast for a given region and day."""
        ...
