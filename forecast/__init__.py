"""
Cached weather forecasts for UK regions.
"""
from .cache import (
    ExpiringBoundedCache,
    EvictionRecord,
    with_limited_cache,
    with_unlimited_cache,
)
from .errors import ForecastError, InvalidArgument, InvalidConfiguration
from .forecaster import Forecaster
from .models import Day, Forecast, Key, Region

__all__ = [
    "Day",
    "EvictionRecord",
    "ExpiringBoundedCache",
    "Forecast",
    "ForecastError",
    "Forecaster",
    "InvalidArgument",
    "InvalidConfiguration",
    "Key",
    "Region",
    "with_limited_cache",
    "with_unlimited_cache",
]
