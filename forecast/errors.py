"""
Forecast exceptions.
"""
from typing import Any, Dict, Optional


class ForecastError(Exception):
    """Base exception for all forecast errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidConfiguration(ForecastError):
    """Raised when a cache or the settings are configured with invalid values."""


class InvalidArgument(ForecastError):
    """Raised when a lookup names a region or day we do not know about."""
