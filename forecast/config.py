"""
Settings read from the environment.
"""
import logging
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ValidationError, field_validator

from .errors import InvalidConfiguration

DEFAULT_OPEN_METEO_URL = "https://api.open-meteo.com/v1/forecast"

ENV_VARS = {
    "cache_max_size": "FORECAST_CACHE_MAX_SIZE",
    "log_level": "LOG_LEVEL",
    "open_meteo_url": "OPEN_METEO_URL",
    "open_meteo_timeout": "OPEN_METEO_TIMEOUT",
}


class Settings(BaseModel):
    cache_max_size: Optional[int] = None
    log_level: str = "INFO"
    open_meteo_url: str = DEFAULT_OPEN_METEO_URL
    open_meteo_timeout: float = 15.0

    @field_validator("cache_max_size")
    @classmethod
    def validate_cache_max_size(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v <= 0:
            raise ValueError("cache size must be greater than zero")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{v}'")
        return level

    @field_validator("open_meteo_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout must be positive")
        return v


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """
    Build Settings from environment variables.

    Unset or empty variables fall back to their defaults. Raises
    InvalidConfiguration when a value does not validate.
    """
    env = os.environ if environ is None else environ
    values = {}
    for field, var in ENV_VARS.items():
        raw = env.get(var)
        if raw is not None and raw.strip() != "":
            values[field] = raw.strip()

    try:
        return Settings(**values)
    except ValidationError as e:
        errors = [
            f"{ENV_VARS[str(err['loc'][0])]}: {err['msg']}" for err in e.errors()
        ]
        raise InvalidConfiguration("Invalid settings", details={"errors": errors}) from e
