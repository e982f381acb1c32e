"""
Domain model for forecast lookups.
"""
from enum import Enum
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from .errors import InvalidArgument


class Region(Enum):
    BIRMINGHAM = "BIRMINGHAM"
    EDINBURGH = "EDINBURGH"
    GLASGOW = "GLASGOW"
    LONDON = "LONDON"
    MANCHESTER = "MANCHESTER"
    NORTH_ENGLAND = "NORTH_ENGLAND"
    SOUTH_WEST_ENGLAND = "SOUTH_WEST_ENGLAND"
    SOUTH_EAST_ENGLAND = "SOUTH_EAST_ENGLAND"
    WALES = "WALES"


class Day(Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


class Forecast(BaseModel):
    """A weather forecast: a short summary and a temperature."""

    model_config = ConfigDict(frozen=True)

    summary: str
    temperature: int


class Key(NamedTuple):
    region: Region
    day: Day


def to_region(value) -> Region:
    """Coerce a Region member or its name (any case) to a Region."""
    return _coerce(Region, value, "region")


def to_day(value) -> Day:
    """Coerce a Day member or its name (any case) to a Day."""
    return _coerce(Day, value, "day")


def _coerce(enum_cls, value, field: str):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls[value.strip().upper()]
        except KeyError:
            pass
    raise InvalidArgument(
        f"Unknown {field}: {value!r}",
        details={field: repr(value), "allowed": [m.name for m in enum_cls]},
    )
