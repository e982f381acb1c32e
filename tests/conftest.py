"""
Shared fixtures.
"""
import logging

import pytest

from .helpers import FakeClock, ForecastData


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def data():
    return ForecastData()


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way it was after setup_logging."""
    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    for handler in handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(level)
