"""
Test data helpers.
"""
import random
import string
from typing import Callable, List, TypeVar

from prometheus_client import REGISTRY

from forecast.models import Day, Forecast, Key, Region

T = TypeVar("T")

MIN_SUMMARY_LENGTH = 8
MAX_SUMMARY_LENGTH = 64
MIN_TEMPERATURE = -40
MAX_TEMPERATURE = 60

START_TIME = 1_760_000_000.0


class FakeClock:
    """Manually advanced clock returning seconds, like time.time."""

    def __init__(self, start: float = START_TIME):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float = 0, minutes: float = 0, hours: float = 0) -> None:
        self.now += seconds + minutes * 60 + hours * 3600


class ForecastData:
    """Seeded random test data, so failures reproduce."""

    def __init__(self, seed: int = 1234):
        self.random = random.Random(seed)

    def make_list(self, size: int, factory: Callable[[int], T]) -> List[T]:
        return [factory(i) for i in range(size)]

    def region(self) -> Region:
        return self.random.choice(list(Region))

    def day(self) -> Day:
        return self.random.choice(list(Day))

    def summary(self) -> str:
        length = self.random.randrange(MIN_SUMMARY_LENGTH, MAX_SUMMARY_LENGTH)
        return "".join(self.random.choice(string.ascii_letters) for _ in range(length))

    def temperature(self) -> int:
        return self.random.randrange(MIN_TEMPERATURE, MAX_TEMPERATURE)

    def forecast(self) -> Forecast:
        return Forecast(summary=self.summary(), temperature=self.temperature())

    def distinct_keys(self, amount: int) -> List[Key]:
        all_keys = [Key(r, d) for r in Region for d in Day]
        return self.random.sample(all_keys, amount)


def sample_value(name: str, labels=None) -> float:
    """Current value of a Prometheus sample, 0.0 if not yet recorded."""
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0
