"""
Caching proxy for forecasters.

Responses are kept for one hour. An optional size limit evicts the oldest
entry, by insertion, once the cache is full.
"""
import logging
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple, Optional

from .errors import InvalidConfiguration
from .forecaster import Forecaster
from .metrics import cache_evictions, cache_lookups, provider_duration, provider_errors
from .models import Day, Forecast, Key, Region, to_day, to_region

logger = logging.getLogger(__name__)

ONE_HOUR = 60 * 60


@dataclass(frozen=True)
class CacheEntry:
    key: Key
    forecast: Forecast
    inserted_at: float


class EvictionRecord(NamedTuple):
    key: Key
    inserted_at: float


class ExpiringBoundedCache:
    """
    A Forecaster that wraps another Forecaster and remembers its answers.

    Entries are fresh for ONE_HOUR after the wrapped forecaster returned them.
    Stale entries are swept lazily from the front of the eviction queue when a
    lookup runs into one. With max_size set, inserting into a full cache first
    evicts the oldest entry, fresh or not.
    """

    def __init__(
        self,
        forecaster: Forecaster,
        max_size: Optional[int] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        if forecaster is None or not callable(getattr(forecaster, "forecast_for", None)):
            raise InvalidConfiguration("Forecaster cannot be None")
        if max_size is not None:
            if isinstance(max_size, bool) or not isinstance(max_size, int):
                raise InvalidConfiguration(
                    "Cache size must be an integer", details={"max_size": repr(max_size)}
                )
            if max_size <= 0:
                raise InvalidConfiguration(
                    "Cache size must be greater than zero", details={"max_size": max_size}
                )

        self.max_size = max_size
        self.ttl = ONE_HOUR
        self._forecaster = forecaster
        self._clock = clock or time.time
        self._entries: Dict[Key, CacheEntry] = {}
        self._eviction_queue: "OrderedDict[Key, float]" = OrderedDict()
        self._lock = threading.Lock()

    def forecast_for(self, region: Region, day: Day) -> Forecast:
        key = Key(to_region(region), to_day(day))

        with self._lock:
            forecast = self._hit(key)
            if forecast is not None:
                return forecast

            forecast = self._fetch(key)
            timestamp = self._clock()
            self._store(key, forecast, timestamp)
            return forecast

    lookup = forecast_for

    def clear(self) -> None:
        """Drop every cached forecast."""
        with self._lock:
            self._entries.clear()
            self._eviction_queue.clear()

    def eviction_queue(self) -> List[EvictionRecord]:
        """Snapshot of the eviction queue, oldest first."""
        with self._lock:
            return [EvictionRecord(k, t) for k, t in self._eviction_queue.items()]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key) -> bool:
        if not isinstance(key, tuple) or len(key) != 2:
            return False
        with self._lock:
            return key in self._entries

    def _hit(self, key: Key) -> Optional[Forecast]:
        """Return the cached forecast for key if it is still fresh."""
        entry = self._entries.get(key)
        if entry is None:
            cache_lookups.labels(result="miss").inc()
            logger.debug("Cache miss", extra=_context(key, "miss"))
            return None

        now = self._clock()
        if now - entry.inserted_at < self.ttl:
            cache_lookups.labels(result="hit").inc()
            logger.debug("Cache hit", extra=_context(key, "hit"))
            return entry.forecast

        cache_lookups.labels(result="stale").inc()
        logger.debug("Stale cache entry", extra=_context(key, "stale"))
        self._sweep(now)
        return None

    def _sweep(self, now: float) -> None:
        """Remove stale records from the front of the eviction queue."""
        while self._eviction_queue:
            key, inserted_at = next(iter(self._eviction_queue.items()))
            if now - inserted_at < self.ttl:
                break
            self._eviction_queue.popitem(last=False)
            del self._entries[key]
            cache_evictions.labels(reason="expired").inc()
            logger.debug("Expired cache entry", extra=_context(key, "expired"))

    def _fetch(self, key: Key) -> Forecast:
        start_time = time.perf_counter()
        try:
            return self._forecaster.forecast_for(key.region, key.day)
        except Exception as e:
            provider_errors.inc()
            logger.warning(f"Forecaster failed: {e}", extra=_context(key, "provider_error"))
            raise
        finally:
            provider_duration.observe(time.perf_counter() - start_time)

    def _store(self, key: Key, forecast: Forecast, timestamp: float) -> None:
        # only reachable if the clock went backwards and the sweep stopped early
        if key in self._entries:
            del self._entries[key]
            del self._eviction_queue[key]

        if self.max_size is not None and len(self._entries) >= self.max_size:
            evicted, _ = self._eviction_queue.popitem(last=False)
            del self._entries[evicted]
            cache_evictions.labels(reason="capacity").inc()
            logger.debug("Evicted oldest cache entry", extra=_context(evicted, "capacity"))

        self._entries[key] = CacheEntry(key, forecast, timestamp)
        self._eviction_queue[key] = timestamp


def with_limited_cache(
    forecaster: Forecaster, max_size: int, clock: Optional[Callable[[], float]] = None
) -> ExpiringBoundedCache:
    """Wrap forecaster in a cache holding at most max_size forecasts."""
    if max_size is None:
        raise InvalidConfiguration("A limited cache needs a size")
    return ExpiringBoundedCache(forecaster, max_size=max_size, clock=clock)


def with_unlimited_cache(
    forecaster: Forecaster, clock: Optional[Callable[[], float]] = None
) -> ExpiringBoundedCache:
    """Wrap forecaster in a cache that only ever drops expired forecasts."""
    return ExpiringBoundedCache(forecaster, clock=clock)


def _context(key: Key, event: str) -> Dict[str, str]:
    return {"event": event, "region": key.region.name, "day": key.day.name}
