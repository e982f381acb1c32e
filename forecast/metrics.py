"""
Prometheus metrics for the forecast cache.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    REGISTRY,
    Counter,
    Histogram,
    generate_latest,
)

# Lookup metrics
cache_lookups = Counter(
    "forecast_cache_lookups_total",
    "Total number of cache lookups by outcome",
    ["result"],
)

# Eviction metrics
cache_evictions = Counter(
    "forecast_cache_evictions_total",
    "Total number of cache entries removed",
    ["reason"],
)

# Provider metrics
provider_errors = Counter(
    "forecast_cache_provider_errors_total",
    "Total number of failed calls to the wrapped provider",
)

provider_duration = Histogram(
    "forecast_cache_provider_duration_seconds",
    "Wrapped provider call duration in seconds",
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 15.0],
)


def get_metrics() -> bytes:
    """Get all metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
