#!/usr/bin/env python3
"""
Command-line demo: cached Open-Meteo forecasts for UK regions.
"""
import argparse
import json
import logging
import sys
import time
from typing import List, Optional

import open_meteo

from .adapter import adapt
from .cache import ExpiringBoundedCache, with_limited_cache, with_unlimited_cache
from .config import Settings, load_settings
from .errors import ForecastError
from .logging_config import setup_logging
from .metrics import get_metrics
from .models import Day, Forecast, Region

logger = logging.getLogger(__name__)

DEFAULT_REGIONS = ["LONDON", "EDINBURGH"]


def build_forecaster(
    settings: Settings, max_size: Optional[int] = None
) -> ExpiringBoundedCache:
    """Open-Meteo forecaster, adapted and wrapped in a cache."""
    upstream = open_meteo.Forecaster(
        weather_url=settings.open_meteo_url, timeout=settings.open_meteo_timeout
    )
    size = max_size if max_size is not None else settings.cache_max_size
    if size is None:
        return with_unlimited_cache(adapt(upstream))
    return with_limited_cache(adapt(upstream), size)


def format_forecast(region: Region, day: Day, forecast: Forecast, as_json: bool) -> str:
    if as_json:
        return json.dumps(
            {
                "region": region.name,
                "day": day.name,
                "summary": forecast.summary,
                "temperature": forecast.temperature,
            },
            ensure_ascii=False,
        )
    name = region.name.replace("_", " ").title()
    return (
        f"{name} outlook: {forecast.summary}\n"
        f"{name} temperature: {forecast.temperature}"
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Cached weather forecasts")
    parser.add_argument(
        "--region",
        action="append",
        type=str.upper,
        choices=[r.name for r in Region],
        help="Region to forecast (repeatable, default: LONDON and EDINBURGH)",
    )
    parser.add_argument(
        "--day",
        type=str.upper,
        default=Day.MONDAY.name,
        choices=[d.name for d in Day],
        help="Day of the week to forecast",
    )
    parser.add_argument(
        "--repeat", type=int, default=1, help="Lookups per region (repeats hit the cache)"
    )
    parser.add_argument("--max-size", type=int, help="Maximum number of cached forecasts")
    parser.add_argument("--json", action="store_true", help="Print one JSON object per lookup")
    parser.add_argument(
        "--metrics", action="store_true", help="Print Prometheus metrics after the lookups"
    )
    args = parser.parse_args(argv)

    if args.repeat < 1:
        parser.error("--repeat must be at least 1")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the forecast demo."""
    args = parse_args(argv)

    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        forecaster = build_forecaster(settings, args.max_size)
    except ForecastError as e:
        print(f"Configuration error: {e.message}", file=sys.stderr)
        return 1

    day = Day[args.day]
    try:
        for region in [Region[name] for name in args.region or DEFAULT_REGIONS]:
            for _ in range(args.repeat):
                start_time = time.time()
                forecast = forecaster.forecast_for(region, day)
                duration_ms = int((time.time() - start_time) * 1000)
                logger.info(
                    "Forecast served",
                    extra={"region": region.name, "day": day.name, "duration_ms": duration_ms},
                )
                print(format_forecast(region, day, forecast, args.json))
    except (ForecastError, open_meteo.UpstreamForecastError) as e:
        logger.error(f"Forecast failed: {e}")
        print(f"Forecast error: {e}", file=sys.stderr)
        return 1

    if args.metrics:
        sys.stdout.write(get_metrics().decode("utf-8"))
    return 0


if __name__ == "__main__":
    sys.exit(main())
