"""Wiring of configuration, logging, cache and services for the entry points."""

import logging
import sys
from pathlib import Path

from nstimes.adapters.cache import NullPriceCache, PriceCache
from nstimes.adapters.config import AppConfig
from nstimes.adapters.stations import load_bundled_stations
from nstimes.application.services import StationMatcher
from nstimes.domain.contracts import PriceCacheProtocol

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_station_matcher() -> StationMatcher:
    """Create a matcher over the bundled station table."""
    return StationMatcher(load_bundled_stations())


def create_price_cache(cache_file: str | Path | None) -> PriceCacheProtocol:
    """Open the price cache at ``cache_file``, or a no-op cache when unset.

    Raises:
        PriceCacheError: If the cache file cannot be opened.
    """
    if not cache_file:
        return NullPriceCache()
    return PriceCache(cache_file)


def load_config() -> AppConfig:
    """Load the application configuration from the environment."""
    return AppConfig()
