"""Adapters layer - external system integrations."""

from nstimes.adapters.cache import NullPriceCache, PriceCache
from nstimes.adapters.config import AppConfig
from nstimes.adapters.ns_api import NsPriceRepository
from nstimes.adapters.stations import load_bundled_stations

__all__ = [
    "AppConfig",
    "NsPriceRepository",
    "NullPriceCache",
    "PriceCache",
    "load_bundled_stations",
]
