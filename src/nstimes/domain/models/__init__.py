"""Domain models for NS prices and stations."""

from nstimes.domain.models.cache_entry import CacheEntry, next_january_first
from nstimes.domain.models.cache_stats import CacheStats
from nstimes.domain.models.price import Price
from nstimes.domain.models.price_quote import PriceQuote
from nstimes.domain.models.station import StationRecord
from nstimes.domain.models.station_lookup_result import (
    MultipleMatches,
    NoMatch,
    SingleMatch,
    StationLookupResult,
)
from nstimes.domain.models.travel import TravelClass, TravelType

__all__ = [
    "CacheEntry",
    "CacheStats",
    "MultipleMatches",
    "NoMatch",
    "Price",
    "PriceQuote",
    "SingleMatch",
    "StationLookupResult",
    "StationRecord",
    "TravelClass",
    "TravelType",
    "next_january_first",
]
