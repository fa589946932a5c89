"""Domain layer - core models, errors, contracts and ports."""

from nstimes.domain.contracts import PriceCacheProtocol
from nstimes.domain.errors import (
    AmbiguousStationError,
    NsApiError,
    NsTimesError,
    PriceCacheError,
    StationNotFoundError,
)
from nstimes.domain.models import (
    CacheEntry,
    CacheStats,
    Price,
    PriceQuote,
    StationLookupResult,
    StationRecord,
    TravelClass,
    TravelType,
)
from nstimes.domain.ports import PriceRepository

__all__ = [
    "AmbiguousStationError",
    "CacheEntry",
    "CacheStats",
    "NsApiError",
    "NsTimesError",
    "Price",
    "PriceCacheError",
    "PriceCacheProtocol",
    "PriceQuote",
    "PriceRepository",
    "StationLookupResult",
    "StationNotFoundError",
    "StationRecord",
    "TravelClass",
    "TravelType",
]
