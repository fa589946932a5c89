"""Application services."""

from nstimes.application.services.price_service import PriceService
from nstimes.application.services.station_matcher import StationMatcher

__all__ = ["PriceService", "StationMatcher"]
