"""Application layer - use cases."""

from nstimes.application.services import PriceService, StationMatcher

__all__ = ["PriceService", "StationMatcher"]
