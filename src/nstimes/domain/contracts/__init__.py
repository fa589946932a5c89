"""Contracts (protocols) implemented by adapters."""

from nstimes.domain.contracts.price_cache import PriceCacheProtocol

__all__ = ["PriceCacheProtocol"]
