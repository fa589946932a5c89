"""Price cache adapters."""

from nstimes.adapters.cache.price_cache import NullPriceCache, PriceCache

__all__ = ["NullPriceCache", "PriceCache"]
