"""Web adapters."""

from nstimes.adapters.web.price_api import PriceApi

__all__ = ["PriceApi"]
