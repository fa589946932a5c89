"""NS API adapters."""

from nstimes.adapters.ns_api.http_client import NsHttpClient
from nstimes.adapters.ns_api.ns_price_repository import NsPriceRepository

__all__ = ["NsHttpClient", "NsPriceRepository"]
