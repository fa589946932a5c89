"""NS price repository adapter."""

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from nstimes.adapters.ns_api.http_client import NsHttpClient
from nstimes.domain.models.price import Price
from nstimes.domain.models.station import StationRecord
from nstimes.domain.models.travel import TravelClass, TravelType
from nstimes.domain.ports.price_repository import PriceRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession


class NsPriceRepository(PriceRepository):
    """Adapter for fetching prices from the NS price API."""

    def __init__(self, session: "ClientSession", api_token: str, timeout: float = 10) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            api_token: NS API subscription key.
            timeout: Request timeout in seconds.
        """
        self._http_client = NsHttpClient(session=session, api_token=api_token, timeout=timeout)

    async def fetch_prices(
        self,
        origin: StationRecord,
        destination: StationRecord,
        travel_class: TravelClass,
        travel_type: TravelType,
    ) -> list[Price]:
        """Fetch price options, skipping entries that cannot be parsed."""
        raw_prices = await self._http_client.fetch_prices(
            origin.code, destination.code, travel_class.api_value, travel_type.value
        )

        prices = []
        for raw in raw_prices:
            try:
                prices.append(Price.model_validate(raw))
            except ValidationError as e:
                logger.warning(f"Skipping malformed price option: {e.error_count()} error(s)")
        return prices
