"""Price repository port."""

from typing import Protocol

from nstimes.domain.models.price import Price
from nstimes.domain.models.station import StationRecord
from nstimes.domain.models.travel import TravelClass, TravelType


class PriceRepository(Protocol):
    """Port for fetching ticket prices from a remote API."""

    async def fetch_prices(
        self,
        origin: StationRecord,
        destination: StationRecord,
        travel_class: TravelClass,
        travel_type: TravelType,
    ) -> list[Price]:
        """Fetch price options for a station pair."""
        ...
