"""Price quote domain model."""

from dataclasses import dataclass

from nstimes.domain.models.price import Price
from nstimes.domain.models.station import StationRecord
from nstimes.domain.models.travel import TravelClass, TravelType


@dataclass(frozen=True)
class PriceQuote:
    """Prices for a resolved station pair."""

    origin: StationRecord
    destination: StationRecord
    travel_class: TravelClass
    travel_type: TravelType
    prices: tuple[Price, ...]
    from_cache: bool = False

    @property
    def first_price(self) -> Price | None:
        """The first price option, if any."""
        return self.prices[0] if self.prices else None
