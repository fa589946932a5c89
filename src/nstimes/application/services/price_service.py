"""Price lookup service combining station matching, caching and the remote API."""

import asyncio
import logging

from nstimes.application.services.station_matcher import StationMatcher
from nstimes.domain.contracts.price_cache import PriceCacheProtocol
from nstimes.domain.errors import PriceCacheError
from nstimes.domain.models.price import Price
from nstimes.domain.models.price_quote import PriceQuote
from nstimes.domain.models.station import StationRecord
from nstimes.domain.models.travel import TravelClass, TravelType
from nstimes.domain.ports.price_repository import PriceRepository

logger = logging.getLogger(__name__)

CACHED_PRICE_DISPLAY_NAME = "Cached Price"


def create_cached_price(price_cents: int, travel_class: TravelClass) -> Price:
    """Build a minimal price option for a cached price."""
    return Price(
        total_price_in_cents=price_cents,
        price_per_adult_in_cents=price_cents,
        discount_in_cents=None,
        operator_name=None,
        discount_type="NONE",
        travel_class=travel_class.api_value,
        display_name=CACHED_PRICE_DISPLAY_NAME,
        is_best_option=True,
    )


class PriceService:
    """Service for getting ticket prices between two station queries."""

    def __init__(
        self,
        matcher: StationMatcher,
        price_repository: PriceRepository,
        cache: PriceCacheProtocol,
    ) -> None:
        """Initialize the service.

        Args:
            matcher: Station matcher used to resolve queries.
            price_repository: Repository for fetching prices from the API.
            cache: Price cache; pass a NullPriceCache to disable caching.
        """
        self._matcher = matcher
        self._price_repository = price_repository
        self._cache = cache

    def resolve_stations(self, from_query: str, to_query: str) -> tuple[StationRecord, StationRecord]:
        """Resolve the origin and destination queries."""
        return self._matcher.resolve(from_query), self._matcher.resolve(to_query)

    async def get_prices(
        self,
        from_query: str,
        to_query: str,
        travel_class: TravelClass = TravelClass.SECOND_CLASS,
        travel_type: TravelType = TravelType.SINGLE,
    ) -> PriceQuote:
        """Get prices for a journey.

        Single-trip prices are served from the cache when available. On a miss
        the first price from the API is stored in the cache.

        Raises:
            StationNotFoundError: If a query matches no station.
            AmbiguousStationError: If a query matches several stations.
            NsApiError: If the remote API call fails.
        """
        origin, destination = self.resolve_stations(from_query, to_query)
        use_cache = travel_type is TravelType.SINGLE

        if use_cache:
            cached = await asyncio.to_thread(
                self._cache.get, origin.display_name, destination.display_name, int(travel_class)
            )
            if cached is not None:
                logger.debug(
                    f"Cache hit for {origin.display_name} - {destination.display_name} "
                    f"({travel_class.label})"
                )
                return PriceQuote(
                    origin=origin,
                    destination=destination,
                    travel_class=travel_class,
                    travel_type=travel_type,
                    prices=(create_cached_price(cached, travel_class),),
                    from_cache=True,
                )

        prices = await self._price_repository.fetch_prices(
            origin, destination, travel_class, travel_type
        )

        if use_cache and prices:
            await self._store_in_cache(origin, destination, travel_class, prices[0])

        return PriceQuote(
            origin=origin,
            destination=destination,
            travel_class=travel_class,
            travel_type=travel_type,
            prices=tuple(prices),
        )

    async def _store_in_cache(
        self,
        origin: StationRecord,
        destination: StationRecord,
        travel_class: TravelClass,
        price: Price,
    ) -> None:
        """Store the first price, logging instead of failing on cache errors."""
        try:
            await asyncio.to_thread(
                self._cache.set,
                origin.display_name,
                destination.display_name,
                int(travel_class),
                price.total_price_in_cents,
            )
        except (PriceCacheError, ValueError) as e:
            logger.warning(f"Failed to update price cache: {e}")
