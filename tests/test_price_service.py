"""Behavior-focused tests for the price service."""

from datetime import date
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from nstimes.adapters.cache import NullPriceCache, PriceCache
from nstimes.application.services import PriceService, StationMatcher
from nstimes.domain.errors import (
    AmbiguousStationError,
    NsApiError,
    PriceCacheError,
    StationNotFoundError,
)
from nstimes.domain.models import Price, StationRecord, TravelClass, TravelType

AMSTERDAM = StationRecord("Amsterdam Centraal", 8400058)
SLOTERDIJK = StationRecord("Amsterdam Sloterdijk", 8400054)
UTRECHT = StationRecord("Utrecht Centraal", 8400621)


def _price(cents: int, display_name: str = "Enkele reis") -> Price:
    return Price(
        total_price_in_cents=cents,
        price_per_adult_in_cents=cents,
        discount_type="NONE",
        travel_class="SECOND_CLASS",
        display_name=display_name,
    )


@pytest.fixture
def matcher() -> StationMatcher:
    """Matcher over three stations."""
    return StationMatcher([AMSTERDAM, SLOTERDIJK, UTRECHT])


@pytest.fixture
def repository() -> MagicMock:
    """Price repository returning two options."""
    repo = MagicMock()
    repo.fetch_prices = AsyncMock(return_value=[_price(940), _price(1200, "Flex")])
    return repo


@pytest.fixture
def cache(tmp_path: Path) -> PriceCache:
    """Empty file-backed cache."""
    return PriceCache(tmp_path / "prices.json", today=lambda: date(2025, 6, 15))


class TestCacheMiss:
    """Tests for prices fetched from the API."""

    @pytest.mark.asyncio
    async def test_when_not_cached_then_fetches_and_stores_first_price(
        self, matcher: StationMatcher, repository: MagicMock, cache: PriceCache
    ) -> None:
        """Given an empty cache, when getting prices, then fetches and caches the first one."""
        service = PriceService(matcher, repository, cache)

        quote = await service.get_prices("amsterdam centraal", "utrecht")

        assert quote.origin == AMSTERDAM
        assert quote.destination == UTRECHT
        assert quote.from_cache is False
        assert [p.total_price_in_cents for p in quote.prices] == [940, 1200]
        repository.fetch_prices.assert_awaited_once_with(
            AMSTERDAM, UTRECHT, TravelClass.SECOND_CLASS, TravelType.SINGLE
        )
        assert cache.get("Utrecht Centraal", "Amsterdam Centraal", 2) == 940

    @pytest.mark.asyncio
    async def test_when_api_returns_no_prices_then_nothing_is_cached(
        self, matcher: StationMatcher, repository: MagicMock, cache: PriceCache
    ) -> None:
        """Given no prices from the API, when getting prices, then the cache stays empty."""
        repository.fetch_prices.return_value = []
        service = PriceService(matcher, repository, cache)

        quote = await service.get_prices("amsterdam centraal", "utrecht")

        assert quote.first_price is None
        assert cache.stats().total == 0

    @pytest.mark.asyncio
    async def test_when_return_trip_then_cache_is_bypassed(
        self, matcher: StationMatcher, repository: MagicMock, cache: PriceCache
    ) -> None:
        """Given a cached single price, when asking for a return trip, then the API is used."""
        cache.set("Amsterdam Centraal", "Utrecht Centraal", 2, 111)
        service = PriceService(matcher, repository, cache)

        quote = await service.get_prices(
            "amsterdam centraal", "utrecht", TravelClass.SECOND_CLASS, TravelType.RETURN
        )

        assert quote.from_cache is False
        repository.fetch_prices.assert_awaited_once()
        assert cache.get("Amsterdam Centraal", "Utrecht Centraal", 2) == 111

    @pytest.mark.asyncio
    async def test_when_cache_write_fails_then_prices_are_still_returned(
        self, matcher: StationMatcher, repository: MagicMock
    ) -> None:
        """Given a failing cache, when getting prices, then the quote is still returned."""
        failing_cache = MagicMock()
        failing_cache.get.return_value = None
        failing_cache.set.side_effect = PriceCacheError("disk full")
        service = PriceService(matcher, repository, failing_cache)

        quote = await service.get_prices("amsterdam centraal", "utrecht")

        assert quote.first_price is not None
        failing_cache.set.assert_called_once_with("Amsterdam Centraal", "Utrecht Centraal", 2, 940)

    @pytest.mark.asyncio
    async def test_when_api_fails_then_error_propagates(
        self, matcher: StationMatcher, repository: MagicMock
    ) -> None:
        """Given an API error, when getting prices, then NsApiError is raised."""
        repository.fetch_prices.side_effect = NsApiError("unavailable", status_code=503)
        service = PriceService(matcher, repository, NullPriceCache())

        with pytest.raises(NsApiError):
            await service.get_prices("amsterdam centraal", "utrecht")


class TestCacheHit:
    """Tests for prices served from the cache."""

    @pytest.mark.asyncio
    async def test_when_cached_then_api_is_not_called(
        self, matcher: StationMatcher, repository: MagicMock, cache: PriceCache
    ) -> None:
        """Given a cached price for the reversed pair, when getting prices, then uses the cache."""
        cache.set("Utrecht Centraal", "Amsterdam Centraal", 1, 1580)
        service = PriceService(matcher, repository, cache)

        quote = await service.get_prices(
            "Amsterdam Centraal", "Utrecht Centraal", TravelClass.FIRST_CLASS
        )

        repository.fetch_prices.assert_not_awaited()
        assert quote.from_cache is True
        price = quote.first_price
        assert price is not None
        assert price.total_price_in_cents == 1580
        assert price.price_per_adult_in_cents == 1580
        assert price.display_name == "Cached Price"
        assert price.travel_class == "FIRST_CLASS"
        assert price.is_best_option is True


class TestStationResolution:
    """Tests for station query errors."""

    @pytest.mark.asyncio
    async def test_when_origin_ambiguous_then_raises_before_fetching(
        self, matcher: StationMatcher, repository: MagicMock
    ) -> None:
        """Given an ambiguous origin, when getting prices, then raises without calling the API."""
        service = PriceService(matcher, repository, NullPriceCache())

        with pytest.raises(AmbiguousStationError) as exc_info:
            await service.get_prices("amsterdam", "utrecht")

        assert exc_info.value.candidates == (AMSTERDAM, SLOTERDIJK)
        repository.fetch_prices.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_when_destination_unknown_then_raises_not_found(
        self, matcher: StationMatcher, repository: MagicMock
    ) -> None:
        """Given an unknown destination, when getting prices, then raises StationNotFoundError."""
        service = PriceService(matcher, repository, NullPriceCache())

        with pytest.raises(StationNotFoundError) as exc_info:
            await service.get_prices("utrecht", "Maastricht")

        assert exc_info.value.query == "Maastricht"
