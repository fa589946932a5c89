"""Protocol for price caching."""

from typing import Protocol

from nstimes.domain.models.cache_stats import CacheStats


class PriceCacheProtocol(Protocol):
    """Protocol for caching single-trip prices per unordered station pair."""

    def get(self, from_station: str, to_station: str, travel_class: int) -> int | None:
        """Return the cached price in cents, or None when absent or expired."""
        ...

    def set(self, from_station: str, to_station: str, travel_class: int, price_cents: int) -> None:
        """Store a price valid until next January 1st."""
        ...

    def cleanup(self) -> int:
        """Remove expired entries and return how many were removed."""
        ...

    def stats(self) -> CacheStats:
        """Return entry counts."""
        ...
