"""Cache statistics domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of price cache entry counts."""

    total: int
    valid: int
    expired: int
