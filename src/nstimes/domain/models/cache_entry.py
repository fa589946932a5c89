"""Cached price entry domain model."""

from datetime import date
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def next_january_first(today: date) -> date:
    """Return January 1st of the year after ``today``."""
    return date(today.year + 1, 1, 1)


class CacheEntry(BaseModel):
    """A single-trip price valid until the end of the year it was fetched in."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    price_cents: int = Field(ge=0)
    travel_class: Literal[1, 2]
    expires_at: date

    @classmethod
    def create(cls, price_cents: int, travel_class: int, today: date) -> "CacheEntry":
        """Create an entry fetched on ``today``."""
        return cls(
            price_cents=price_cents,
            travel_class=travel_class,
            expires_at=next_january_first(today),
        )

    def is_expired(self, today: date) -> bool:
        """Check whether the entry is no longer valid on ``today``."""
        return today >= self.expires_at
