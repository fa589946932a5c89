"""Errors raised by station resolution, the price cache and the NS API client."""

from nstimes.domain.models.station import StationRecord


class NsTimesError(Exception):
    """Base class for all nstimes errors."""


class StationNotFoundError(NsTimesError):
    """A station query matched no station."""

    def __init__(self, query: str) -> None:
        self.query = query
        super().__init__(f"No stations found for query '{query}'")


class AmbiguousStationError(NsTimesError):
    """A station query matched more than one station."""

    def __init__(self, query: str, candidates: tuple[StationRecord, ...]) -> None:
        self.query = query
        self.candidates = candidates
        super().__init__(
            f"Multiple stations matched query '{query}'. Please refine your query."
        )


class PriceCacheError(NsTimesError):
    """The price cache file could not be read, created or written."""


class NsApiError(NsTimesError):
    """The NS API request failed."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        prefix = f"NS API returned status {status_code}: " if status_code else ""
        super().__init__(f"{prefix}{reason}")
