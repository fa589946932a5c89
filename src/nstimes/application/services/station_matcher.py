"""Offline station matching over a static station table."""

from collections.abc import Iterable

from nstimes.domain.errors import AmbiguousStationError, StationNotFoundError
from nstimes.domain.models.station import StationRecord
from nstimes.domain.models.station_lookup_result import (
    MultipleMatches,
    NoMatch,
    SingleMatch,
    StationLookupResult,
)


class StationMatcher:
    """Resolves free-text station queries against a read-only station table.

    Matching is case-insensitive. A station whose name equals the query wins
    outright; otherwise every station whose name contains the query is a
    candidate. The matcher holds no mutable state and is safe to share
    between threads and tasks.
    """

    def __init__(self, stations: Iterable[StationRecord]) -> None:
        """Initialize with the station table.

        Args:
            stations: Station records in table order.
        """
        self._stations = tuple(stations)
        self._lowered = tuple(station.display_name.lower() for station in self._stations)

    @property
    def stations(self) -> tuple[StationRecord, ...]:
        """The station table in table order."""
        return self._stations

    def lookup(self, query: str) -> StationLookupResult:
        """Look up a station by name.

        Args:
            query: Free-text station query.

        Returns:
            SingleMatch for an exact or unique substring match, NoMatch when
            nothing matches, MultipleMatches with all candidates in table order
            otherwise.
        """
        q = query.lower()

        for station, name in zip(self._stations, self._lowered, strict=True):
            if name == q:
                return SingleMatch(station)

        matches = tuple(
            station
            for station, name in zip(self._stations, self._lowered, strict=True)
            if q in name
        )

        if not matches:
            return NoMatch()
        if len(matches) == 1:
            return SingleMatch(matches[0])
        return MultipleMatches(matches)

    def resolve(self, query: str) -> StationRecord:
        """Resolve a query to exactly one station.

        Raises:
            StationNotFoundError: If nothing matches.
            AmbiguousStationError: If more than one station matches.
        """
        result = self.lookup(query)
        if isinstance(result, SingleMatch):
            return result.station
        if isinstance(result, MultipleMatches):
            raise AmbiguousStationError(query, result.candidates)
        raise StationNotFoundError(query)
