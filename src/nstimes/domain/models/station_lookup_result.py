"""Result variants of a local station lookup."""

from dataclasses import dataclass

from nstimes.domain.models.station import StationRecord


@dataclass(frozen=True)
class SingleMatch:
    """The query resolved to exactly one station."""

    station: StationRecord


@dataclass(frozen=True)
class NoMatch:
    """The query matched no station."""


@dataclass(frozen=True)
class MultipleMatches:
    """The query matched several stations, in table order."""

    candidates: tuple[StationRecord, ...]


StationLookupResult = SingleMatch | NoMatch | MultipleMatches
