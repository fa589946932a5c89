"""Station domain model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StationRecord:
    """A station from the bundled station table."""

    display_name: str
    code: int  # UIC code
