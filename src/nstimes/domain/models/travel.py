"""Travel class and travel type enums."""

from enum import Enum, IntEnum


class TravelClass(IntEnum):
    """Travel class, numbered like the ticket classes."""

    FIRST_CLASS = 1
    SECOND_CLASS = 2

    @property
    def api_value(self) -> str:
        """Value used by the NS API ('FIRST_CLASS' or 'SECOND_CLASS')."""
        return self.name

    @property
    def label(self) -> str:
        """Short human-readable label."""
        return "1st class" if self is TravelClass.FIRST_CLASS else "2nd class"

    @classmethod
    def from_api_value(cls, value: str) -> "TravelClass":
        """Map an API travel class string, defaulting to second class."""
        return cls.FIRST_CLASS if value == "FIRST_CLASS" else cls.SECOND_CLASS


class TravelType(str, Enum):
    """Single or return journey."""

    SINGLE = "single"
    RETURN = "return"
