"""
Enumeration of the geographic regions used to classify places of birth

Values are the member names, so that a region compares equal to (and
serialises as) its plain string name
"""

from enum import Enum, auto


class Region(str, Enum):
    def _generate_next_value_(name, start, count, last_values):
        return name

    SOUTHEAST_ASIA = auto()
    EAST_ASIA = auto()
    SOUTH_ASIA = auto()
    MIDDLE_EAST = auto()
    FAR_EAST = auto()
    ASIA_PACIFIC = auto()
    SOUTH_AMERICA = auto()
    MIDDLE_AMERICA = auto()
    NORTH_AMERICA = auto()
    AFRICA = auto()
    EUROPE = auto()
    EASTERN_EUROPE = auto()
    BRITISH_ISLES = auto()
    MISCELLANEOUS = auto()

    def __str__(self) -> str:
        return self.value
