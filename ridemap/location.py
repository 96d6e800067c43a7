"""Grid locations, car sizes and the limits of the city map."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

MAX_ARRAY = 256
MAX_BLOCKS = 256
MAX_X = 8
MAX_Y = 8


class Size(IntEnum):
    """Car size; larger sizes can carry anything a smaller one can."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2


def street_name(number: int) -> str:
    """Name the avenue with the given number, e.g. ``3rd Ave``."""
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix} Ave"


@dataclass
class Location:
    """An intersection on the city grid."""

    x: int = 0
    y: int = 0

    def set_location(self, x: int, y: int) -> None:
        """Move this location to the given coordinates."""
        self.x = x
        self.y = y

    def distance_to(self, other: Location) -> int:
        """Return the city-block (Manhattan) distance to another location."""
        return abs(other.x - self.x) + abs(other.y - self.y)

    def __str__(self) -> str:
        return f"{street_name(self.x)} and {street_name(self.y)}"