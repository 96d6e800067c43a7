"""Riders and drivers that live on the map."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import replace
from typing import TYPE_CHECKING

from ridemap.location import Location, Size

if TYPE_CHECKING:
    from ridemap.view import View


class Drawable(ABC):
    """Something that can draw itself on a view; lower layers draw first."""

    layer: int = 0

    @abstractmethod
    def draw(self, view: View) -> None:
        """Draw this object on ``view``."""

    @staticmethod
    def compare_layers(first: Drawable | None, second: Drawable | None) -> int:
        """Order two drawables by layer."""
        if first is None or second is None:
            raise ValueError("cannot compare a missing drawable")
        return first.layer - second.layer


class User:
    """A person using the service, identified by a code letter and a number."""

    def __init__(
        self, code: str, number: int, name: str, rating: int, location: Location
    ) -> None:
        self.id = f"{code}{number}"
        self.name = name
        self.rating = rating
        self.location = replace(location)

    def set_rating(self, rating: int) -> None:
        """Change the rating; it must lie between 1 and 5."""
        if not 1 <= rating <= 5:
            raise ValueError(f"invalid user rating: {rating}")
        self.rating = rating

    def move_to(self, location: Location) -> None:
        """Move to a copy of ``location``."""
        self.location.set_location(location.x, location.y)

    def describe(self) -> str:
        """Return a one-line summary of this user."""
        return (
            f"ID: {self.id}, Name: {self.name}, Rating: {self.rating}, "
            f"Location: {self.location}"
        )


class Customer(User, Drawable):
    """A rider waiting for a car."""

    layer = 3
    _next_id = 0

    def __init__(
        self, name: str, rating: int = 5, location: Location | None = None
    ) -> None:
        Customer._next_id += 1
        super().__init__(
            "C", Customer._next_id, name, rating,
            location if location is not None else Location(),
        )

    def describe(self) -> str:
        return f"Customer: {self.name:<10}" + super().describe()

    def draw(self, view: View) -> None:
        view.draw_customer(self.location.x, self.location.y, self.name[0])

    @staticmethod
    def compare_ratings(first: Customer, second: Customer) -> int:
        """Order customers by ascending rating."""
        return first.rating - second.rating

    @staticmethod
    def compare_names(first: Customer, second: Customer) -> int:
        """Order customers alphabetically by name."""
        return (first.name > second.name) - (first.name < second.name)

    @classmethod
    def reset_next_id(cls) -> None:
        """Restart customer numbering at C1."""
        Customer._next_id = 0


class Driver(User, Drawable):
    """A driver with a car of a given size."""

    layer = 1
    _next_id = 0

    def __init__(self, name: str, rating: int, size: Size, location: Location) -> None:
        Driver._next_id += 1
        super().__init__("D", Driver._next_id, name, rating, location)
        self.size = Size(size)

    def match(self, size: Size, rating: int) -> bool:
        """True if the car is big enough and the rating exceeds ``rating`` by at most 2."""
        return self.size >= size and self.rating - rating <= 2

    def distance_to(self, location: Location) -> float:
        """Return the straight-line distance to ``location``."""
        dx = self.location.x - location.x
        dy = self.location.y - location.y
        return math.sqrt(dx * dx + dy * dy)

    def draw(self, view: View) -> None:
        view.draw_driver(self.location.x, self.location.y, self.name[0])

    @staticmethod
    def compare_ratings(first: Driver, second: Driver) -> int:
        """Order drivers by descending rating."""
        return second.rating - first.rating

    @classmethod
    def reset_next_id(cls) -> None:
        """Restart driver numbering at D1."""
        Driver._next_id = 0