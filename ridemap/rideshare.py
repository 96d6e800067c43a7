"""The ride-share service: its drivers, its customers and ride matching."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ridemap.location import Location, Size
from ridemap.sorted_list import SortedList
from ridemap.users import Customer, Drawable, Driver

if TYPE_CHECKING:
    from ridemap.view import View


class RideShare:
    """Keeps drivers by descending rating, customers by name, drawables by layer."""

    def __init__(self) -> None:
        self._drivers: SortedList[Driver] = SortedList(Driver.compare_ratings)
        self._customers: SortedList[Customer] = SortedList(Customer.compare_names)
        self._drawables: SortedList[Drawable] = SortedList(Drawable.compare_layers)

    def add_driver(
        self, name: str, size: Size, rating: int, location: Location
    ) -> Driver:
        """Register a new driver and return it."""
        driver = Driver(name, rating, size, location)
        self._drivers.add(driver)
        self._drawables.add(driver)
        return driver

    def add_customer(self, name: str, rating: int, location: Location) -> Customer:
        """Register a new customer and return it."""
        customer = Customer(name, rating, location)
        self._customers.add(customer)
        self._drawables.add(customer)
        return customer

    def get_customer(self, customer_id: str) -> Customer | None:
        """Return the customer with the given id, or None if there is none."""
        return next((c for c in self._customers if c.id == customer_id), None)

    def find_ride(self, rating: int, size: Size, location: Location) -> Driver | None:
        """Return the nearest matching driver; ties go to the earlier driver."""
        best: Driver | None = None
        best_distance = 0.0
        for driver in self._drivers:
            if not driver.match(size, rating):
                continue
            distance = driver.distance_to(location)
            if best is None or distance < best_distance:
                best, best_distance = driver, distance
        return best

    def describe_customers(self) -> list[str]:
        """Return one summary line per customer, in name order."""
        return [customer.describe() for customer in self._customers]

    def describe_drivers(self) -> list[str]:
        """Return one summary line per driver, best rated first."""
        return [driver.describe() for driver in self._drivers]

    def draw(self, view: View) -> None:
        """Draw every driver and customer on ``view``, lowest layer first."""
        for drawable in self._drawables:
            drawable.draw(view)