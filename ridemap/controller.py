"""Interactive menu that drives the ride-share map."""

from __future__ import annotations

import sys
from typing import Sequence

from ridemap.location import Location, Size
from ridemap.rideshare import RideShare
from ridemap.users import Customer, Driver
from ridemap.view import View

_MENU = [
    "Display Map",
    "Print all drivers",
    "Print all customers",
    "Find a ride\n\nTests:\n",
    "Test display map",
    "Test find a ride",
]

_TEST_DRIVERS = [
    ("Elsa", Size.MEDIUM, 5, Location(3, 4)),
    ("Densel", Size.SMALL, 4, Location(1, 1)),
    ("Carter", Size.LARGE, 3, Location(5, 4)),
    ("Bob", Size.SMALL, 4, Location(2, 2)),
    ("Alice", Size.MEDIUM, 5, Location(7, 7)),
]

_TEST_CUSTOMERS = [
    ("Sally", 2, Location(5, 5)),
    ("Jesse", 5, Location(3, 7)),
    ("Isabelle", 4, Location(4, 5)),
    ("Philip", 3, Location(1, 7)),
]


def _populate(ride_share, drivers, customers) -> None:
    for name, size, rating, location in drivers:
        ride_share.add_driver(name, size, rating, location)
    for name, rating, location in customers:
        ride_share.add_customer(name, rating, location)


def _fresh_ride_share(drivers, customers) -> RideShare:
    Customer.reset_next_id()
    Driver.reset_next_id()
    ride_share = RideShare()
    _populate(ride_share, drivers, customers)
    return ride_share


class Controller:
    """Runs the menu loop and the built-in self checks."""

    def __init__(self, view: View | None = None) -> None:
        self._view = view if view is not None else View()
        self._ride_share = RideShare()

    def _show(self, ride_share: RideShare) -> None:
        self._view.refresh_map()
        ride_share.draw(self._view)
        self._view.display_map()

    def launch(self) -> None:
        """Load the sample city and run the menu until the user exits."""
        _populate(self._ride_share, _TEST_DRIVERS, _TEST_CUSTOMERS)
        self.display_map()

        actions = {
            1: self.display_map,
            2: lambda: print("\n".join(self._ride_share.describe_drivers())),
            3: lambda: print("\n".join(self._ride_share.describe_customers())),
            4: self.find_ride,
            5: self.test_display_map,
            6: self.test_find_ride,
        }
        while (choice := self._view.menu(_MENU)) != 0:
            actions[choice]()
        print("Bye!")

    def display_map(self) -> None:
        """Redraw the map with every driver and customer on it."""
        self._show(self._ride_share)

    def find_ride(self) -> None:
        """Ask for a customer and a trip, assign the best driver and move both."""
        for line in self._ride_share.describe_customers():
            print(line)
        print("Please Enter Customer ID (for instance C3): ", end="", flush=True)
        customer_id = self._view._next_token()

        customer = self._ride_share.get_customer(customer_id)
        if customer is None:
            print(" Error - No such customer exists!!!")
            return

        size, destination = self._view.prompt_ride_info()
        self.display_map()

        driver = self._ride_share.find_ride(customer.rating, size, customer.location)
        if driver is None:
            print(" Error - No such customer exists!!!")
            return

        customer.move_to(destination)
        driver.move_to(destination)
        self.display_map()

        print("Driver:" + driver.describe())
        print("A driver has been successfully assgined to the customer!")

    def test_display_map(self) -> int:
        """Check that users are drawn where they stand; return a score out of 4."""
        ride_share = _fresh_ride_share(_TEST_DRIVERS, _TEST_CUSTOMERS)
        self._show(ride_share)

        def check(kind, entries, column, row) -> int:
            score = 2
            for name, location in entries:
                expected = name[0]
                got = self._view.char_at(column(location), row(location))
                if got != expected:
                    print(f"{kind} {name} is not at the correct location")
                    print(f"Expected {expected} at {location.x}, {location.y}")
                    print(f"Got {got} at {location.x}, {location.y}")
                    score -= 1
            return max(score, 0)

        driver_score = check(
            "Driver",
            [(name, loc) for name, _, _, loc in _TEST_DRIVERS],
            lambda loc: loc.x * 4 - 1,
            lambda loc: loc.y * 2 - 1,
        )
        print(f"Driver location tests complete, score {driver_score}/2")
        customer_score = check(
            "Customer",
            [(name, loc) for name, _, loc in _TEST_CUSTOMERS],
            lambda loc: loc.x * 4 + 1,
            lambda loc: loc.y * 2,
        )
        print(f"Customer location tests complete, score {customer_score}/2")

        score = driver_score + customer_score
        print(f"Total score: {score}/4")
        return score

    def test_find_ride(self) -> int:
        """Check ride matching on a sample city; return the number of correct matches."""
        drivers = [
            (name, size, 2 if name == "Carter" else rating, location)
            for name, size, rating, location in _TEST_DRIVERS
        ]
        ride_share = _fresh_ride_share(drivers, _TEST_CUSTOMERS)
        expectations = [
            ("C1", "Carter"),
            ("C2", "Elsa"),
            ("C3", "Carter Elsa"),
            ("C4", "Elsa"),
        ]
        score = 0
        for customer_id, accepted in expectations:
            customer = ride_share.get_customer(customer_id)
            if customer is None:
                print(f"Customer {customer_id} not found")
                continue
            self._show(ride_share)
            print("Finding ride for customer ")
            print(customer.describe())

            driver = ride_share.find_ride(customer.rating, Size.SMALL, customer.location)
            if driver is None:
                print(f"No driver found for customer {customer_id}")
                continue
            print(f"Driver {driver.name} found for customer {customer_id}")
            if driver.name in accepted:
                print("Correct driver found")
                score += 1
            else:
                print("Incorrect driver found")

        print(f"Score: {score}/{len(expectations)}")
        return score


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive ride-share menu."""
    controller = Controller(View(sys.stdin, sys.stdout))
    try:
        controller.launch()
    except EOFError:
        pass
    return 0