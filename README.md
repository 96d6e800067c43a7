# ridemap

A small interactive ride-share simulation for the terminal. Drivers and
customers stand at intersections of an 8 × 8 grid of city avenues
("3rd Ave and 4th Ave"). The program draws the map, lists drivers and
customers, and finds a suitable driver for a customer.

## Installation

```
pip install .
```

## Running

```
ridemap
```

The program starts with a preset group of five drivers and four customers,
draws the map, and shows a menu:

```
  (1) Display Map
  (2) Print all drivers
  (3) Print all customers
  (4) Find a ride

Tests:

  (5) Test display map
  (6) Test find a ride
  (0) Exit
```

An entry outside the menu's range is asked for again. Choosing 0, or
reaching the end of input, ends the program.

On the map, a driver appears as the first letter of their name at the top
left of an intersection, and a customer as the first letter of their name
just below and to the right of it. Customers are drawn after drivers, so
they are never hidden by them.

Drivers are listed best rated first; customers are listed alphabetically
by name. Each line shows the user's ID (`D1`, `D2`, … for drivers, `C1`,
`C2`, … for customers), name, rating and location.

### Finding a ride

Choose *Find a ride*, enter a customer ID such as `C3`, pick a car size
(1 small, 2 medium, 3 large) and enter a destination as two numbers. The
destination is clamped to the map, 1 to 8 on each axis; a size other than
1, 2 or 3 is an error.

The nearest matching driver is assigned. A driver matches when their car is
at least the requested size and their rating is no more than two points
above the customer's. Distance is straight-line distance; on a tie the
better-rated driver wins. The driver and the customer then both move to
the destination and the map is drawn again.

### Self checks

*Test display map* draws a fresh copy of the preset city and checks that
every driver and customer appears where they stand, printing a score out
of 4. *Test find a ride* looks up a ride for each of the four preset
customers and prints how many matched the expected driver.

## Using it as a library

```python
from ridemap.location import Location, Size
from ridemap.rideshare import RideShare
from ridemap.users import Customer, Driver
from ridemap.view import View

Customer.reset_next_id()
Driver.reset_next_id()

service = RideShare()
service.add_driver("Elsa", Size.MEDIUM, 5, Location(3, 4))
service.add_customer("Jesse", 5, Location(3, 7))

customer = service.get_customer("C1")
driver = service.find_ride(customer.rating, Size.SMALL, customer.location)
print(driver.describe())

view = View()
view.refresh_map()
service.draw(view)
print(view.render())
```

The modules:

- `ridemap.location` – `Location` (with Manhattan `distance_to`), `Size`,
  `street_name` and the map limits `MAX_X` and `MAX_Y`.
- `ridemap.sorted_list` – `SortedList`, a list kept in order by a comparison
  function, holding at most 256 items (`ListFullError` beyond that).
- `ridemap.users` – `Drawable`, `User`, `Customer` and `Driver`. IDs are
  numbered per class across the whole process; `reset_next_id()` starts
  them again at 1. `User.set_rating` rejects ratings outside 1–5 with
  `ValueError`.
- `ridemap.rideshare` – `RideShare`: `add_driver`, `add_customer`,
  `get_customer`, `find_ride`, `describe_drivers`, `describe_customers`
  and `draw`.
- `ridemap.view` – `View`, which reads from and writes to the streams it is
  given (standard input and output by default) and holds the text map
  (`refresh_map`, `render`, `display_map`, `char_at`).
- `ridemap.controller` – `Controller`, the menu loop, and `main`, the
  `ridemap` command.

## Limitations

The city is fixed at 8 × 8 blocks and the menu only ever works with the
preset drivers and customers: there is no command to add, remove or rename
users, and nothing is saved between runs.

## Tests

```
pip install .[test]
pytest
```