"""Text view: menus, prompts and an ASCII map of the city."""

from __future__ import annotations

import sys
from collections import deque
from typing import Sequence, TextIO

from ridemap.location import MAX_X, MAX_Y, Location, Size

_ROWS = MAX_Y * 2 + 4
_COLS = MAX_X * 4 + 4


class View:
    """Reads choices from ``stdin`` and draws the map to ``stdout``."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._tokens: deque[str] = deque()
        self._map = [[" "] * _COLS for _ in range(_ROWS)]

    def _write(self, text: str) -> None:
        self._stdout.write(text)

    def _next_token(self) -> str:
        while not self._tokens:
            line = self._stdin.readline()
            if not line:
                raise EOFError("input ended")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def _read_choice(self) -> int:
        token = self._next_token()
        try:
            return int(token)
        except ValueError:
            return -1

    def menu(self, options: Sequence[str]) -> int:
        """Show numbered options and return the selection (0 means exit)."""
        lines = ["", "Please make a selection:", ""]
        lines += [f"  ({number}) {option}" for number, option in enumerate(options, 1)]
        lines += ["  (0) Exit", ""]
        self._write("\n".join(lines) + "\n")
        self._write("Enter your selection: ")
        choice = self._read_choice()
        while not 0 <= choice <= len(options):
            self._write("Enter your selection: ")
            choice = self._read_choice()
        return choice

    def prompt_name(self) -> str:
        """Ask for and return a name."""
        self._write("Enter your name: ")
        name = self._next_token()
        self._write("\n")
        return name

    def prompt_ride_info(self) -> tuple[Size, Location]:
        """Ask for a car size and a destination; the destination is clamped to the map."""
        self._write(
            "What size of car do you need?\n(1) Small\n(2) Medium\n(3) Large\n"
        )
        number = int(self._next_token())
        try:
            size = Size(number - 1)
        except ValueError:
            raise ValueError(f"no car size {number}") from None
        self._write(
            "What is your destination? Enter 2 numbers between 1 and 8\n"
            "For example: 3 4\n"
        )
        x = int(self._next_token())
        y = int(self._next_token())
        self._write("\n")
        x = min(max(x, 1), MAX_X)
        y = min(max(y, 1), MAX_Y)
        return size, Location(x, y)

    def refresh_map(self) -> None:
        """Erase the map and draw the border, the axis labels and the buildings."""
        grid = [[" "] * _COLS for _ in range(_ROWS)]
        self._map = grid

        for col in range(MAX_X * 4 + 2):
            grid[0][col] = "_"

        for column in range(MAX_X):
            label = column + 1
            if label > 9:
                grid[0][column * 4 + 2] = str(label // 10)
            grid[0][column * 4 + 3] = str(label % 10)

        for row in range(MAX_Y):
            label = row + 1
            if label > 9:
                grid[row * 2 + 1][0] = str(label // 10)
            grid[row * 2 + 1][1] = str(label % 10)
            grid[row * 2 + 1][2] = "|"
            grid[row * 2][2] = "|"
            grid[row * 2 + 1][MAX_X * 4] = "|"
            grid[row * 2][MAX_X * 4] = "|"

        bottom = MAX_Y * 2 - 1
        for col in range(2, MAX_X * 4 + 1):
            grid[bottom][col] = "_"
        grid[bottom][2] = "|"
        grid[bottom][MAX_X * 4] = "|"

        for y in range(1, MAX_Y):
            for x in range(1, MAX_X):
                self.draw_building(x, y)

    def render(self) -> str:
        """Return the visible rows of the map, one per line."""
        return "\n".join("".join(row) for row in self._map[: MAX_Y * 2 + 2])

    def display_map(self) -> None:
        """Write the map to the output stream."""
        self._write("\n" + self.render() + "\n")

    def draw_building(self, x: int, y: int) -> None:
        """Draw the block whose top-left corner is intersection (x, y)."""
        self._map[y * 2][x * 4] = "|"
        self._map[y * 2 - 1][x * 4 + 1] = "_"
        self._map[y * 2][x * 4 + 1] = "_"
        self._map[y * 2][x * 4 + 2] = "|"

    def draw_driver(self, x: int, y: int, avatar: str) -> None:
        """Mark a driver at intersection (x, y)."""
        self._map[y * 2 - 1][x * 4 - 1] = avatar

    def draw_customer(self, x: int, y: int, avatar: str) -> None:
        """Mark a customer at intersection (x, y)."""
        self._map[y * 2][x * 4 + 1] = avatar

    def char_at(self, x: int, y: int) -> str:
        """Return the character at map column ``x`` and row ``y``."""
        return self._map[y][x]