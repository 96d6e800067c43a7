import io

import pytest

from ridemap.location import MAX_X, MAX_Y, Location, Size
from ridemap.view import View


def _view(text=""):
    out = io.StringIO()
    return View(io.StringIO(text), out), out


def test_render_dimensions():
    view, _ = _view()
    view.refresh_map()
    lines = view.render().split("\n")
    assert len(lines) == MAX_Y * 2 + 2
    assert all(len(line) == MAX_X * 4 + 4 for line in lines)


def test_column_labels_on_top_row():
    view, _ = _view()
    view.refresh_map()
    for column in range(MAX_X):
        assert view.char_at(column * 4 + 3, 0) == str(column + 1)


def test_row_labels_and_borders():
    view, _ = _view()
    view.refresh_map()
    for row in range(MAX_Y):
        assert view.char_at(1, row * 2 + 1) == str(row + 1)
        assert view.char_at(2, row * 2 + 1) == "|"
        assert view.char_at(MAX_X * 4, row * 2) == "|"


def test_buildings_are_drawn():
    view, _ = _view()
    view.refresh_map()
    assert view.char_at(4, 2) == "|"
    assert view.char_at(5, 2) == "_"
    assert view.char_at(6, 2) == "|"


def test_draw_driver_and_customer():
    view, _ = _view()
    view.refresh_map()
    view.draw_driver(3, 4, "E")
    view.draw_customer(5, 5, "S")
    assert view.char_at(3 * 4 - 1, 4 * 2 - 1) == "E"
    assert view.char_at(5 * 4 + 1, 5 * 2) == "S"


def test_refresh_clears_marks():
    view, _ = _view()
    view.refresh_map()
    before = view.render()
    view.draw_driver(2, 2, "B")
    view.refresh_map()
    assert view.render() == before


def test_display_map_writes_render():
    view, out = _view()
    view.refresh_map()
    view.display_map()
    assert out.getvalue() == "\n" + view.render() + "\n"


def test_menu_reprompts_until_valid():
    view, out = _view("7\nx\n2\n")
    assert view.menu(["a", "b", "c"]) == 2
    text = out.getvalue()
    assert "  (3) c" in text
    assert "  (0) Exit" in text
    assert text.count("Enter your selection: ") == 3


def test_menu_exit():
    view, _ = _view("0\n")
    assert view.menu(["a"]) == 0


def test_menu_end_of_input():
    view, _ = _view("")
    with pytest.raises(EOFError):
        view.menu(["a"])


def test_prompt_name():
    view, _ = _view("Alice\n")
    assert view.prompt_name() == "Alice"


def test_prompt_ride_info_clamps_destination():
    view, _ = _view("2\n12 0\n")
    assert view.prompt_ride_info() == (Size.MEDIUM, Location(MAX_X, 1))


def test_prompt_ride_info_rejects_unknown_size():
    view, _ = _view("9\n1 1\n")
    with pytest.raises(ValueError):
        view.prompt_ride_info()