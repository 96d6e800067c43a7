import pytest

from ridemap.location import MAX_ARRAY
from ridemap.sorted_list import ListFullError, SortedList


def _by_value(a, b):
    return a - b


def _by_key(a, b):
    return a[0] - b[0]


def test_items_come_out_sorted():
    items = [5, 1, 4, 2, 3, 2]
    sl = SortedList(_by_value)
    for item in items:
        sl.add(item)
    assert list(sl) == sorted(items)
    assert len(sl) == len(items)


def test_equal_items_keep_insertion_order():
    sl = SortedList(_by_key)
    for item in [(1, "a"), (0, "b"), (1, "c"), (0, "d")]:
        sl.add(item)
    assert list(sl) == [(0, "b"), (0, "d"), (1, "a"), (1, "c")]


def test_remove_returns_item_and_shrinks():
    sl = SortedList(_by_value)
    for item in [3, 1, 2]:
        sl.add(item)
    assert sl.remove(1) == 2
    assert list(sl) == [1, 3]


def test_getitem_returns_item():
    sl = SortedList(_by_value)
    sl.add(9)
    sl.add(4)
    assert sl[0] == 4
    assert sl[1] == 9


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_getitem_out_of_range(index):
    sl = SortedList(_by_value)
    sl.add(1)
    with pytest.raises(IndexError):
        _ = sl[index]
    assert list(sl) == [1]
    assert len(sl) == 1


def test_remove_out_of_range():
    sl = SortedList(_by_value)
    with pytest.raises(IndexError):
        sl.remove(0)


def test_full_list_rejects_items():
    sl = SortedList(_by_value)
    for item in range(MAX_ARRAY):
        sl.add(item)
    assert sl.is_full()
    with pytest.raises(ListFullError):
        sl.add(0)
    assert len(sl) == MAX_ARRAY


def test_clear_empties_list():
    sl = SortedList(_by_value)
    sl.add(1)
    sl.clear()
    assert len(sl) == 0
    assert not sl.is_full()