import pytest

from structkit.dynamic_array import DynamicArray


def filled(*values):
    array = DynamicArray()
    for value in values:
        array.append(value)
    return array


def test_new_array_is_empty_with_capacity_one():
    array = DynamicArray()
    assert len(array) == 0
    assert array.capacity == 1
    assert list(array) == []


def test_append_keeps_order():
    array = filled(10, 20, 30)
    assert list(array) == [10, 20, 30]
    assert len(array) == 3


def test_capacity_doubles_when_full():
    array = filled(10, 20, 30)
    assert array.capacity == 4


@pytest.mark.parametrize("count", [1, 2, 5, 8, 17, 100])
def test_capacity_is_power_of_two_and_covers_size(count):
    array = filled(*range(count))
    capacity = array.capacity
    assert capacity >= len(array)
    assert capacity & (capacity - 1) == 0
    assert capacity < 2 * len(array) or capacity == 1


def test_getitem_returns_stored_value():
    array = filled(10, 20, 30)
    assert array[1] == 20
    assert array[0] == 10


def test_setitem_replaces_value():
    array = filled(10, 20, 30)
    array[1] = 25
    assert list(array) == [10, 25, 30]
    assert len(array) == 3


@pytest.mark.parametrize("index", [-1, 3, 99])
def test_getitem_out_of_bounds(index):
    array = filled(10, 20, 30)
    with pytest.raises(IndexError) as excinfo:
        array[index]
    assert "Index out of bounds" in str(excinfo.value)
    assert list(array) == [10, 20, 30]


@pytest.mark.parametrize("index", [-1, 3])
def test_setitem_out_of_bounds_leaves_array_unchanged(index):
    array = filled(10, 20, 30)
    with pytest.raises(IndexError):
        array[index] = 7
    assert list(array) == [10, 20, 30]


def test_str_joins_with_spaces():
    array = filled(10, 20, 30)
    assert str(array) == "10 20 30"
    assert str(DynamicArray()) == ""