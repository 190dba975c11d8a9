import pytest

from dsakit.linked_list import LinkedList


def build_sample() -> LinkedList:
    items = LinkedList()
    items.insert_at_end(20)
    items.insert_at_end(30)
    items.insert_at_end(40)
    items.insert_at_beginning(90)
    items.insert_at_position(70, 2)
    return items


def test_sample_sequence_from_program():
    items = build_sample()
    assert list(items) == [90, 70, 20, 30, 40]
    assert items.delete_by_value(40) == 40
    assert list(items) == [90, 70, 20, 30]
    assert items.delete_at_position(1) == 90
    assert list(items) == [70, 20, 30]
    items.reverse()
    assert list(items) == [30, 20, 70]


def test_str_format():
    assert str(LinkedList([90, 70])) == "90 -> 70 -> NULL"
    assert str(LinkedList()) == "NULL"


def test_len_tracks_changes():
    items = build_sample()
    assert len(items) == 5
    items.delete_at_end()
    items.delete_at_beginning()
    assert len(items) == 3


def test_insert_at_position_end_and_start():
    items = LinkedList([1, 2])
    items.insert_at_position(3, 3)
    items.insert_at_position(0, 1)
    assert list(items) == [0, 1, 2, 3]


def test_insert_at_position_into_empty():
    items = LinkedList()
    items.insert_at_position(5, 1)
    assert list(items) == [5]


@pytest.mark.parametrize("position", [0, -1, 4])
def test_insert_at_invalid_position(position):
    items = LinkedList([1, 2])
    with pytest.raises(IndexError):
        items.insert_at_position(9, position)
    assert list(items) == [1, 2]


def test_delete_at_end_returns_last():
    items = LinkedList([4, 5, 6])
    assert items.delete_at_end() == 6
    assert list(items) == [4, 5]


def test_delete_at_end_single():
    items = LinkedList([7])
    assert items.delete_at_end() == 7
    assert list(items) == []


@pytest.mark.parametrize(
    "method", ["delete_at_beginning", "delete_at_end"]
)
def test_delete_from_empty(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_delete_at_position_empty():
    with pytest.raises(IndexError):
        LinkedList().delete_at_position(1)


@pytest.mark.parametrize("position", [0, 4])
def test_delete_at_invalid_position(position):
    items = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        items.delete_at_position(position)
    assert len(items) == 3


def test_delete_at_last_position():
    items = LinkedList([1, 2, 3])
    assert items.delete_at_position(3) == 3
    assert list(items) == [1, 2]


def test_delete_by_value_head_and_first_match():
    items = LinkedList([5, 6, 5])
    assert items.delete_by_value(5) == 5
    assert list(items) == [6, 5]


def test_delete_by_value_missing():
    items = LinkedList([1, 2])
    with pytest.raises(ValueError):
        items.delete_by_value(3)


def test_delete_by_value_empty():
    with pytest.raises(IndexError):
        LinkedList().delete_by_value(1)


def test_reverse_twice_is_identity():
    values = [3, 1, 4, 1, 5]
    items = LinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]
    items.reverse()
    assert list(items) == values


def test_reverse_empty():
    items = LinkedList()
    items.reverse()
    assert list(items) == []