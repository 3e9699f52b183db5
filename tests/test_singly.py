import pytest

from algokit.singly import SinglyLinkedList

DIGITS = list(range(10))


@pytest.mark.parametrize("value", [0, 5, 9])
def test_search_finds_index(value):
    assert SinglyLinkedList(DIGITS).search(value) == value


def test_search_missing_returns_minus_one():
    assert SinglyLinkedList(DIGITS).search(100) == -1


def test_search_empty_list():
    assert SinglyLinkedList().search(1) == -1


def test_search_returns_first_match():
    lst = SinglyLinkedList([4, 7, 4])
    assert lst.search(4) == 0


def test_iteration_and_length():
    lst = SinglyLinkedList(DIGITS)
    assert list(lst) == DIGITS
    assert len(lst) == len(DIGITS)


def test_reverse_examples():
    lst = SinglyLinkedList([1, 2, 3, 4, 5])
    lst.reverse()
    assert list(lst) == [5, 4, 3, 2, 1]
    other = SinglyLinkedList([1, 3, 5, 7])
    other.reverse()
    assert list(other) == [7, 5, 3, 1]


def test_reverse_twice_is_identity():
    lst = SinglyLinkedList(DIGITS)
    lst.reverse()
    lst.reverse()
    assert list(lst) == DIGITS


def test_append_after_reverse_goes_to_end():
    lst = SinglyLinkedList(DIGITS)
    lst.reverse()
    lst.append(42)
    assert list(lst) == list(reversed(DIGITS)) + [42]
    assert len(lst) == len(DIGITS) + 1


def test_reverse_empty():
    lst = SinglyLinkedList()
    lst.reverse()
    assert list(lst) == []


def test_swap_adjacent_example():
    lst = SinglyLinkedList([1, 2, 3, 4])
    lst.swap_adjacent()
    assert list(lst) == [2, 1, 4, 3]


def test_swap_adjacent_single():
    lst = SinglyLinkedList([1])
    lst.swap_adjacent()
    assert list(lst) == [1]


def test_swap_adjacent_odd_keeps_last():
    values = [10, 20, 30, 40, 50]
    lst = SinglyLinkedList(values)
    lst.swap_adjacent()
    assert list(lst)[-1] == values[-1]
    assert sorted(lst) == values


@pytest.mark.parametrize("size", [0, 1, 2, 5, 8])
def test_swap_adjacent_twice_is_identity(size):
    values = list(range(size))
    lst = SinglyLinkedList(values)
    lst.swap_adjacent()
    lst.swap_adjacent()
    assert list(lst) == values


@pytest.mark.parametrize("size", [2, 3, 6, 7])
def test_append_after_swap_goes_to_end(size):
    values = list(range(size))
    lst = SinglyLinkedList(values)
    lst.swap_adjacent()
    lst.append(-1)
    assert list(lst)[-1] == -1
    assert len(lst) == size + 1