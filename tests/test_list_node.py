import pytest

from leetkit.list_node import ListNode


def test_list_node():
    lst = ListNode.from_iterable([1, 2, 3, 4, 5])
    assert str(lst) == "[1,2,3,4,5]"

    lst = lst.next
    assert str(lst) == "[2,3,4,5]"

    lst = lst.next
    assert str(lst) == "[3,4,5]"

    lst = lst.next
    assert str(lst) == "[4,5]"

    lst = lst.next
    assert str(lst) == "[5]"
    assert lst.next is None


def test_iteration_round_trip():
    values = [7, -3, 0, 12]
    assert list(ListNode.from_iterable(values)) == values


def test_from_generator():
    assert list(ListNode.from_iterable(x for x in (4, 5))) == [4, 5]


def test_empty_is_rejected():
    with pytest.raises(ValueError):
        ListNode.from_iterable([])


def test_equality():
    assert ListNode.from_iterable([1, 2]) == ListNode.from_iterable([1, 2])
    assert not (ListNode.from_iterable([1, 2]) == ListNode.from_iterable([1]))
    assert not (ListNode.from_iterable([1, 2]) == ListNode.from_iterable([1, 3]))


def test_single_node():
    node = ListNode(9)
    assert str(node) == "[9]"
    assert list(node) == [9]