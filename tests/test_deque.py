import pytest

from algobox.deque import CircularDeque, DequeEmpty, DequeFull


def test_worked_example_from_driver():
    dq = CircularDeque(5)
    for value in [1, 2, 3, 4, 5]:
        dq.insert_front(value)
    assert list(dq) == [5, 4, 3, 2, 1]
    assert dq.peek_front() == 5
    assert dq.peek_rear() == 1
    dq.delete_front()
    assert list(dq) == [4, 3, 2, 1]
    dq.delete_rear()
    assert list(dq) == [4, 3, 2]
    dq.insert_rear(10)
    assert list(dq) == [4, 3, 2, 10]


def test_new_deque_is_empty():
    dq = CircularDeque(3)
    assert dq.is_empty()
    assert not dq.is_full()
    assert len(dq) == 0
    assert list(dq) == []


def test_full_after_capacity_inserts():
    dq = CircularDeque(3)
    for value in range(3):
        dq.insert_rear(value)
    assert dq.is_full()
    assert len(dq) == 3
    with pytest.raises(DequeFull):
        dq.insert_rear(99)
    with pytest.raises(DequeFull):
        dq.insert_front(99)
    assert list(dq) == [0, 1, 2]


def test_rear_wraps_around():
    dq = CircularDeque(3)
    for value in (1, 2, 3):
        dq.insert_rear(value)
    assert dq.delete_front() == 1
    dq.insert_rear(4)
    assert list(dq) == [2, 3, 4]
    assert dq.is_full()
    assert len(dq) == 3


def test_front_wraps_around():
    dq = CircularDeque(4)
    dq.insert_front(1)
    dq.insert_front(2)
    assert list(dq) == [2, 1]
    assert dq.peek_front() == 2
    assert dq.peek_rear() == 1


def test_delete_returns_values_and_empties():
    dq = CircularDeque(2)
    dq.insert_rear("x")
    dq.insert_rear("y")
    assert dq.delete_rear() == "y"
    assert dq.delete_front() == "x"
    assert dq.is_empty()
    assert len(dq) == 0


def test_reuse_after_emptying():
    dq = CircularDeque(2)
    dq.insert_front(1)
    dq.delete_front()
    dq.insert_rear(7)
    assert list(dq) == [7]
    assert dq.peek_front() == dq.peek_rear() == 7


@pytest.mark.parametrize(
    "method", ["delete_front", "delete_rear", "peek_front", "peek_rear"]
)
def test_empty_operations_raise(method):
    with pytest.raises(DequeEmpty):
        getattr(CircularDeque(3), method)()


def test_capacity_one():
    dq = CircularDeque(1)
    dq.insert_front(5)
    assert dq.is_full()
    assert dq.peek_rear() == 5
    with pytest.raises(DequeFull):
        dq.insert_rear(6)


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        CircularDeque(capacity)


def test_mixed_operations_match_collections_deque():
    from collections import deque

    dq = CircularDeque(5)
    reference: deque[int] = deque()
    operations = [
        ("rear", 1), ("front", 2), ("rear", 3), ("pop_front", None),
        ("front", 4), ("rear", 5), ("pop_rear", None), ("front", 6),
        ("rear", 7), ("pop_front", None), ("pop_front", None),
    ]
    for name, value in operations:
        if name == "rear":
            dq.insert_rear(value)
            reference.append(value)
        elif name == "front":
            dq.insert_front(value)
            reference.appendleft(value)
        elif name == "pop_front":
            assert dq.delete_front() == reference.popleft()
        else:
            assert dq.delete_rear() == reference.pop()
        assert list(dq) == list(reference)
        assert len(dq) == len(reference)