import pytest

from dsdrills.stack import (
    DEFAULT_CAPACITY,
    BoundedStack,
    StackOverflowError,
    StackUnderflowError,
    push_all,
)


def test_pop_order_then_underflow():
    stack = BoundedStack(5, [10, 20, 30])
    assert [stack.pop(), stack.pop(), stack.pop()] == [30, 20, 10]
    with pytest.raises(StackUnderflowError):
        stack.pop()


def test_default_capacity_is_five():
    stack = BoundedStack()
    assert stack.capacity == DEFAULT_CAPACITY == 5


def test_overflow_when_full():
    stack = BoundedStack(5, range(5))
    assert stack.is_full()
    with pytest.raises(StackOverflowError):
        stack.push(99)
    assert len(stack) == 5


def test_constructor_overflow():
    with pytest.raises(StackOverflowError):
        BoundedStack(2, [1, 2, 3])


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedStack(-1)


def test_iter_is_top_to_bottom():
    items = [1, 2, 3, 4]
    assert list(BoundedStack(5, items)) == list(reversed(items))


def test_peek_does_not_remove():
    stack = BoundedStack(3, [7, 8])
    assert stack.peek() == 8
    assert len(stack) == 2


def test_peek_empty_raises():
    with pytest.raises(StackUnderflowError):
        BoundedStack().peek()


def test_empty_and_full_flags():
    stack = BoundedStack(1)
    assert stack.is_empty() and not stack.is_full()
    stack.push("a")
    assert stack.is_full() and not stack.is_empty()


def test_push_all_within_capacity():
    stack = BoundedStack(5)
    items = [4, 5, 6]
    assert push_all(stack, items) == len(items)
    assert list(stack) == list(reversed(items))


def test_push_all_stops_at_overflow_keeping_pushed_items():
    stack = BoundedStack(5)
    items = [1, 2, 3, 4, 5, 6, 7]
    with pytest.raises(StackOverflowError):
        push_all(stack, items)
    assert list(stack) == list(reversed(items[:5]))


def test_push_pop_round_trip():
    stack = BoundedStack(5)
    for value in [3, 1, 4]:
        stack.push(value)
    popped = [stack.pop() for _ in range(3)]
    assert popped == [4, 1, 3]
    assert stack.is_empty()


def test_errors_are_index_errors():
    with pytest.raises(IndexError):
        BoundedStack(0).push(1)