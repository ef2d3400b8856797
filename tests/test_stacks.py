import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.stacks import (
    BoundedQueue,
    QueueEmptyError,
    QueueFullError,
    QueueStack,
    StackOverflowError,
    StackUnderflowError,
    TwoStacks,
)


def test_queue_is_first_in_first_out():
    queue = BoundedQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [1, 2, 3]
    assert queue.is_empty()


def test_queue_empty_dequeue_raises():
    queue = BoundedQueue()
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_queue_full_raises():
    queue = BoundedQueue(capacity=2)
    queue.enqueue("a")
    queue.enqueue("b")
    with pytest.raises(QueueFullError):
        queue.enqueue("c")
    assert len(queue) == 2


def test_queue_rejects_non_positive_capacity():
    with pytest.raises(ValueError):
        BoundedQueue(capacity=0)


def test_queue_reusable_after_draining():
    queue = BoundedQueue(capacity=1)
    queue.enqueue(7)
    assert queue.dequeue() == 7
    queue.enqueue(8)
    assert queue.dequeue() == 8


@given(st.lists(st.integers(), max_size=100))
def test_queue_preserves_order(values):
    queue = BoundedQueue()
    for value in values:
        queue.enqueue(value)
    assert len(queue) == len(values)
    assert [queue.dequeue() for _ in values] == values


def test_queue_stack_example():
    stack = QueueStack()
    stack.push(3)
    stack.push(4)
    stack.push(2)
    assert stack.pop() == 2
    assert stack.pop() == 4
    assert stack.is_empty() is False
    assert stack.pop() == 3
    assert stack.is_empty() is True


def test_queue_stack_pop_empty_raises():
    with pytest.raises(StackUnderflowError):
        QueueStack().pop()


@given(st.lists(st.integers(), max_size=50))
def test_queue_stack_reverses(values):
    stack = QueueStack()
    for value in values:
        stack.push(value)
    assert [stack.pop() for _ in values] == values[::-1]
    assert stack.is_empty()


def test_two_stacks_example():
    stacks = TwoStacks(6)
    stacks.push_first(5)
    stacks.push_first(10)
    stacks.push_second(20)
    stacks.push_second(25)
    assert (stacks.pop_first(), stacks.pop_second()) == (10, 25)
    stacks.push_second(30)
    assert (stacks.pop_first(), stacks.pop_second()) == (5, 30)
    assert stacks.first_is_empty() is True
    assert stacks.second_is_empty() is False


def _fill(push):
    count = 0
    with pytest.raises(StackOverflowError):
        while True:
            push(count)
            count += 1
    return count


def test_two_stacks_capacities():
    stacks = TwoStacks(6)
    assert _fill(stacks.push_first) == 3
    assert _fill(stacks.push_second) == 2


def test_two_stacks_underflow():
    stacks = TwoStacks(6)
    with pytest.raises(StackUnderflowError):
        stacks.pop_first()
    with pytest.raises(StackUnderflowError):
        stacks.pop_second()


def test_two_stacks_are_independent():
    stacks = TwoStacks(10)
    stacks.push_first("x")
    assert stacks.second_is_empty()
    assert stacks.pop_first() == "x"
    assert stacks.first_is_empty()