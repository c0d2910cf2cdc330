import pytest

from dsakit.containers import (
    BoundedStack,
    CircularQueue,
    LinearQueue,
    OverflowError_,
    QueueEmptyError,
    QueueFullError,
    StackOverflowError,
    StackUnderflowError,
)


def test_circular_queue_worked_example():
    queue = CircularQueue(5)
    for value in (10, 20, 30, 40, 50):
        queue.enqueue(value)
    assert list(queue) == [10, 20, 30, 40, 50]
    assert queue.is_full() is True

    assert queue.dequeue() == 10
    assert queue.dequeue() == 20
    assert list(queue) == [30, 40, 50]

    queue.enqueue(60)
    queue.enqueue(70)
    assert list(queue) == [30, 40, 50, 60, 70]
    assert len(queue) == 5


def test_circular_queue_full_raises():
    queue = CircularQueue(2)
    queue.enqueue(1)
    queue.enqueue(2)
    with pytest.raises(QueueFullError):
        queue.enqueue(3)
    with pytest.raises(OverflowError_):
        queue.enqueue(3)
    assert list(queue) == [1, 2]


def test_circular_queue_empty_raises():
    queue = CircularQueue(3)
    assert queue.is_empty() is True
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_circular_queue_keeps_fifo_order_across_wraps():
    queue = CircularQueue(3)
    received = []
    for value in range(20):
        queue.enqueue(value)
        if len(queue) == 3:
            received.append(queue.dequeue())
    while not queue.is_empty():
        received.append(queue.dequeue())
    assert received == list(range(20))


def test_circular_queue_drains_to_empty():
    queue = CircularQueue(4)
    for value in "abcd":
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(4)] == list("abcd")
    assert len(queue) == 0
    assert list(queue) == []


@pytest.mark.parametrize("cls", [CircularQueue, LinearQueue, BoundedStack])
def test_invalid_capacity(cls):
    with pytest.raises(ValueError):
        cls(0)


def test_linear_queue_fifo():
    queue = LinearQueue(4)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert list(queue) == [2, 3]
    assert len(queue) == 2


def test_linear_queue_does_not_reuse_slots():
    queue = LinearQueue(3)
    for value in (1, 2, 3):
        queue.enqueue(value)
    for _ in range(3):
        queue.dequeue()
    assert queue.is_empty() is True
    assert queue.is_full() is True
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    with pytest.raises(QueueEmptyError):
        queue.dequeue()


def test_linear_queue_reset_when_empty_allows_reuse():
    queue = LinearQueue(3, reset_when_empty=True)
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert queue.dequeue() == 1
    assert queue.is_full() is True
    with pytest.raises(QueueFullError):
        queue.enqueue(4)
    queue.dequeue()
    queue.dequeue()
    assert queue.is_full() is False
    queue.enqueue(4)
    assert list(queue) == [4]


def test_linear_queue_empty_raises():
    with pytest.raises(QueueEmptyError):
        LinearQueue(2, reset_when_empty=True).dequeue()


def test_stack_is_lifo():
    stack = BoundedStack(5)
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.peek() == 3
    assert list(stack) == [3, 2, 1]
    assert [stack.pop() for _ in range(3)] == [3, 2, 1]
    assert stack.is_empty() is True


def test_stack_overflow():
    stack = BoundedStack(2)
    stack.push("a")
    stack.push("b")
    assert stack.is_full() is True
    with pytest.raises(StackOverflowError):
        stack.push("c")
    with pytest.raises(OverflowError_):
        stack.push("c")
    assert len(stack) == 2


def test_stack_underflow():
    stack = BoundedStack(2)
    with pytest.raises(StackUnderflowError):
        stack.pop()
    with pytest.raises(StackUnderflowError):
        stack.peek()


def test_stack_default_capacity_holds_hundred():
    stack = BoundedStack()
    for value in range(100):
        stack.push(value)
    with pytest.raises(StackOverflowError):
        stack.push(100)
    assert stack.peek() == 99