import pytest

from polymath.containers import DataContainer, Queue, Stack


def test_stack_is_last_in_first_out():
    stack = Stack()
    for item in ("a", "b", "c"):
        stack.push(item)
    assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]


def test_stack_peek_keeps_item():
    stack = Stack(2)
    stack.push("x")
    assert stack.peek() == "x"
    assert len(stack) == 1


def test_stack_overflow():
    stack = Stack(1)
    stack.push(1)
    with pytest.raises(OverflowError):
        stack.push(2)


def test_stack_underflow():
    stack = Stack()
    with pytest.raises(IndexError):
        stack.pop()
    with pytest.raises(IndexError):
        stack.peek()


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        Stack(-1)
    with pytest.raises(ValueError):
        Queue(-1)


def test_queue_is_first_in_first_out():
    queue = Queue()
    for item in ("a", "b", "c"):
        queue.enqueue(item)
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]
    assert len(queue) == 0


def test_queue_overflow_and_underflow():
    queue = Queue(1)
    queue.enqueue("only")
    with pytest.raises(OverflowError):
        queue.enqueue("more")
    assert queue.dequeue() == "only"
    with pytest.raises(IndexError):
        queue.dequeue()


def test_data_container_length():
    entries = ["one", "two", "three"]
    assert DataContainer(entries).length == len(entries)