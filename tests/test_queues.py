import pytest

from dsakit.queues import (
    ArrayQueue,
    CircularQueue,
    DequeQueue,
    DequeStack,
    KQueue,
    LinkedDeque,
    StackQueue,
)


def test_circular_queue_fills_and_rejects():
    q = CircularQueue(3)
    assert q.is_empty()
    assert all(q.enqueue(v) for v in (1, 2, 3))
    assert q.is_full()
    assert q.enqueue(4) is False
    assert q.front() == 1
    assert q.rear() == 3


def test_circular_queue_wraps_around():
    q = CircularQueue(3)
    for v in (1, 2, 3):
        q.enqueue(v)
    assert q.dequeue()
    assert q.enqueue(4)
    assert q.is_full()
    assert q.front() == 2
    assert q.rear() == 4
    drained = []
    while not q.is_empty():
        drained.append(q.front())
        q.dequeue()
    assert drained == [2, 3, 4]


def test_circular_queue_empty_behaviour():
    q = CircularQueue(2)
    assert q.dequeue() is False
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.rear()
    q.enqueue(5)
    q.dequeue()
    assert q.is_empty()


def test_circular_queue_rejects_zero_capacity():
    with pytest.raises(ValueError):
        CircularQueue(0)


def test_linked_deque_both_ends():
    d = LinkedDeque()
    d.insert_last(2)
    d.insert_first(1)
    d.insert_last(3)
    assert list(d) == [1, 2, 3]
    assert len(d) == 3
    assert d.remove_first() == 1
    assert d.remove_last() == 3
    assert list(d) == [2]
    assert d.remove_last() == 2
    assert d.is_empty()
    assert len(d) == 0


def test_linked_deque_remove_from_empty_raises():
    d = LinkedDeque()
    with pytest.raises(IndexError):
        d.remove_first()
    with pytest.raises(IndexError):
        d.remove_last()


def test_deque_stack_and_queue_orders():
    stk = DequeStack()
    stk.push(7)
    stk.push(8)
    assert stk.pop() == 8
    assert list(stk) == [7]

    que = DequeQueue()
    que.enqueue(12)
    que.enqueue(13)
    assert que.dequeue() == 12
    assert list(que) == [13]
    assert len(stk) == len(que)


def test_array_queue_fifo():
    q = ArrayQueue()
    for v in (4, 5, 6):
        q.push(v)
    assert [q.pop(), q.pop(), q.pop()] == [4, 5, 6]
    with pytest.raises(IndexError):
        q.pop()


def test_array_queue_space_returns_only_when_drained():
    q = ArrayQueue(capacity=2)
    q.push(1)
    q.push(2)
    with pytest.raises(OverflowError):
        q.push(3)
    assert q.pop() == 1
    with pytest.raises(OverflowError):
        q.push(3)
    assert q.pop() == 2
    q.push(3)
    assert q.pop() == 3


def test_kqueue_interleaved_queues():
    q = KQueue(10, 3)
    q.enqueue(10, 1)
    q.enqueue(15, 1)
    q.enqueue(20, 2)
    q.enqueue(25, 1)
    assert q.dequeue(1) == 10
    assert q.dequeue(2) == 20
    assert q.dequeue(1) == 15
    assert q.dequeue(1) == 25


def test_kqueue_overflow_and_slot_reuse():
    q = KQueue(2, 2)
    q.enqueue("a", 1)
    q.enqueue("b", 2)
    with pytest.raises(OverflowError):
        q.enqueue("c", 1)
    assert q.dequeue(1) == "a"
    q.enqueue("c", 2)
    assert q.dequeue(2) == "b"
    assert q.dequeue(2) == "c"


def test_kqueue_underflow_and_bad_queue_number():
    q = KQueue(3, 2)
    with pytest.raises(IndexError):
        q.dequeue(1)
    with pytest.raises(ValueError):
        q.enqueue(1, 3)
    with pytest.raises(ValueError):
        q.dequeue(0)


def test_stack_queue_fifo_with_interleaving():
    q = StackQueue()
    q.push(1)
    q.push(2)
    assert q.pop() == 1
    q.push(3)
    assert q.pop() == 2
    assert q.pop() == 3
    with pytest.raises(IndexError):
        q.pop()