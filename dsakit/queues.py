"""Queue implementations: circular buffer, linked deque, array, k-in-one and two-stack."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class CircularQueue:
    """Fixed-capacity ring buffer queue."""

    def __init__(self, k: int) -> None:
        if k < 1:
            raise ValueError("capacity must be positive")
        self._slots: list[Any] = [None] * k
        self._head = -1
        self._tail = -1

    def enqueue(self, value: Any) -> bool:
        """Append ``value``; False if the queue is full."""
        if self.is_full():
            return False
        if self._head == -1:
            self._head = self._tail = 0
        else:
            self._tail = (self._tail + 1) % len(self._slots)
        self._slots[self._tail] = value
        return True

    def dequeue(self) -> bool:
        """Drop the front element; False if the queue is empty."""
        if self._head == -1:
            return False
        if self._head == self._tail:
            self._head = self._tail = -1
        else:
            self._head = (self._head + 1) % len(self._slots)
        return True

    def front(self) -> Any:
        """The oldest element; raises IndexError when empty."""
        if self._head == -1:
            raise IndexError("queue is empty")
        return self._slots[self._head]

    def rear(self) -> Any:
        """The newest element; raises IndexError when empty."""
        if self._tail == -1:
            raise IndexError("queue is empty")
        return self._slots[self._tail]

    def is_empty(self) -> bool:
        return self._head == -1

    def is_full(self) -> bool:
        return (self._tail + 1) % len(self._slots) == self._head


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: Optional[_Node] = None
        self.next: Optional[_Node] = None


class LinkedDeque:
    """Double-ended queue on a doubly linked list."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._head is None

    def insert_first(self, element: Any) -> None:
        node = _Node(element)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def insert_last(self, element: Any) -> None:
        node = _Node(element)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def remove_first(self) -> Any:
        """Remove and return the first element; IndexError when empty."""
        node = self._head
        if node is None:
            raise IndexError("deque is empty")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def remove_last(self) -> Any:
        """Remove and return the last element; IndexError when empty."""
        node = self._tail
        if node is None:
            raise IndexError("deque is empty")
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DequeStack(LinkedDeque):
    """Last-in first-out stack backed by :class:`LinkedDeque`."""

    def push(self, element: Any) -> None:
        self.insert_last(element)

    def pop(self) -> Any:
        return self.remove_last()


class DequeQueue(LinkedDeque):
    """First-in first-out queue backed by :class:`LinkedDeque`."""

    def enqueue(self, element: Any) -> None:
        self.insert_last(element)

    def dequeue(self) -> Any:
        return self.remove_first()


class ArrayQueue:
    """Array queue whose write position only rewinds once the queue drains."""

    def __init__(self, capacity: int = 100_005) -> None:
        self.capacity = capacity
        self._items: list[Any] = []
        self._head = 0

    def push(self, x: Any) -> None:
        """Append ``x``; OverflowError once the write position hits capacity."""
        if len(self._items) >= self.capacity:
            raise OverflowError("queue is full")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the oldest element; IndexError when empty."""
        if self._head == len(self._items):
            raise IndexError("queue is empty")
        value = self._items[self._head]
        self._head += 1
        if self._head == len(self._items):
            self._items.clear()
            self._head = 0
        return value


class KQueue:
    """``k`` queues sharing one array of ``n`` slots; queues are numbered from 1."""

    def __init__(self, n: int, k: int) -> None:
        if n < 1 or k < 1:
            raise ValueError("n and k must be positive")
        self._values: list[Any] = [None] * n
        self._next = list(range(1, n)) + [-1]
        self._front = [-1] * k
        self._rear = [-1] * k
        self._free = 0

    def _queue(self, qn: int) -> int:
        if not 1 <= qn <= len(self._front):
            raise ValueError(f"queue number out of range: {qn}")
        return qn - 1

    def enqueue(self, data: Any, qn: int) -> None:
        """Append ``data`` to queue ``qn``; OverflowError when no slot is free."""
        q = self._queue(qn)
        if self._free == -1:
            raise OverflowError("no free slot")
        idx = self._free
        self._free = self._next[idx]
        if self._front[q] == -1:
            self._front[q] = idx
        else:
            self._next[self._rear[q]] = idx
        self._next[idx] = -1
        self._rear[q] = idx
        self._values[idx] = data

    def dequeue(self, qn: int) -> Any:
        """Remove and return the front of queue ``qn``; IndexError when empty."""
        q = self._queue(qn)
        idx = self._front[q]
        if idx == -1:
            raise IndexError("queue is empty")
        self._front[q] = self._next[idx]
        self._next[idx] = self._free
        self._free = idx
        return self._values[idx]


class StackQueue:
    """First-in first-out queue built from two stacks."""

    def __init__(self) -> None:
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def push(self, x: Any) -> None:
        self._inbox.append(x)

    def pop(self) -> Any:
        """Remove and return the oldest element; IndexError when empty."""
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        if not self._outbox:
            raise IndexError("queue is empty")
        return self._outbox.pop()