"""Stack implementations and in-place stack manipulations."""

from __future__ import annotations

from collections import deque
from typing import Any, Optional


class TwoStacks:
    """Two stacks growing towards each other inside one array of ``size`` slots."""

    def __init__(self, size: int = 200) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._slots: list[Any] = [None] * size
        self._top1 = -1
        self._top2 = size

    def _has_room(self) -> bool:
        return self._top2 - self._top1 > 1

    def push1(self, x: Any) -> None:
        """Push onto the first stack; OverflowError when the array is full."""
        if not self._has_room():
            raise OverflowError("no room left")
        self._top1 += 1
        self._slots[self._top1] = x

    def push2(self, x: Any) -> None:
        """Push onto the second stack; OverflowError when the array is full."""
        if not self._has_room():
            raise OverflowError("no room left")
        self._top2 -= 1
        self._slots[self._top2] = x

    def pop1(self) -> Any:
        """Pop from the first stack; IndexError when it is empty."""
        if self._top1 == -1:
            raise IndexError("stack 1 is empty")
        value = self._slots[self._top1]
        self._top1 -= 1
        return value

    def pop2(self) -> Any:
        """Pop from the second stack; IndexError when it is empty."""
        if self._top2 == len(self._slots):
            raise IndexError("stack 2 is empty")
        value = self._slots[self._top2]
        self._top2 += 1
        return value


class NStack:
    """``n`` stacks sharing ``s`` slots; stacks are numbered from 1."""

    def __init__(self, n: int, s: int) -> None:
        if n < 1 or s < 1:
            raise ValueError("n and s must be positive")
        self._values: list[Any] = [None] * s
        self._next = list(range(1, s)) + [-1]
        self._top = [-1] * n
        self._free = 0

    def _stack(self, m: int) -> int:
        if not 1 <= m <= len(self._top):
            raise ValueError(f"stack number out of range: {m}")
        return m - 1

    def push(self, x: Any, m: int) -> bool:
        """Push ``x`` onto stack ``m``; False when no slot is free."""
        idx_stack = self._stack(m)
        if self._free == -1:
            return False
        idx = self._free
        self._free = self._next[idx]
        self._values[idx] = x
        self._next[idx] = self._top[idx_stack]
        self._top[idx_stack] = idx
        return True

    def pop(self, m: int) -> Any:
        """Pop the top of stack ``m``; IndexError when it is empty."""
        idx_stack = self._stack(m)
        idx = self._top[idx_stack]
        if idx == -1:
            raise IndexError("stack is empty")
        self._top[idx_stack] = self._next[idx]
        self._next[idx] = self._free
        self._free = idx
        return self._values[idx]


class QueueStack:
    """Last-in first-out stack built from first-in first-out queue operations."""

    def __init__(self) -> None:
        self._queue: deque[Any] = deque()

    def push(self, x: Any) -> None:
        self._queue.append(x)

    def pop(self) -> Any:
        """Remove and return the newest element; IndexError when empty."""
        if not self._queue:
            raise IndexError("stack is empty")
        for _ in range(len(self._queue) - 1):
            self._queue.append(self._queue.popleft())
        return self._queue.popleft()


class ArrayStack:
    """Bounded stack holding at most ``capacity`` elements."""

    def __init__(self, capacity: int = 1000) -> None:
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, x: Any) -> None:
        """Push ``x``; OverflowError when the stack is full."""
        if len(self._items) >= self.capacity:
            raise OverflowError("stack is full")
        self._items.append(x)

    def pop(self) -> Any:
        """Remove and return the top element; IndexError when empty."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next_node: Optional["_Node"]) -> None:
        self.data = data
        self.next = next_node


class NodeStack:
    """Stack on a singly linked list."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None

    def push(self, data: Any) -> None:
        self._top = _Node(data, self._top)

    def pop(self) -> Any:
        """Remove and return the top element; IndexError on underflow."""
        if self._top is None:
            raise IndexError("stack underflow")
        node = self._top
        self._top = node.next
        return node.data

    def peek(self) -> Any:
        """The top element; IndexError when empty."""
        if self._top is None:
            raise IndexError("stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None


def sort_stack(stack: list[Any]) -> None:
    """Sort a list used as a stack in place so that the largest item is on top."""
    held: list[Any] = []
    while stack:
        item = stack.pop()
        while held and held[-1] > item:
            stack.append(held.pop())
        held.append(item)
    stack.extend(held)


def delete_middle(stack: list[Any]) -> Any:
    """Remove and return the middle item of a list used as a stack (top at the end).

    The middle is the item ``len(stack) // 2`` places below the top.
    """
    if not stack:
        raise IndexError("stack is empty")
    return stack.pop(len(stack) - 1 - len(stack) // 2)