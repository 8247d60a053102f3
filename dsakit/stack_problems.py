"""Monotonic-stack and expression problems: celebrities, histograms, brackets, postfix."""

from __future__ import annotations

import operator
from typing import Callable, Iterable, Sequence

_OPERATOR_CHARS = frozenset("+-*/")


def _knows_nobody_and_is_known(mat: Sequence[Sequence[int]], who: int) -> bool:
    return all(
        not mat[who][other] and mat[other][who]
        for other in range(len(mat))
        if other != who
    )


def celebrity_brute_force(mat: Sequence[Sequence[int]]) -> int:
    """Index of the person everybody knows and who knows nobody, or -1.

    Checks every person against everybody else.
    """
    return next(
        (person for person in range(len(mat)) if _knows_nobody_and_is_known(mat, person)),
        -1,
    )


def celebrity(mat: Sequence[Sequence[int]]) -> int:
    """Index of the celebrity, or -1, found by narrowing two pointers."""
    if not mat:
        return -1
    low, high = 0, len(mat) - 1
    while low < high:
        if mat[low][high]:
            low += 1
        else:
            high -= 1
    return low if _knows_nobody_and_is_known(mat, low) else -1


def previous_smaller_indices(arr: Sequence[int]) -> list[int]:
    """For each position, index of the nearest strictly smaller item to its left, or -1."""
    stack: list[int] = []
    result: list[int] = []
    for i, value in enumerate(arr):
        while stack and arr[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(i)
    return result


def next_smaller_indices(arr: Sequence[int]) -> list[int]:
    """For each position, index of the nearest strictly smaller item to its right.

    Positions with no such item get ``len(arr)``.
    """
    n = len(arr)
    stack: list[int] = []
    result = [n] * n
    for i in reversed(range(n)):
        while stack and arr[stack[-1]] >= arr[i]:
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(i)
    return result


def _next_by(arr: Sequence[int], discard: Callable[[int, int], bool]) -> list[int]:
    stack: list[int] = []
    result = [-1] * len(arr)
    for i in reversed(range(len(arr))):
        value = arr[i]
        while stack and discard(stack[-1], value):
            stack.pop()
        if stack:
            result[i] = stack[-1]
        stack.append(value)
    return result


def next_greater_elements(arr: Sequence[int]) -> list[int]:
    """For each item, the nearest strictly greater value to its right, or -1."""
    return _next_by(arr, operator.le)


def next_smaller_elements(arr: Sequence[int]) -> list[int]:
    """For each item, the nearest strictly smaller value to its right, or -1."""
    return _next_by(arr, operator.ge)


def largest_rectangle_area(heights: Sequence[int]) -> int:
    """Area of the largest rectangle that fits under a histogram."""
    nxt = next_smaller_indices(heights)
    prv = previous_smaller_indices(heights)
    return max(
        (height * (right - left - 1) for height, right, left in zip(heights, nxt, prv)),
        default=0,
    )


def longest_valid_parentheses(s: str) -> int:
    """Length of the longest well-formed parentheses substring.

    Any character other than '(' is treated as a closing bracket.
    """
    best = 0
    open_positions: list[int] = []
    last_invalid = -1
    for i, ch in enumerate(s):
        if ch == "(":
            open_positions.append(i)
        elif open_positions:
            open_positions.pop()
            start = open_positions[-1] if open_positions else last_invalid
            best = max(best, i - start)
        else:
            last_invalid = i
    return best


def _truncating_div(a: int, b: int) -> int:
    if b == 0:
        raise ZeroDivisionError("division by zero in postfix expression")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_OPERATIONS: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _truncating_div,
}


def evaluate_postfix(tokens: Iterable[str]) -> int:
    """Evaluate integer postfix tokens; division truncates toward zero."""
    stack: list[int] = []
    for token in tokens:
        operation = _OPERATIONS.get(token)
        if operation is None:
            stack.append(int(token))
            continue
        if len(stack) < 2:
            raise ValueError(f"operator {token!r} lacks operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operation(left, right))
    if not stack:
        raise ValueError("empty expression")
    return stack[-1]


def has_redundant_brackets(s: str) -> bool:
    """True if some pair of brackets encloses no operator of its own."""
    stack: list[str] = []
    for ch in s:
        if ch == "(" or ch in _OPERATOR_CHARS:
            stack.append(ch)
        elif ch == ")":
            redundant = True
            while stack and stack[-1] != "(":
                if stack.pop() in _OPERATOR_CHARS:
                    redundant = False
            if redundant:
                return True
            if not stack:
                raise ValueError("unbalanced brackets")
            stack.pop()
    return False