"""Breadth-first searches over grids, boards and word graphs."""

from __future__ import annotations

from collections import deque
from string import ascii_lowercase
from typing import Iterable, Sequence

_ORTHOGONAL = ((1, 0), (0, -1), (0, 1), (-1, 0))
_KNIGHT_MOVES = (
    (-2, -1), (-2, 1), (-1, 2), (-1, -2),
    (1, 2), (1, -2), (2, 1), (2, -1),
)


def _neighbours(r: int, c: int, rows: int, cols: int) -> Iterable[tuple[int, int]]:
    for dr, dc in _ORTHOGONAL:
        nr, nc = r + dr, c + dc
        if 0 <= nr < rows and 0 <= nc < cols:
            yield nr, nc


def flood_fill(
    image: Sequence[Sequence[int]], sr: int, sc: int, color: int
) -> list[list[int]]:
    """Recolour the 4-connected region around ``(sr, sc)``; returns a new image."""
    result = [list(row) for row in image]
    original = image[sr][sc]
    if original == color:
        return result
    rows, cols = len(image), len(image[0])
    result[sr][sc] = color
    queue = deque([(sr, sc)])
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if result[nr][nc] == original:
                result[nr][nc] = color
                queue.append((nr, nc))
    return result


def _square_position(square: int, n: int) -> tuple[int, int]:
    """Row and column, counted from the bottom row, of a boustrophedon square."""
    row, col = divmod(square - 1, n)
    if row % 2:
        col = n - 1 - col
    return row, col


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Fewest die rolls from square 1 to the last square, or -1 if unreachable.

    ``board`` is given top row first; -1 marks a plain square, any other value
    is the destination of a snake or ladder. The board is not modified.
    """
    n = len(board)
    last = n * n
    if last == 1:
        return 0
    rows = board[::-1]
    seen = {1}
    queue = deque([(1, 0)])
    while queue:
        square, moves = queue.popleft()
        for roll in range(1, 7):
            nxt = square + roll
            if nxt > last:
                break
            r, c = _square_position(nxt, n)
            if rows[r][c] != -1:
                nxt = rows[r][c]
            if nxt == last:
                return moves + 1
            if nxt not in seen:
                seen.add(nxt)
                queue.append((nxt, moves + 1))
    return -1


def knight_min_steps(
    knight_pos: Sequence[int], target_pos: Sequence[int], n: int
) -> int:
    """Fewest knight moves between 1-indexed squares of an n x n board, or -1."""
    start = (knight_pos[0], knight_pos[1])
    target = (target_pos[0], target_pos[1])
    if start == target:
        return 0
    seen = {start}
    queue = deque([(start, 0)])
    while queue:
        (x, y), steps = queue.popleft()
        if (x, y) == target:
            return steps
        for dx, dy in _KNIGHT_MOVES:
            pos = (x + dx, y + dy)
            if 1 <= pos[0] <= n and 1 <= pos[1] <= n and pos not in seen:
                seen.add(pos)
                queue.append((pos, steps + 1))
    return -1


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Number of words in the shortest one-letter-change chain, or 0 if none."""
    words = set(word_list)
    if end_word not in words:
        return 0
    queue = deque([(begin_word, 1)])
    while queue:
        word, count = queue.popleft()
        if word == end_word:
            return count
        for i in range(len(word)):
            for letter in ascii_lowercase:
                candidate = word[:i] + letter + word[i + 1:]
                if candidate in words:
                    queue.append((candidate, count + 1))
                words.discard(candidate)
    return 0


def nearest_one_distances(grid: Sequence[Sequence[int]]) -> list[list[int]]:
    """Manhattan-step distance from each cell to the nearest cell holding 1.

    A grid without any 1 yields all zeros.
    """
    rows, cols = len(grid), len(grid[0])
    dist = [[-1] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 1:
                dist[r][c] = 0
                queue.append((r, c))
    while queue:
        r, c = queue.popleft()
        for nr, nc in _neighbours(r, c, rows, cols):
            if dist[nr][nc] == -1:
                dist[nr][nc] = dist[r][c] + 1
                queue.append((nr, nc))
    return [[max(d, 0) for d in row] for row in dist]


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) remains next to rot (2), or -1."""
    rows, cols = len(grid), len(grid[0])
    queue: deque[tuple[int, int, int]] = deque()
    rotten: set[tuple[int, int]] = set()
    fresh = 0
    for r, row in enumerate(grid):
        for c, cell in enumerate(row):
            if cell == 2:
                queue.append((r, c, 0))
                rotten.add((r, c))
            elif cell == 1:
                fresh += 1

    elapsed = 0
    infected = 0
    while queue:
        r, c, minute = queue.popleft()
        elapsed = max(elapsed, minute)
        for nr, nc in _neighbours(r, c, rows, cols):
            if grid[nr][nc] == 1 and (nr, nc) not in rotten:
                rotten.add((nr, nc))
                queue.append((nr, nc, minute + 1))
                infected += 1
    return elapsed if infected == fresh else -1