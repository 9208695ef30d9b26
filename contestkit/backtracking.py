"""Backtracking searches: permutations, subsets, queens and sudoku."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import permutations

_SUDOKU_SIZE = 9


def permutations_by_search(n: int) -> list[list[int]]:
    """Return every permutation of 1..n, built by recursive search."""
    chosen = [False] * (n + 1)
    current: list[int] = []

    def search() -> Iterator[list[int]]:
        if len(current) == n:
            yield list(current)
            return
        for value in range(1, n + 1):
            if chosen[value]:
                continue
            chosen[value] = True
            current.append(value)
            yield from search()
            current.pop()
            chosen[value] = False

    return list(search())


def permutations_lexicographic(n: int) -> list[list[int]]:
    """Return every permutation of 1..n in lexicographic order."""
    return [list(p) for p in permutations(range(1, n + 1))]


def subsets(n: int) -> list[list[int]]:
    """Return every subset of 1..n, those holding k listed before those without it."""
    current: list[int] = []

    def search(k: int) -> Iterator[list[int]]:
        if k == n + 1:
            yield list(current)
            return
        current.append(k)
        yield from search(k + 1)
        current.pop()
        yield from search(k + 1)

    return list(search(1))


def count_n_queens(n: int) -> int:
    """Count the ways to place ``n`` non-attacking queens on an n x n board."""
    if n < 1:
        raise ValueError("n must be positive")
    cols: set[int] = set()
    diag: set[int] = set()
    anti: set[int] = set()

    def place(r: int) -> int:
        if r == n:
            return 1
        total = 0
        for c in range(n):
            if c in cols or r + c in diag or r - c in anti:
                continue
            cols.add(c)
            diag.add(r + c)
            anti.add(r - c)
            total += place(r + 1)
            cols.discard(c)
            diag.discard(r + c)
            anti.discard(r - c)
        return total

    return place(0)


def is_solvable_sudoku(grid: Sequence[Sequence[int]]) -> bool:
    """Tell whether the empty cells (0) of a 9x9 grid can be filled consistently.

    Only the digits placed during the search are checked against the rest of the
    grid; the given digits and the bottom-right cell are taken as they are.
    """
    board = [list(row) for row in grid]
    if len(board) != _SUDOKU_SIZE or any(len(row) != _SUDOKU_SIZE for row in board):
        raise ValueError("the grid must be 9x9")

    def valid(row: int, col: int) -> bool:
        value = board[row][col]
        if any(board[r][col] == value for r in range(_SUDOKU_SIZE) if r != row):
            return False
        if any(board[row][c] == value for c in range(_SUDOKU_SIZE) if c != col):
            return False
        top, left = 3 * (row // 3), 3 * (col // 3)
        return not any(
            board[r][c] == value
            for r in range(top, top + 3)
            for c in range(left, left + 3)
            if (r, c) != (row, col)
        )

    last = _SUDOKU_SIZE * _SUDOKU_SIZE - 1

    def solve(cell: int) -> bool:
        if cell >= last:
            return True
        row, col = divmod(cell, _SUDOKU_SIZE)
        if board[row][col] != 0:
            return solve(cell + 1)
        for digit in range(1, 10):
            board[row][col] = digit
            if valid(row, col) and solve(cell + 1):
                return True
        board[row][col] = 0
        return False

    return solve(0)