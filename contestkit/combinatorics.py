"""Enumeration and counting problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


def gray_codes(n: int) -> list[str]:
    """Return the reflected Gray code of width ``n`` as bit strings."""
    if n < 1:
        raise ValueError("n must be positive")
    codes = [0, 1]
    for bit in range(1, n):
        mask = 1 << bit
        codes += [mask | code for code in reversed(codes)]
    return [f"{code:0{n}b}" for code in codes]


def hanoi_moves(n: int) -> list[tuple[int, int]]:
    """Return the moves that carry ``n`` discs from peg 1 to peg 3."""
    if n < 1:
        raise ValueError("n must be positive")

    def moves(discs: int, source: int, target: int) -> Iterator[tuple[int, int]]:
        if discs == 1:
            yield source, target
            return
        spare = source ^ target
        yield from moves(discs - 1, source, spare)
        yield source, target
        yield from moves(discs - 1, spare, target)

    return list(moves(n, 1, 3))


def _next_permutation(chars: list[str]) -> bool:
    pivot = len(chars) - 2
    while pivot >= 0 and chars[pivot] >= chars[pivot + 1]:
        pivot -= 1
    if pivot < 0:
        return False
    swap = len(chars) - 1
    while chars[swap] <= chars[pivot]:
        swap -= 1
    chars[pivot], chars[swap] = chars[swap], chars[pivot]
    chars[pivot + 1 :] = reversed(chars[pivot + 1 :])
    return True


def distinct_permutations(s: str) -> list[str]:
    """Return every distinct arrangement of ``s`` in lexicographic order."""
    chars = sorted(s)
    result = ["".join(chars)]
    while _next_permutation(chars):
        result.append("".join(chars))
    return result


def min_apple_difference(weights: Iterable[int]) -> int:
    """Return the smallest difference between the weights of two groups of apples."""
    items = list(weights)
    if not items:
        raise ValueError("at least one weight is required")
    total = sum(items)
    sums = {0}
    for weight in items:
        sums |= {s + weight for s in sums}
    return min(abs(total - 2 * s) for s in sums)


def count_queen_placements(board: Iterable[str]) -> int:
    """Count placements of one queen per row on a square board avoiding ``*`` cells."""
    rows = list(board)
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("the board must be a non-empty square")
    cols: set[int] = set()
    diag: set[int] = set()
    anti: set[int] = set()

    def place(r: int) -> int:
        if r == size:
            return 1
        total = 0
        for c, cell in enumerate(rows[r]):
            if cell == "*" or c in cols or r + c in diag or r - c in anti:
                continue
            cols.add(c)
            diag.add(r + c)
            anti.add(r - c)
            total += place(r + 1)
            cols.remove(c)
            diag.remove(r + c)
            anti.remove(r - c)
        return total

    return place(0)


def digit_at(k: int) -> int:
    """Return the k-th digit (1-based) of the string 123456789101112..."""
    if k < 1:
        raise ValueError("k must be positive")
    length, block, start = 1, 9, 1
    while k > length * block:
        k -= length * block
        length += 1
        block *= 10
        start *= 10
    index = k - 1
    number = start + index // length
    return int(str(number)[index % length])