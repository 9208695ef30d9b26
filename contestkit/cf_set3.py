"""Solutions to a third batch of short contest problems."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from itertools import pairwise

_TARGET_SIZE = 10


def closest_to_zero(values: Iterable[int]) -> int:
    """Return the smallest absolute value among the values."""
    try:
        return min(abs(value) for value in values)
    except ValueError:
        raise ValueError("at least one value is required") from None


def target_score(grid: Iterable[str]) -> int:
    """Score the arrows marked ``X`` on a 10x10 target.

    A cell on the outermost ring is worth 1, the next ring 2, up to 5 in the centre.
    """
    rows = list(grid)
    if len(rows) != _TARGET_SIZE or any(len(row) != _TARGET_SIZE for row in rows):
        raise ValueError("the target must be a 10x10 grid")
    last = _TARGET_SIZE - 1
    return sum(
        min(i, j, last - i, last - j) + 1
        for i, row in enumerate(rows)
        for j, ch in enumerate(row)
        if ch == "X"
    )


def missing_balance(values: Iterable[int]) -> int:
    """Return the balance of the last player so that all balances sum to zero."""
    return -sum(values)


def contains_value(values: Iterable[int], k: int) -> bool:
    """Tell whether ``k`` occurs among the values."""
    return any(value == k for value in values)


def min_doubling_ops(x: str, s: str) -> int | None:
    """Return the fewest self-concatenations of ``x`` after which ``s`` is a substring.

    Returns ``None`` when no number of operations suffices.
    """
    n = len(x)
    for start in range(n):
        if all(ch == x[(start + offset) % n] for offset, ch in enumerate(s)):
            size, ops = n, 0
            while size < start + len(s):
                size *= 2
                ops += 1
            return ops
    return None


def can_be_good(values: Iterable[int]) -> bool:
    """Tell whether the array can be reordered so all adjacent pair sums are equal."""
    counts = Counter(values)
    if not counts:
        raise ValueError("at least one value is required")
    if len(counts) > 2:
        return False
    if len(counts) == 1:
        return True
    first, second = counts.values()
    return abs(first - second) <= 1


def sortable_by_swaps(values: Iterable[int]) -> bool:
    """Tell whether swapping a local peak with its right neighbour can sort the array."""
    arr = list(values)
    swapped = True
    while swapped:
        swapped = False
        for i in range(1, len(arr) - 1):
            if arr[i - 1] < arr[i] > arr[i + 1]:
                arr[i], arr[i + 1] = arr[i + 1], arr[i]
                swapped = True
    return all(a < b for a, b in pairwise(arr))


def divisible_game_winner(n: int) -> str:
    """Return "First" or "Second", the winner of the divisible-by-three game.

    The first player wins unless ``n`` is already a multiple of three.
    """
    remainder = n % 3
    if remainder == 0:
        return "Second"
    return "First"


def min_water_actions(s: str) -> int:
    """Return the fewest water-filling actions for the empty cells (``.``) of ``s``."""
    total = 0
    run = 0
    for ch in s:
        if ch == "#":
            total += run
            run = 0
            continue
        run += 1
        if run == 3:
            return 2
    return total + run


def min_tank_volume(positions: Sequence[int], x: int) -> int:
    """Return the smallest tank that covers the trip to ``x`` and back.

    ``positions`` are the sorted gas stations along the way.
    """
    if not positions:
        return 0
    gaps = (b - a for a, b in pairwise([0, *positions]))
    return max(0, *gaps, 2 * (x - positions[-1]))


def can_sort_with_reversals(values: Iterable[int], k: int) -> bool:
    """Tell whether reversing subarrays of length ``k`` can sort the values."""
    items = list(values)
    if k > 1:
        return True
    return all(a <= b for a, b in pairwise([0, *items]))