"""Solutions to a second batch of short contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def min_sign_flips(values: Iterable[int]) -> int:
    """Return the fewest sign flips of a ±1 array giving sum >= 0 and product 1."""
    items = list(values)
    total = sum(items)
    negatives = sum(1 for value in items if value < 0)
    if total >= 0:
        return negatives % 2
    flips = (-total + 1) // 2
    negatives -= flips
    return flips + negatives % 2


def grasshopper_jumps(x: int, k: int) -> list[int]:
    """Return the fewest jumps summing to ``x`` with no jump divisible by ``k``."""
    if k < 2:
        raise ValueError("k must be at least 2")
    jumps = []
    remaining = x
    while remaining:
        step = remaining if remaining % k else remaining - 1
        jumps.append(step)
        remaining -= step
    return jumps


def ancestor_sum(node: int) -> int:
    """Return the sum of a node and its ancestors in the implicit binary heap."""
    if node < 1:
        raise ValueError("node must be positive")
    total = node
    while node != 1:
        node //= 2
        total += node
    return total


def forbidden_sum(n: int, k: int, x: int) -> list[int] | None:
    """Return addends from 1..k, none equal to ``x``, summing to ``n``.

    Returns ``None`` when no such sum exists.
    """
    if x != 1:
        return [1] * n
    if k == 1:
        return None
    if n % 2 == 0:
        return [2] * (n // 2)
    if k == 2 or n < 3:
        return None
    return [3] + [2] * ((n - 3) // 2)


def min_unsort_ops(values: Sequence[int]) -> int:
    """Return the fewest prefix/suffix shifts that leave the array unsorted."""
    if len(values) < 2:
        raise ValueError("at least two values are required")
    min_gap = min(b - a for a, b in zip(values, values[1:]))
    if min_gap < 0:
        return 0
    return min_gap // 2 + 1


def parity_split_possible(values: Iterable[int]) -> bool:
    """Tell whether the values split into two groups of equal sum parity."""
    return sum(values) % 2 == 0


def buttons_winner(a: int, b: int, c: int) -> str:
    """Return "First" or "Second", the winner of the button game."""
    anna_shared = (c + 1) // 2
    katie_shared = c - anna_shared
    return "First" if a + anna_shared > b + katie_shared else "Second"


def split_no_divisor(values: Sequence[int]) -> tuple[list[int], list[int]] | None:
    """Split the values into two non-empty groups where no element of the second divides one of the first.

    Returns ``None`` when all values are equal.
    """
    if not values:
        raise ValueError("at least one value is required")
    smallest = min(values)
    if all(value == smallest for value in values):
        return None
    mins = [value for value in values if value == smallest]
    others = [value for value in values if value != smallest]
    return mins, others


def restore_sequence(values: Iterable[int]) -> list[int]:
    """Return a sequence whose non-decreasing filter gives ``values``."""
    restored: list[int] = []
    prev = 0
    for value in values:
        if value < prev:
            restored.append(value)
        restored.append(value)
        prev = value
    return restored