"""Array problems solved with two pointers and monotonic stacks."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def three_values(values: Iterable[int], x: int) -> tuple[int, int, int] | None:
    """Return 1-based positions of three values summing to ``x``, or ``None``."""
    ranked = sorted((value, pos) for pos, value in enumerate(values, start=1))
    n = len(ranked)
    for i in range(n - 1):
        s, e = i + 1, n - 1
        while s < e:
            total = ranked[i][0] + ranked[s][0] + ranked[e][0]
            if total < x:
                s += 1
            elif total > x:
                e -= 1
            else:
                return ranked[i][1], ranked[s][1], ranked[e][1]
    return None


def nearest_smaller(values: Iterable[int]) -> list[int]:
    """For each value, return the 1-based position of the nearest smaller value to its left.

    Position 0 means there is none.
    """
    items = list(values)
    stack: list[int] = []
    result = []
    for index, value in enumerate(items):
        while stack and items[stack[-1]] >= value:
            stack.pop()
        result.append(stack[-1] + 1 if stack else 0)
        stack.append(index)
    return result


def count_subarrays(values: Sequence[int], x: int) -> int:
    """Count contiguous subarrays of positive values whose sum is ``x``."""
    n = len(values)
    if n == 0:
        return 0
    left = right = 0
    window = values[0]
    found = 0
    while right < n:
        if window < x:
            if right == n - 1:
                break
            right += 1
            window += values[right]
        else:
            if window == x:
                found += 1
            window -= values[left]
            left += 1
    return found