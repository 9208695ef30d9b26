"""Problems about orderings, sliding windows and circular elimination."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def collecting_rounds(values: Iterable[int]) -> int:
    """Return the rounds needed to collect 1..n in order from a permutation."""
    items = list(values)
    n = len(items)
    seen: set[int] = set()
    rounds = 1
    for value in items:
        seen.add(value)
        if value != n and value + 1 in seen:
            rounds += 1
    return rounds


def swap_rounds(
    values: Iterable[int], swaps: Iterable[tuple[int, int]]
) -> list[int]:
    """Return the collecting rounds after each swap of two 1-based positions."""
    arr = list(values)
    n = len(arr)
    pos = {value: index for index, value in enumerate(arr)}
    rounds = 1 + sum(1 for v in range(1, n) if pos[v + 1] < pos[v])

    def breaks(starts: set[int]) -> int:
        return sum(1 for v in starts if pos[v + 1] < pos[v])

    results = []
    for left, right in swaps:
        a, b = arr[left - 1], arr[right - 1]
        starts = {v for v in (a - 1, a, b - 1, b) if 1 <= v < n}
        rounds -= breaks(starts)
        arr[left - 1], arr[right - 1] = b, a
        pos[a], pos[b] = right - 1, left - 1
        rounds += breaks(starts)
        results.append(rounds)
    return results


def longest_unique_run(values: Iterable[int]) -> int:
    """Return the length of the longest run of values with no repeats."""
    last_seen: dict[int, int] = {}
    start = 0
    best = 0
    for index, value in enumerate(values):
        previous = last_seen.get(value)
        if previous is not None and previous >= start:
            start = previous + 1
        last_seen[value] = index
        best = max(best, index - start + 1)
    if not last_seen:
        raise ValueError("at least one value is required")
    return best


def tower_count(cubes: Iterable[int]) -> int:
    """Return the fewest towers built by stacking cubes on strictly larger ones."""
    tops = SortedList()
    for cube in cubes:
        idx = tops.bisect_right(cube)
        if idx < len(tops):
            del tops[idx]
        tops.add(cube)
    return len(tops)


def traffic_gaps(x: int, positions: Iterable[int]) -> list[int]:
    """Return the longest light-free stretch of a street of length ``x`` after each light."""
    lights = SortedList([0, x])
    gaps = SortedList([x])
    longest = []
    for p in positions:
        idx = lights.bisect_right(p)
        right, left = lights[idx], lights[idx - 1]
        gaps.remove(right - left)
        gaps.add(p - left)
        gaps.add(right - p)
        lights.add(p)
        longest.append(gaps[-1])
    return longest


def josephus_every_other(n: int) -> list[int]:
    """Return the order in which every second child of a circle of ``n`` is removed."""
    if n < 1:
        raise ValueError("n must be positive")
    if n == 1:
        return [1]
    circle = SortedList(range(1, n + 1))
    order = []
    idx = 1
    while circle:
        order.append(circle.pop(idx))
        if circle:
            idx = (idx + 1) % len(circle)
    return order


def josephus(n: int, k: int) -> list[int]:
    """Return the removal order when every (k+1)-th child of a circle of ``n`` leaves."""
    if n < 1:
        raise ValueError("n must be positive")
    if k < 0:
        raise ValueError("k must not be negative")
    circle = SortedList(range(1, n + 1))
    order = []
    idx = k % n
    while circle:
        order.append(circle.pop(idx))
        if circle:
            idx = (idx + k) % len(circle)
    return order