"""Solutions to a first batch of short contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations, islice, takewhile
from math import gcd
from operator import xor


def bmail_route(parents: Sequence[int]) -> list[int]:
    """Return the route from router 1 to router n.

    ``parents[i]`` is the router that router ``i + 2`` was connected to.
    """
    node = len(parents) + 1
    route = [node]
    while node != 1:
        node = parents[node - 2]
        route.append(node)
    route.reverse()
    return route


def min_moves_to_balance(s: Iterable[str]) -> int:
    """Return the fewest bracket moves that make ``s`` a regular sequence."""
    stack: list[str] = []
    for ch in s:
        if stack and stack[-1] == "(" and ch == ")":
            stack.pop()
        else:
            stack.append(ch)
    return len(stack) // 2


def _span(points: Iterable[int]) -> int:
    pts = list(points)
    return pts[-1] - pts[0] if pts else 0


def max_triangle_area(
    w: int,
    h: int,
    x1: Iterable[int],
    x2: Iterable[int],
    y1: Iterable[int],
    y2: Iterable[int],
) -> int:
    """Return twice the largest triangle area with two points on one side.

    ``x1``/``x2`` are the sorted points on the bottom and top sides,
    ``y1``/``y2`` those on the left and right sides.
    """
    horizontal = max(_span(x1), _span(x2)) * h
    vertical = max(_span(y1), _span(y2)) * w
    return max(horizontal, vertical)


def two_permutations_exist(n: int, a: int, b: int) -> bool:
    """Tell whether two permutations with common prefix ``a`` and suffix ``b`` can differ."""
    if n == a == b:
        return True
    return n - a - b > 1


def count_round_numbers(n: int) -> int:
    """Count the extremely round numbers (one non-zero digit) up to ``n``."""
    if n <= 0:
        return 0
    digits = str(n)
    return 9 * (len(digits) - 1) + int(digits[0])


def min_parity_merges(values: Iterable[int]) -> int:
    """Return the fewest merges that leave neighbours of differing parity."""
    it = iter(values)
    try:
        parity = next(it) % 2
    except StopIteration:
        raise ValueError("at least one value is required") from None
    merges = 0
    for value in it:
        if value % 2 == parity:
            merges += 1
        else:
            parity = value % 2
    return merges


def make_ugly_beautiful(values: Sequence[int]) -> list[int] | None:
    """Reorder a sorted array so no element equals the sum of those before it.

    Returns ``None`` when that is impossible.
    """
    if not values:
        raise ValueError("at least one value is required")
    if values[0] == values[-1]:
        return None
    return [values[0], *reversed(values[1:])]


def one_and_two_split(values: Iterable[int]) -> int | None:
    """Return the smallest k whose prefix product equals the suffix product.

    Values are ones and twos; ``None`` means no such k exists.
    """
    two_positions = [pos for pos, value in enumerate(values, start=1) if value == 2]
    if not two_positions:
        return 1
    if len(two_positions) % 2:
        return None
    return two_positions[len(two_positions) // 2 - 1]


def has_small_gcd_pair(values: Iterable[int]) -> bool:
    """Tell whether some pair of values has a gcd of at most 2."""
    return any(gcd(a, b) <= 2 for a, b in combinations(list(values), 2))


def shortest_original_length(s: str) -> int:
    """Return the shortest string that can grow into ``s`` by wrapping in 0...1 or 1...0."""
    n = len(s)
    pairs = zip(islice(s, (n + 1) // 2), reversed(s))
    removed = sum(
        1 for _ in takewhile(lambda pair: (pair[0] != "0") != (pair[1] != "0"), pairs)
    )
    return n - 2 * removed


def xor_witness(values: Iterable[int]) -> int | None:
    """Return x such that xoring every value with x gives a total xor of 0.

    Returns ``None`` when no such x exists.
    """
    items = list(values)
    total = reduce(xor, items, 0)
    if len(items) % 2 == 0 and total != 0:
        return None
    return total


def walking_moves(a: int, b: int, c: int, d: int) -> int | None:
    """Return the moves from (a, b) to (c, d) using (+1, +1) and (-1, 0) steps.

    Returns ``None`` when the target cannot be reached.
    """
    up = d - b
    if up < 0:
        return None
    left = (a + up) - c
    if left < 0:
        return None
    return up + left


def coins_representable(n: int, k: int) -> bool:
    """Tell whether ``n`` is a sum of coins worth 2 and ``k``."""
    if n % 2 == 0 or k == 1:
        return True
    if (n % k) % 2:
        return k % 2 == 1
    return True


def longest_zero_run(values: Iterable[int]) -> int:
    """Return the length of the longest run of zeros."""
    best = run = 0
    for value in values:
        run = run + 1 if value == 0 else 0
        best = max(best, run)
    return best


def complement_permutation(values: Sequence[int]) -> list[int]:
    """Map each value v of a permutation of 1..n to n - v + 1."""
    n = len(values)
    return [n - value + 1 for value in values]