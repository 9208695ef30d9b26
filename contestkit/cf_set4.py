"""Solutions to a fourth batch of short contest problems."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import accumulate, takewhile


def centered_points(x: int, y: int, k: int) -> list[tuple[int, int]]:
    """Return ``k`` distinct integer points whose centre is (x, y)."""
    if k == 1:
        return [(x, y)]
    points: list[tuple[int, int]] = []
    if k % 2:
        points += [(x - 1, y - 1), (x - 2, y - 2), (x + 3, y + 3)]
        for i in range((k - 3) // 2):
            points += [(x + 4 + i, y + 4 + i), (x - 4 - i, y - 4 - i)]
        return points
    for i in range(k // 2):
        points += [(x + i + 1, y + i + 1), (x - i - 1, y - i - 1)]
    return points


def digit_sum(n: int) -> int:
    """Return the sum of the digits of a two-digit number."""
    tens, ones = divmod(n, 10)
    return tens + ones


def winning_games(a1: int, a2: int, b1: int, b2: int) -> int:
    """Count the card games Suneet wins with cards (a1, a2) against (b1, b2)."""
    conditions = (
        a1 > b1 and a2 > b2,
        a1 > b2 and a2 > b1,
        a1 > b1 and a2 == b2,
        a1 > b2 and a2 == b1,
        a2 > b1 and a1 == b2,
        a2 > b2 and a1 == b1,
    )
    return 2 * sum(conditions)


def can_shower(intervals: Sequence[tuple[int, int]], s: int, m: int) -> bool:
    """Tell whether a free gap of at least ``s`` exists in a day of ``m`` minutes.

    ``intervals`` are the sorted, non-overlapping busy ranges (l, r).
    """
    if not intervals:
        return False
    gaps = [intervals[0][0]]
    gaps += [l - prev_r for (_, prev_r), (l, _) in zip(intervals, intervals[1:])]
    gaps.append(m - intervals[-1][1])
    return any(gap >= s for gap in gaps)


def fill_subsequence(s: str, t: str) -> str | None:
    """Replace the ``?`` in ``s`` so that ``t`` becomes a subsequence of it.

    Leftover ``?`` become ``a``. Returns ``None`` when it cannot be done.
    """
    chars = list(s)
    matched = 0
    for i, ch in enumerate(chars):
        if matched == len(t):
            break
        if ch == "?" or ch == t[matched]:
            chars[i] = t[matched]
            matched += 1
    if matched != len(t):
        return None
    return "".join("a" if ch == "?" else ch for ch in chars)


def min_operations(l: int, r: int) -> int:
    """Return the fewest triple-and-third operations that zero every number in [l, r]."""
    digits = 0
    first = l
    while first > 0:
        first //= 3
        digits += 1
    total = 2 * digits
    divisor = 3**digits
    front = l + 1
    while divisor <= r:
        total += (divisor - front) * digits
        front = divisor
        digits += 1
        divisor *= 3
    return total + (r - front + 1) * digits


def could_be_power(n: int) -> bool:
    """Tell whether ``n`` could be ``10^x`` (x >= 2) written without the caret."""
    if n < 102:
        return False
    if n < 1000:
        return n // 10 == 10
    if n < 10000:
        return n // 100 == 10 and (n // 10) % 10 != 0
    return False


def seating_followed(seats: Iterable[int]) -> bool:
    """Tell whether every passenger after the first sat next to someone."""
    occupied: set[int] = set()
    for seat in seats:
        if occupied and seat - 1 not in occupied and seat + 1 not in occupied:
            return False
        occupied.add(seat)
    return True


def matches_template(template: Sequence[int], s: str) -> bool:
    """Tell whether ``s`` maps one-to-one onto the numbers of ``template``."""
    if len(template) != len(s):
        return False
    to_char: dict[int, str] = {}
    to_num: dict[str, int] = {}
    for num, ch in zip(template, s):
        if to_char.setdefault(num, ch) != ch or to_num.setdefault(ch, num) != num:
            return False
    return True


def max_lr_score(values: Sequence[int], s: str) -> int:
    """Return the best score from nested segments running from an ``L`` to an ``R``."""
    prefix = [0, *accumulate(values)]
    n = len(values)
    lefts = (i for i in range(n) if s[i] == "L")
    rights = (j for j in reversed(range(n)) if s[j] == "R")
    pairs = takewhile(lambda pair: pair[0] < pair[1], zip(lefts, rights))
    return sum(prefix[j + 1] - prefix[i] for i, j in pairs)