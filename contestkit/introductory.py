"""Solutions to the introductory problem set."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from functools import reduce
from itertools import count, groupby
from operator import xor
from string import ascii_uppercase

MOD = 1_000_000_007


def collatz_sequence(n: int) -> list[int]:
    """Return the values taken by the 3n+1 process from ``n`` down to 1."""
    if n < 1:
        raise ValueError("n must be positive")
    sequence = [n]
    while n != 1:
        n = n // 2 if n % 2 == 0 else 3 * n + 1
        sequence.append(n)
    return sequence


def missing_number(n: int, values: Iterable[int]) -> int:
    """Return the number of 1..n absent from ``values``, found by xor."""
    return reduce(xor, range(1, n + 1), 0) ^ reduce(xor, values, 0)


def missing_number_sorted(n: int, values: Iterable[int]) -> int:
    """Return the number of 1..n absent from ``values``, found by sorting."""
    for expected, value in zip(count(1), sorted(values)):
        if value != expected:
            return expected
    return n


def longest_repetition(s: str) -> int:
    """Return the length of the longest run of one repeated character."""
    return max((sum(1 for _ in group) for _, group in groupby(s)), default=0)


def increasing_array_cost(values: Iterable[int]) -> int:
    """Return the fewest unit increments that make the values non-decreasing."""
    cost = 0
    highest: int | None = None
    for value in values:
        if highest is None or value >= highest:
            highest = value
        else:
            cost += highest - value
    return cost


def beautiful_permutation(n: int) -> list[int] | None:
    """Return a permutation of 1..n with no adjacent values differing by 1.

    Returns ``None`` when no such permutation exists.
    """
    if n in (2, 3):
        return None
    return [*range(2, n + 1, 2), *range(1, n + 1, 2)]


def spiral_value(y: int, x: int) -> int:
    """Return the number at row ``y``, column ``x`` of the number spiral."""
    if y > x:
        if y % 2:
            return (y - 1) * (y - 1) + x
        return y * y - x + 1
    if x % 2:
        return x * x - y + 1
    return (x - 1) * (x - 1) + y


def two_knights(n: int) -> list[int]:
    """Return, for each k in 1..n, the ways to place two non-attacking knights on a k x k board."""
    return [k * k * (k * k - 1) // 2 - 4 * (k - 1) * (k - 2) for k in range(1, n + 1)]


def two_sets(n: int) -> tuple[list[int], list[int]] | None:
    """Split 1..n into two sets of equal sum.

    Returns ``None`` when the total is odd.
    """
    if n < 1:
        raise ValueError("n must be positive")
    total = n * (n + 1) // 2
    if total % 2:
        return None
    half = total // 2
    running = 0
    last = n
    for i in range(n, 0, -1):
        if running >= half:
            break
        running += i
        last = i
    if running == half:
        return list(range(last, n + 1)), list(range(1, last))
    remaining = half - (running - last)
    first = [remaining, *range(last + 1, n + 1)]
    second = [i for i in range(1, last + 1) if i != remaining]
    return first, second


def bit_strings(n: int) -> int:
    """Return the number of bit strings of length ``n`` modulo 10^9 + 7."""
    return pow(2, n, MOD)


def trailing_zeros(n: int) -> int:
    """Return the number of trailing zeros of n!."""
    zeros = 0
    power = 5
    while power <= n:
        zeros += n // power
        power *= 5
    return zeros


def coin_piles_possible(a: int, b: int) -> bool:
    """Tell whether both piles can be emptied by taking 1 from one and 2 from the other."""
    return (a + b) % 3 == 0 and a <= 2 * b and b <= 2 * a


def palindrome_reorder(s: str) -> str | None:
    """Reorder the capital letters of ``s`` into a palindrome.

    Returns ``None`` when that is impossible.
    """
    counts = Counter(s)
    invalid = [ch for ch in counts if ch not in ascii_uppercase]
    if invalid:
        raise ValueError(f"unexpected character {invalid[0]!r}")
    odd = [ch for ch in sorted(counts) if counts[ch] % 2]
    if len(odd) > len(s) % 2:
        return None
    half = "".join(ch * (counts[ch] // 2) for ch in sorted(counts) if counts[ch] % 2 == 0)
    middle = "".join(ch * counts[ch] for ch in odd)
    return half + middle + half[::-1]