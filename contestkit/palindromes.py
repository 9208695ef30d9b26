"""Counting integers whose digits can form a palindrome divisible by k."""

from __future__ import annotations

from collections import Counter
from math import factorial, prod


def _arrangements(digits: Counter[str], n: int) -> int:
    """Count n-digit numbers (no leading zero) using exactly these digits."""
    total = factorial(n) // prod(factorial(c) for c in digits.values())
    zeros = digits["0"]
    if zeros == 0:
        return total
    rest = digits.copy()
    rest["0"] -= 1
    leading_zero = factorial(n - 1) // prod(factorial(c) for c in rest.values())
    return total - leading_zero


def count_good_integers(n: int, k: int) -> int:
    """Count the n-digit integers whose digits rearrange into a palindrome divisible by ``k``."""
    if n < 1:
        raise ValueError("n must be positive")
    if k < 1:
        raise ValueError("k must be positive")
    half_len = (n + 1) // 2
    seen: set[str] = set()
    total = 0
    for half in range(10 ** (half_len - 1), 10**half_len):
        text = str(half)
        mirror = text[: n // 2][::-1]
        palindrome = text + mirror
        if int(palindrome) % k:
            continue
        signature = "".join(sorted(palindrome))
        if signature in seen:
            continue
        seen.add(signature)
        total += _arrangements(Counter(palindrome), n)
    return total