"""Greedy, two-pointer and ordered-set problems on sorted data."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from sortedcontainers import SortedList


def distinct_count(values: Iterable[int]) -> int:
    """Return the number of distinct values."""
    return len(set(values))


def apartments(applicants: Iterable[int], apartments: Iterable[int], k: int) -> int:
    """Return how many applicants get an apartment within ``k`` of their wish.

    Matches greedily with two pointers over the sorted lists.
    """
    wishes = sorted(applicants)
    sizes = sorted(apartments)
    matched = i = j = 0
    while i < len(wishes) and j < len(sizes):
        if wishes[i] - k <= sizes[j] <= wishes[i] + k:
            matched += 1
            i += 1
            j += 1
        elif sizes[j] > wishes[i] + k:
            i += 1
        else:
            j += 1
    return matched


def apartments_multiset(
    applicants: Iterable[int], apartments: Iterable[int], k: int
) -> int:
    """Return how many applicants get an apartment within ``k`` of their wish.

    Gives each applicant, in increasing order, the smallest fitting apartment left.
    """
    free = SortedList(apartments)
    matched = 0
    for wish in sorted(applicants):
        idx = free.bisect_left(wish - k)
        if idx < len(free) and free[idx] <= wish + k:
            matched += 1
            del free[idx]
    return matched


def ferris_wheel(weights: Iterable[int], x: int) -> int:
    """Return the fewest gondolas of capacity ``x`` holding at most two children each."""
    left = SortedList(weights)
    gondolas = 0
    remaining = 0
    while left:
        if remaining == 0:
            gondolas += 1
            remaining = x - left.pop()
            continue
        idx = left.bisect_right(remaining)
        if idx > 0:
            del left[idx - 1]
        remaining = 0
    return gondolas


def concert_tickets(
    prices: Iterable[int], offers: Iterable[int]
) -> list[int | None]:
    """Sell each customer the dearest ticket not above their offer.

    Returns the price paid by each customer in turn, ``None`` when nobody sold one.
    """
    tickets = SortedList(prices)
    sold: list[int | None] = []
    for offer in offers:
        idx = tickets.bisect_right(offer)
        if idx == 0:
            sold.append(None)
        else:
            sold.append(tickets.pop(idx - 1))
    return sold


def max_customers(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the largest number of customers present at once.

    Each interval is an (arrival, leaving) pair.
    """
    pairs = list(intervals)
    arrivals = sorted(a for a, _ in pairs)
    departures = sorted(d for _, d in pairs)
    present = best = i = j = 0
    while i < len(arrivals) and j < len(departures):
        if arrivals[i] < departures[j]:
            i += 1
            present += 1
            best = max(best, present)
        else:
            j += 1
            present -= 1
    return best


def max_movies(intervals: Iterable[tuple[int, int]]) -> int:
    """Return the most movies, given as (start, end), that can be watched in full."""
    by_end = sorted(((end, start) for start, end in intervals))
    if not by_end:
        raise ValueError("at least one movie is required")
    watched = 1
    last_end = by_end[0][0]
    for end, start in by_end[1:]:
        if start >= last_end:
            watched += 1
            last_end = end
    return watched


def two_values(values: Iterable[int], x: int) -> tuple[int, int] | None:
    """Return 1-based positions of two values summing to ``x``, or ``None``."""
    ranked = sorted((value, pos) for pos, value in enumerate(values, start=1))
    i, j = 0, len(ranked) - 1
    while i < j:
        need = x - ranked[j][0]
        if ranked[i][0] < need:
            i += 1
        elif ranked[i][0] == need:
            return ranked[i][1], ranked[j][1]
        else:
            j -= 1
    return None


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a non-empty contiguous subarray."""
    best: int | None = None
    running = 0
    for value in values:
        if running + value < 0:
            running = 0
            candidate = value
        else:
            running += value
            candidate = running
        best = candidate if best is None else max(best, candidate)
    if best is None:
        raise ValueError("at least one value is required")
    return best


def stick_cost(lengths: Iterable[int]) -> int:
    """Return the least total change that makes every stick the same length."""
    ordered = sorted(lengths)
    if not ordered:
        raise ValueError("at least one length is required")
    median = ordered[(len(ordered) - 1) // 2]
    return sum(abs(length - median) for length in ordered)


def smallest_missing_sum(coins: Iterable[int]) -> int:
    """Return the smallest sum that no subset of the coins makes."""
    reachable = 0
    for coin in sorted(coins):
        if coin > reachable + 1:
            break
        reachable += coin
    return reachable + 1