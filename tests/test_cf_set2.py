from itertools import product
from math import prod

import pytest

from contestkit.cf_set2 import (
    ancestor_sum,
    buttons_winner,
    forbidden_sum,
    grasshopper_jumps,
    min_sign_flips,
    min_unsort_ops,
    parity_split_possible,
    restore_sequence,
    split_no_divisor,
)


def _brute_flips(arr):
    best = None
    for mask in product([False, True], repeat=len(arr)):
        flipped = [-v if m else v for v, m in zip(arr, mask)]
        if sum(flipped) >= 0 and prod(flipped) == 1:
            count = sum(mask)
            best = count if best is None else min(best, count)
    return best


def test_min_sign_flips_matches_brute_force():
    for length in range(1, 7):
        for arr in product([1, -1], repeat=length):
            assert min_sign_flips(arr) == _brute_flips(list(arr))


@pytest.mark.parametrize("x,k", [(10, 2), (10, 3), (7, 7), (1, 2), (12, 4)])
def test_grasshopper_jumps(x, k):
    jumps = grasshopper_jumps(x, k)
    assert sum(jumps) == x
    assert all(j % k for j in jumps)
    assert 1 <= len(jumps) <= 2


def test_grasshopper_jumps_invalid_k():
    with pytest.raises(ValueError):
        grasshopper_jumps(5, 1)


def test_ancestor_sum_recurrence():
    assert ancestor_sum(1) == 1
    for n in range(1, 200):
        assert ancestor_sum(2 * n) == 2 * n + ancestor_sum(n)
        assert ancestor_sum(2 * n + 1) == 2 * n + 1 + ancestor_sum(n)


def test_ancestor_sum_rejects_zero():
    with pytest.raises(ValueError):
        ancestor_sum(0)


def test_forbidden_sum_valid_results():
    for n in range(1, 30):
        for k in range(1, n + 1):
            for x in range(1, k + 1):
                result = forbidden_sum(n, k, x)
                if x != 1:
                    assert result == [1] * n
                if result is not None:
                    assert sum(result) == n
                    assert x not in result
                    assert all(1 <= v <= k for v in result)


def test_forbidden_sum_impossible():
    assert forbidden_sum(5, 1, 1) is None
    assert forbidden_sum(5, 2, 1) is None
    assert forbidden_sum(5, 3, 1) is not None and sum(forbidden_sum(5, 3, 1)) == 5


def _apply(arr, i):
    return [v + 1 for v in arr[:i]] + [v - 1 for v in arr[i:]]


def _is_sorted(arr):
    return all(a <= b for a, b in zip(arr, arr[1:]))


@pytest.mark.parametrize(
    "values,expected",
    [([1, 1], 1), ([1, 9], 5), ([1, 8, 10], 2), ([2, 5, 20, 21], 1)],
)
def test_min_unsort_ops_simulation(values, expected):
    ops = min_unsort_ops(values)
    assert ops == expected
    gaps = [b - a for a, b in zip(values, values[1:])]
    pos = gaps.index(min(gaps)) + 1
    arr = list(values)
    for _ in range(ops - 1):
        arr = _apply(arr, pos)
    assert _is_sorted(arr)
    assert not _is_sorted(_apply(arr, pos))


def test_min_unsort_ops_already_unsorted():
    assert min_unsort_ops([3, 1, 2]) == 0


def test_min_unsort_ops_too_short():
    with pytest.raises(ValueError):
        min_unsort_ops([5])


def test_parity_split_possible():
    assert parity_split_possible([1, 3, 4]) is True
    assert parity_split_possible([1, 2, 4]) is False


def test_buttons_winner():
    assert buttons_winner(2, 1, 0) == "First"
    assert buttons_winner(1, 1, 0) == "Second"
    assert buttons_winner(1, 1, 3) == "First"
    assert buttons_winner(1, 1, 2) == "Second"


@pytest.mark.parametrize("values", [[1, 2, 3, 4, 5], [3, 2, 3, 9], [7, 14, 7]])
def test_split_no_divisor(values):
    first, second = split_no_divisor(values)
    assert first and second
    assert sorted(first + second) == sorted(values)
    assert all(b % c != 0 for b in first for c in second)


def test_split_no_divisor_all_equal():
    assert split_no_divisor([4, 4, 4]) is None


def _vika_filter(arr):
    kept = arr[:1]
    for prev, cur in zip(arr, arr[1:]):
        if prev <= cur:
            kept.append(cur)
    return kept


@pytest.mark.parametrize("values", [[4, 6, 3], [1, 2, 3], [5, 4, 3, 2, 1], [2, 2, 1]])
def test_restore_sequence(values):
    restored = restore_sequence(values)
    assert _vika_filter(restored) == values
    assert len(restored) <= 2 * len(values)