import random

import pytest

from contestkit.sequences import (
    collecting_rounds,
    josephus,
    josephus_every_other,
    longest_unique_run,
    swap_rounds,
    tower_count,
    traffic_gaps,
)


def _permutations(seed, count=25):
    rng = random.Random(seed)
    for _ in range(count):
        perm = list(range(1, rng.randint(2, 10) + 1))
        rng.shuffle(perm)
        yield perm


def test_collecting_rounds_sorted_and_reversed():
    n = 8
    assert collecting_rounds(range(1, n + 1)) == collecting_rounds([1])
    assert collecting_rounds(range(n, 0, -1)) == n


def test_swap_rounds_matches_recount():
    rng = random.Random(3)
    for perm in _permutations(4):
        n = len(perm)
        swaps = [(rng.randint(1, n), rng.randint(1, n)) for _ in range(6)]
        results = swap_rounds(perm, swaps)
        current = list(perm)
        for (left, right), rounds in zip(swaps, results):
            current[left - 1], current[right - 1] = current[right - 1], current[left - 1]
            assert rounds == collecting_rounds(current)


def test_swap_rounds_double_swap_restores():
    perm = [4, 2, 1, 5, 3]
    results = swap_rounds(perm, [(2, 5), (2, 5)])
    assert results[-1] == collecting_rounds(perm)


def test_longest_unique_run():
    distinct = [5, 1, 9, 3, 7]
    assert longest_unique_run(distinct) == len(distinct)
    assert longest_unique_run([2, 2, 2]) == longest_unique_run([2])
    assert longest_unique_run(distinct + distinct) == len(distinct)
    with pytest.raises(ValueError):
        longest_unique_run([])


def test_tower_count_bounds():
    rng = random.Random(8)
    for _ in range(30):
        cubes = [rng.randint(1, 20) for _ in range(rng.randint(1, 12))]
        assert 1 <= tower_count(cubes) <= len(cubes)
    increasing = [1, 3, 5, 7]
    assert tower_count(increasing) == len(increasing)
    equal = [4, 4, 4]
    assert tower_count(equal) == len(equal)
    assert tower_count([9, 7, 5, 3]) == tower_count([9])


def test_traffic_gaps_example():
    assert traffic_gaps(8, [3, 6, 2]) == [5, 3, 3]


def test_traffic_gaps_invariants():
    rng = random.Random(5)
    x = 100
    positions = rng.sample(range(1, x), 15)
    gaps = traffic_gaps(x, positions)
    assert len(gaps) == len(positions)
    assert all(a >= b for a, b in zip(gaps, gaps[1:]))
    assert gaps[-1] * (len(positions) + 1) >= x


def test_josephus_example():
    assert josephus(7, 2) == [3, 6, 2, 7, 5, 1, 4]


def test_josephus_every_other_example():
    assert josephus_every_other(7) == [2, 4, 6, 1, 5, 3, 7]


def test_josephus_is_permutation():
    for n in range(1, 12):
        for k in range(0, 15):
            assert sorted(josephus(n, k)) == list(range(1, n + 1))


def test_josephus_skip_one_agrees_with_every_other():
    for n in range(1, 20):
        assert josephus(n, 1) == josephus_every_other(n)


def test_josephus_zero_step_is_in_order():
    assert josephus(6, 0) == list(range(1, 7))


def test_josephus_errors():
    with pytest.raises(ValueError):
        josephus(0, 2)
    with pytest.raises(ValueError):
        josephus_every_other(0)
    with pytest.raises(ValueError):
        josephus(5, -1)