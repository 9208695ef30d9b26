import pytest

from contestkit.scheduling import allocate_rooms, min_production_time, task_reward


def test_allocate_rooms_example():
    assert allocate_rooms([(1, 2), (2, 4), (4, 4)]) == (2, [1, 2, 1])


@pytest.mark.parametrize(
    "customers",
    [
        [(1, 5), (2, 3), (4, 8), (6, 7), (9, 10)],
        [(3, 3), (3, 3), (3, 3)],
        [(1, 1)],
        [(5, 9), (1, 2), (3, 4), (2, 6), (7, 8)],
    ],
)
def test_allocate_rooms_never_double_books(customers):
    count, rooms = allocate_rooms(customers)
    assert len(rooms) == len(customers)
    assert max(rooms) == count
    assert set(rooms) == set(range(1, count + 1))
    for i, (a1, d1) in enumerate(customers):
        for j, (a2, d2) in enumerate(customers):
            if i < j and rooms[i] == rooms[j]:
                assert d1 < a2 or d2 < a1


def test_allocate_rooms_identical_stays_need_separate_rooms():
    count, rooms = allocate_rooms([(3, 3)] * 4)
    assert count == 4
    assert sorted(rooms) == [1, 2, 3, 4]


def test_allocate_rooms_empty():
    with pytest.raises(ValueError):
        allocate_rooms([])


def test_min_production_time_example():
    assert min_production_time([3, 2, 5], 7) == 8


@pytest.mark.parametrize(
    "times, t",
    [([1], 10), ([4, 6], 5), ([7, 3, 3, 9], 20), ([1000000000], 1000000000)],
)
def test_min_production_time_is_minimal(times, t):
    best = min_production_time(times, t)
    assert sum(best // c for c in times) >= t
    assert sum((best - 1) // c for c in times) < t


def test_min_production_time_single_machine():
    assert min_production_time([5], 4) == 5 * 4


def test_min_production_time_no_machines():
    with pytest.raises(ValueError):
        min_production_time([], 3)


def test_task_reward_example():
    assert task_reward([(6, 10), (8, 15), (5, 12)]) == 2


def test_task_reward_single_task():
    assert task_reward([(4, 9)]) == 9 - 4


def test_task_reward_order_of_input_does_not_matter():
    tasks = [(3, 1), (1, 20), (7, 7), (2, 2)]
    assert task_reward(tasks) == task_reward(list(reversed(tasks)))


def test_task_reward_empty():
    assert task_reward([]) == 0