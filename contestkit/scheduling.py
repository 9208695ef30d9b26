"""Scheduling problems: room allocation, machine throughput and task ordering."""

from __future__ import annotations

import heapq
from collections.abc import Iterable, Sequence
from itertools import accumulate


def allocate_rooms(customers: Sequence[tuple[int, int]]) -> tuple[int, list[int]]:
    """Give each (arrival, departure) customer a hotel room.

    Returns the number of rooms used and, in input order, the room of each customer.
    A room is free again only on the day after its guest leaves.
    """
    if not customers:
        raise ValueError("at least one customer is required")
    order = sorted(range(len(customers)), key=lambda i: customers[i])
    rooms = [0] * len(customers)

    first = order[0]
    room_count = 1
    rooms[first] = room_count
    occupied = [(customers[first][1], room_count)]

    for index in order[1:]:
        arrival, departure = customers[index]
        if arrival > occupied[0][0]:
            _, room = heapq.heapreplace(occupied, (departure, occupied[0][1]))
        else:
            room_count += 1
            room = room_count
            heapq.heappush(occupied, (departure, room))
        rooms[index] = room
    return room_count, rooms


def min_production_time(times: Iterable[int], t: int) -> int:
    """Return the shortest time in which machines with the given cycle times make ``t`` products."""
    cycles = sorted(times)
    if not cycles:
        raise ValueError("at least one machine is required")

    def enough(total: int) -> bool:
        return any(made >= t for made in accumulate(total // c for c in cycles)) or t <= 0

    low, high = 0, cycles[-1] * t
    best = high
    while low <= high:
        mid = (low + high) // 2
        if enough(mid):
            best = mid
            high = mid - 1
        else:
            low = mid + 1
    return best


def task_reward(tasks: Iterable[tuple[int, int]]) -> int:
    """Return the best total reward for (duration, deadline) tasks done one after another.

    Each task earns its deadline minus its finishing time.
    """
    elapsed = 0
    reward = 0
    for duration, deadline in sorted(tasks):
        elapsed += duration
        reward += deadline - elapsed
    return reward