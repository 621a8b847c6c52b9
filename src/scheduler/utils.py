from __future__ import annotations

from typing import List

from .interface import Direction


def travel_direction(start: int, target: int) -> Direction:
    if target > start:
        return Direction.UP
    if target < start:
        return Direction.DOWN
    return Direction.IDLE


def plan_route(start: int, target: int) -> List[int]:
    """Return the floors entered on the way from ``start`` to ``target``.

    The starting floor is excluded and the target is included, so a trip
    from 1 to 4 yields ``[2, 3, 4]`` and a trip from 4 to 2 yields
    ``[3, 2]``. Equal floors produce an empty route.
    """

    direction = travel_direction(start, target)
    if direction is Direction.IDLE:
        return []
    return list(range(start + direction, target + direction, direction))
