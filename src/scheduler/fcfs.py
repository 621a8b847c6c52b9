from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional

from .interface import RequestOutcome


class FirstComeFirstServedQueue:
    """Serves floor requests strictly in the order they were admitted."""

    def __init__(self, num_floors: int) -> None:
        if num_floors < 1:
            raise ValueError(f"Building needs at least one floor, got {num_floors}")
        self.num_floors = num_floors
        self._queue: Deque[int] = deque()
        # Index 0 is unused so floor numbers map straight onto the list.
        self._requested: List[bool] = [False] * (num_floors + 1)

    def is_valid_floor(self, floor: int) -> bool:
        return 1 <= floor <= self.num_floors

    def enqueue(self, floor: int) -> RequestOutcome:
        if not self.is_valid_floor(floor):
            return RequestOutcome.INVALID
        if self._requested[floor]:
            return RequestOutcome.DUPLICATE
        self._requested[floor] = True
        self._queue.append(floor)
        return RequestOutcome.ACCEPTED

    def dequeue(self) -> Optional[int]:
        if not self._queue:
            return None
        return self._queue.popleft()

    def complete(self, floor: int) -> None:
        if self.is_valid_floor(floor):
            self._requested[floor] = False

    def is_requested(self, floor: int) -> bool:
        return self.is_valid_floor(floor) and self._requested[floor]

    def pending(self) -> List[int]:
        return list(self._queue)

    def __len__(self) -> int:
        return len(self._queue)
