from __future__ import annotations

from enum import Enum, IntEnum
from typing import List, Optional, Protocol


class Direction(IntEnum):
    """Travel direction; the value is the floor delta of one step."""

    IDLE = 0
    UP = 1
    DOWN = -1


class RequestOutcome(str, Enum):
    """Result of offering a floor to a request queue."""

    ACCEPTED = "accepted"
    INVALID = "invalid"
    DUPLICATE = "duplicate"


class RequestQueue(Protocol):
    """Strategy interface for holding and ordering floor requests."""

    num_floors: int

    def enqueue(self, floor: int) -> RequestOutcome:
        """
        Admit a floor request.

        Implementations must reject floors outside ``1..num_floors`` and
        floors that already have an outstanding request, leaving their
        state untouched in both cases.
        """
        ...

    def dequeue(self) -> Optional[int]:
        """Remove and return the next floor to service, or None when empty."""
        ...

    def complete(self, floor: int) -> None:
        """Mark the request for ``floor`` as serviced."""
        ...

    def is_requested(self, floor: int) -> bool:
        ...

    def pending(self) -> List[int]:
        ...

    def __len__(self) -> int:
        ...
