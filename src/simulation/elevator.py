from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from scheduler import Direction, RequestOutcome, RequestQueue, get_scheduler, travel_direction


@dataclass
class Elevator:
    """State of a single car: position, pending requests and travel logs.

    Every method here is a pure state transition. Delays and console output
    belong to :class:`simulation.Simulation`.
    """

    num_floors: int
    current_floor: int = 1
    scheduler_name: str = "fcfs"
    direction: Direction = Direction.IDLE
    floors_visited: List[int] = field(default_factory=list)
    request_history: List[int] = field(default_factory=list)
    requests: RequestQueue = field(init=False)

    def __post_init__(self) -> None:
        if self.num_floors < 1:
            raise ValueError(f"Building needs at least one floor, got {self.num_floors}")
        if not 1 <= self.current_floor <= self.num_floors:
            raise ValueError(
                f"Start floor {self.current_floor} outside 1..{self.num_floors}"
            )
        self.requests = get_scheduler(self.scheduler_name, self.num_floors)

    def request(self, floor: int) -> RequestOutcome:
        outcome = self.requests.enqueue(floor)
        if outcome is RequestOutcome.ACCEPTED:
            self.request_history.append(floor)
        return outcome

    def next_request(self) -> Optional[int]:
        floor = self.requests.dequeue()
        if floor is None:
            self.direction = Direction.IDLE
        return floor

    def head_towards(self, target: int) -> Direction:
        """Return the travel direction to ``target``.

        A request for the current floor leaves the previous direction as is.
        """
        direction = travel_direction(self.current_floor, target)
        if direction is not Direction.IDLE:
            self.direction = direction
        return direction

    def advance(self) -> int:
        """Move one floor in the current direction and log the floor entered."""
        if self.direction is Direction.IDLE:
            raise RuntimeError("Cannot advance while idle")
        next_floor = self.current_floor + self.direction
        if not 1 <= next_floor <= self.num_floors:
            raise RuntimeError(f"Floor {next_floor} is outside 1..{self.num_floors}")
        self.current_floor = next_floor
        self.floors_visited.append(next_floor)
        return next_floor

    def arrive(self) -> None:
        self.requests.complete(self.current_floor)

    def is_requested(self, floor: int) -> bool:
        return self.requests.is_requested(floor)

    @property
    def pending_requests(self) -> List[int]:
        return self.requests.pending()

    def has_pending_requests(self) -> bool:
        return len(self.requests) > 0
