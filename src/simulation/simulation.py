from __future__ import annotations

import logging
import time
from typing import Callable, Dict, Iterable, List, Optional

from scheduler import Direction, RequestOutcome, plan_route

from .config import ElevatorConstraints
from .display import format_floors, render_status
from .elevator import Elevator

logger = logging.getLogger(__name__)


class Simulation:
    """Drives an :class:`Elevator` in real time and reports to the console.

    ``sleep`` and ``write`` are injectable so callers can run the simulation
    without real delays or capture its output.
    """

    def __init__(
        self,
        elevator: Elevator,
        constraints: Optional[ElevatorConstraints] = None,
        sleep: Callable[[float], None] = time.sleep,
        write: Callable[[str], None] = print,
    ) -> None:
        self.elevator = elevator
        self.constraints = constraints or ElevatorConstraints()
        self.sleep = sleep
        self.write = write
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    def request_floor(self, floor: int) -> RequestOutcome:
        outcome = self.elevator.request(floor)
        self._emit("request", {"floor": floor, "outcome": outcome})
        if outcome is RequestOutcome.INVALID:
            logger.info("Rejected out-of-range request for floor %s", floor)
            self.write(f"Invalid floor request: {floor}")
            return outcome
        if outcome is RequestOutcome.DUPLICATE:
            logger.info("Rejected duplicate request for floor %s", floor)
            self.write(f"Floor {floor} already requested.")
            return outcome

        logger.info("Accepted request for floor %s", floor)
        self.process_requests()
        return outcome

    def request_floors(self, floors: Iterable[int]) -> List[RequestOutcome]:
        return [self.request_floor(floor) for floor in floors]

    def process_requests(self) -> None:
        while self.elevator.has_pending_requests():
            self.move()

    def move(self) -> Optional[int]:
        """Service the next queued request; return the floor reached, if any."""
        target = self.elevator.next_request()
        if target is None:
            self.write("No more requests, staying idle.")
            return None

        start = self.elevator.current_floor
        if self.elevator.head_towards(target) is Direction.IDLE:
            self.write(f"Already at floor {start}")
            if self.constraints.clear_same_floor_requests:
                self.elevator.arrive()
            else:
                logger.debug("Request for floor %s left flagged at its own floor", target)
            return None

        logger.info("Travelling %s from floor %s to floor %s", self.elevator.direction.name, start, target)
        for _ in plan_route(start, target):
            self.sleep(self.constraints.step_delay_seconds)
            floor = self.elevator.advance()
            self.print_elevator_status()
            self.write(f"Moving to floor {floor}...")
            logger.debug("Passed floor %s", floor)
            self._emit("step", {"floor": floor, "direction": self.elevator.direction})

        self.sleep(self.constraints.door_delay_seconds)
        self.write(f"Reached floor {self.elevator.current_floor}")
        self.elevator.arrive()
        self._emit("arrival", {"floor": target})
        return target

    def idle_time(self, seconds: float) -> None:
        self.write(f"Elevator is idle for {seconds} seconds.")
        logger.info("Idling for %s seconds", seconds)
        self.sleep(seconds)
        self._emit("idle", {"seconds": seconds})

    def print_elevator_status(self) -> None:
        for line in render_status(self.elevator.num_floors, self.elevator.current_floor):
            self.write(line)

    def view_status(self) -> None:
        self.write("")
        self.write("Current Elevator Status:")
        self.print_elevator_status()
        self.write(f"Floors visited so far: {format_floors(self.elevator.floors_visited)}")
        self.write(f"Request history (most recent last): {format_floors(self.elevator.request_history)}")

    def print_floors_visited(self) -> None:
        self.write(f"Floors visited: {format_floors(self.elevator.floors_visited)}")

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
