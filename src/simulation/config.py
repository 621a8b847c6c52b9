from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ElevatorConstraints:
    """Timings and service policy applied by the simulation layer."""

    step_delay_seconds: float = 0.5
    door_delay_seconds: float = 1.0
    # A request for the floor the car already stands on is consumed without
    # clearing its flag unless this is set.
    clear_same_floor_requests: bool = False
