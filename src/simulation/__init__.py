"""Simulation primitives for a single FIFO elevator car."""

from .config import ElevatorConstraints
from .elevator import Elevator
from .simulation import Simulation

__all__ = [
    "Elevator",
    "ElevatorConstraints",
    "Simulation",
]
