from __future__ import annotations

from typing import Dict, Type

from .fcfs import FirstComeFirstServedQueue
from .interface import Direction, RequestOutcome, RequestQueue
from .utils import plan_route, travel_direction

__all__ = [
    "Direction",
    "FirstComeFirstServedQueue",
    "RequestOutcome",
    "RequestQueue",
    "get_scheduler",
    "plan_route",
    "travel_direction",
]


SCHEDULER_REGISTRY: Dict[str, Type[RequestQueue]] = {
    "fcfs": FirstComeFirstServedQueue,
}


def get_scheduler(name: str, num_floors: int, **kwargs) -> RequestQueue:
    cls = SCHEDULER_REGISTRY.get(name.lower())
    if cls is None:
        raise ValueError(f"Unknown scheduler '{name}'. Available: {', '.join(SCHEDULER_REGISTRY)}")
    return cls(num_floors, **kwargs)
