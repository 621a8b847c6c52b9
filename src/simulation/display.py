"""Plain-text rendering of elevator state."""

from __future__ import annotations

from typing import Iterable, List


def render_status(num_floors: int, current_floor: int) -> List[str]:
    """Return the floor grid, top floor first, marking the car's floor."""

    lines = ["", "Elevator Status:"]
    for floor in range(num_floors, 0, -1):
        if floor == current_floor:
            lines.append(f"[ {floor} ] <-- Elevator")
        else:
            lines.append(f"[ {floor} ]")
    lines.append("")
    return lines


def format_floors(floors: Iterable[int]) -> str:
    return " ".join(str(floor) for floor in floors)


def centered(text: str, width: int) -> str:
    padding = max(0, (width - len(text)) // 2)
    return " " * padding + text
