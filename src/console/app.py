"""Interactive console for the single-car elevator simulation."""
from __future__ import annotations

import argparse
import logging
from typing import Callable, List, Optional, Sequence

from pydantic import BaseModel, NonNegativeInt, PositiveInt, ValidationError, field_validator

from simulation import Elevator, ElevatorConstraints, Simulation
from simulation.display import centered

logger = logging.getLogger(__name__)

TERMINAL_WIDTH = 50

BANNER = [
    "*",
    "*                     *",
    "* Welcome to the      *",
    "* Elevator Simulation *",
    "*                     *",
    "*",
]

MENU = [
    "",
    "Options:",
    "1. Enter a single floor request",
    "2. Enter multiple floor requests (comma-separated)",
    "3. Simulate idle time",
    "4. View elevator status",
    "q. Quit",
]


class BuildingSetup(BaseModel):
    num_floors: PositiveInt


class FloorRequest(BaseModel):
    floor: int


class FloorBatchRequest(BaseModel):
    floors: List[int]

    @field_validator("floors", mode="before")
    @classmethod
    def split_line(cls, value: object) -> object:
        if isinstance(value, str):
            return [token.strip() for token in value.split(",") if token.strip()]
        return value


class IdleRequest(BaseModel):
    seconds: NonNegativeInt


class ConsoleSession:
    """Reads menu choices and forwards them to a :class:`Simulation`."""

    def __init__(
        self,
        simulation: Optional[Simulation] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
        constraints: Optional[ElevatorConstraints] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.simulation = simulation
        self.read = read
        self.write = write
        self.constraints = constraints
        self.sleep = sleep

    def print_banner(self) -> None:
        self.write("\n")
        for line in BANNER:
            self.write(centered(line, TERMINAL_WIDTH))
        self.write("\n")

    def setup(self, num_floors: Optional[int] = None) -> Simulation:
        setup: Optional[BuildingSetup] = None
        if num_floors is not None:
            try:
                setup = BuildingSetup(num_floors=num_floors)
            except ValidationError as exc:
                self._report_invalid(exc)
        while setup is None:
            raw = self.read("Enter the number of floors in the building: ")
            try:
                setup = BuildingSetup(num_floors=raw.strip())
            except ValidationError as exc:
                self._report_invalid(exc)

        options = {"write": self.write}
        if self.constraints is not None:
            options["constraints"] = self.constraints
        if self.sleep is not None:
            options["sleep"] = self.sleep
        self.simulation = Simulation(Elevator(setup.num_floors), **options)
        logger.info("Started simulation with %s floors", setup.num_floors)
        return self.simulation

    def run(self, num_floors: Optional[int] = None) -> None:
        self.print_banner()
        try:
            if self.simulation is None:
                self.setup(num_floors)
            self.loop()
        except EOFError:
            logger.info("Input closed, ending simulation")
        self.finish()

    def loop(self) -> None:
        while True:
            for line in MENU:
                self.write(line)
            choice = self.read("Choose an option: ").strip()
            if choice == "q":
                return
            self.handle(choice)

    def handle(self, choice: str) -> None:
        try:
            if choice == "1":
                raw = self.read("Enter floor number to go to: ")
                request = FloorRequest(floor=raw.strip())
                self.simulation.request_floor(request.floor)
            elif choice == "2":
                raw = self.read("Enter floor numbers to go to (comma-separated): ")
                batch = FloorBatchRequest(floors=raw)
                self.simulation.request_floors(batch.floors)
            elif choice == "3":
                raw = self.read("Enter idle time in seconds: ")
                idle = IdleRequest(seconds=raw.strip())
                self.simulation.idle_time(idle.seconds)
            elif choice == "4":
                self.simulation.view_status()
            else:
                self.write("Invalid option. Please try again.")
        except ValidationError as exc:
            self._report_invalid(exc)

    def finish(self) -> None:
        self.write("\n*** Simulation ended. Floors visited: ***")
        if self.simulation is not None:
            self.simulation.print_floors_visited()

    def _report_invalid(self, exc: ValidationError) -> None:
        logger.info("Rejected console input: %s", exc.errors(include_url=False))
        message = "; ".join(error["msg"] for error in exc.errors())
        self.write(f"Invalid input: {message}")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--floors",
        type=int,
        help="Number of floors in the building; prompted for when omitted",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log simulation events to stderr (repeat for more detail)",
    )
    return parser.parse_args(argv)


LOG_HANDLER_NAME = "floorqueue-console"


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    root = logging.getLogger()
    root.setLevel(level)
    if any(h.get_name() == LOG_HANDLER_NAME for h in root.handlers):
        return
    handler = logging.StreamHandler()
    handler.set_name(LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    root.addHandler(handler)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)
    if args.floors is not None and args.floors < 1:
        logger.error("--floors must be a positive integer, got %s", args.floors)
        return 2
    ConsoleSession().run(args.floors)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
