import pytest

from simulation import Elevator, ElevatorConstraints, Simulation


class RecordingClock:
    def __init__(self):
        self.calls = []

    def __call__(self, seconds):
        self.calls.append(seconds)

    @property
    def total(self):
        return sum(self.calls)


@pytest.fixture
def clock():
    return RecordingClock()


@pytest.fixture
def output():
    return []


@pytest.fixture
def make_simulation(clock, output):
    def factory(num_floors=5, **constraint_options):
        constraints = ElevatorConstraints(**constraint_options)
        return Simulation(
            Elevator(num_floors),
            constraints=constraints,
            sleep=clock,
            write=output.append,
        )

    return factory


@pytest.fixture
def simulation(make_simulation):
    return make_simulation()
