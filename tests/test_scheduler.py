import pytest

from scheduler import (
    Direction,
    FirstComeFirstServedQueue,
    RequestOutcome,
    get_scheduler,
    plan_route,
    travel_direction,
)


class TestFirstComeFirstServedQueue:
    def test_dequeues_in_admission_order(self):
        queue = FirstComeFirstServedQueue(10)
        for floor in (7, 2, 9):
            assert queue.enqueue(floor) is RequestOutcome.ACCEPTED
        assert queue.pending() == [7, 2, 9]
        assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [7, 2, 9]
        assert queue.dequeue() is None

    @pytest.mark.parametrize("floor", [0, -1, 6])
    def test_rejects_out_of_range(self, floor):
        queue = FirstComeFirstServedQueue(5)
        assert queue.enqueue(floor) is RequestOutcome.INVALID
        assert len(queue) == 0
        assert not queue.is_requested(floor)

    def test_rejects_duplicate_until_completed(self):
        queue = FirstComeFirstServedQueue(5)
        queue.enqueue(3)
        assert queue.enqueue(3) is RequestOutcome.DUPLICATE
        assert queue.pending() == [3]

        queue.dequeue()
        # Flag survives dequeue; only completion frees the floor.
        assert queue.enqueue(3) is RequestOutcome.DUPLICATE
        queue.complete(3)
        assert queue.enqueue(3) is RequestOutcome.ACCEPTED

    def test_needs_at_least_one_floor(self):
        with pytest.raises(ValueError):
            FirstComeFirstServedQueue(0)


class TestRoutePlanning:
    def test_route_up(self):
        assert plan_route(1, 4) == [2, 3, 4]

    def test_route_down(self):
        assert plan_route(5, 2) == [4, 3, 2]

    def test_route_same_floor(self):
        assert plan_route(3, 3) == []

    def test_travel_direction(self):
        assert travel_direction(1, 3) is Direction.UP
        assert travel_direction(3, 1) is Direction.DOWN
        assert travel_direction(2, 2) is Direction.IDLE


def test_get_scheduler():
    queue = get_scheduler("FCFS", 4)
    assert isinstance(queue, FirstComeFirstServedQueue)
    assert queue.num_floors == 4


def test_get_scheduler_unknown():
    with pytest.raises(ValueError, match="Unknown scheduler"):
        get_scheduler("scan", 4)
