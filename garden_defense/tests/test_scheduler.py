"""
Tests for the simulation-time scheduler.
"""
import pytest
from garden_defense.gameplay.scheduler import Scheduler


class TestScheduler:
    """Tests for Scheduler class."""

    def test_fires_when_due(self):
        """A callback fires once its delay has elapsed, not before."""
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(1.0, lambda: fired.append("a"))

        scheduler.advance(0.5)
        assert fired == []

        scheduler.advance(0.5)
        assert fired == ["a"]

        scheduler.advance(5.0)
        assert fired == ["a"]

    def test_fires_in_due_order(self):
        """Callbacks fire by due time, ties broken by schedule order."""
        scheduler = Scheduler()
        fired = []
        scheduler.schedule(2.0, lambda: fired.append("late"))
        scheduler.schedule(1.0, lambda: fired.append("first"))
        scheduler.schedule(1.0, lambda: fired.append("second"))

        assert scheduler.advance(3.0) == 3
        assert fired == ["first", "second", "late"]

    def test_cancel(self):
        """Cancelled callbacks never fire."""
        scheduler = Scheduler()
        fired = []
        call = scheduler.schedule(1.0, lambda: fired.append("x"))

        call.cancel()
        scheduler.advance(2.0)

        assert fired == []
        assert not call.pending

    def test_pending_count_by_tag(self):
        """Pending callbacks can be counted per tag."""
        scheduler = Scheduler()
        scheduler.schedule(1.0, lambda: None, tag="spawn")
        scheduler.schedule(2.0, lambda: None, tag="spawn")
        scheduler.schedule(1.5, lambda: None, tag="arm")

        assert scheduler.pending_count() == 3
        assert scheduler.pending_count("spawn") == 2

        scheduler.advance(1.2)
        assert scheduler.pending_count("spawn") == 1
        assert len(scheduler) == 2

    def test_cancel_all(self):
        """cancel_all drops every pending callback."""
        scheduler = Scheduler()
        fired = []
        calls = [scheduler.schedule(i * 0.5, lambda: fired.append(1)) for i in range(1, 4)]

        assert scheduler.cancel_all() == 3
        scheduler.advance(10.0)

        assert fired == []
        assert all(c.cancelled for c in calls)
        assert len(scheduler) == 0

    def test_callback_can_schedule(self):
        """A callback may schedule more work; zero-delay work runs in the same advance."""
        scheduler = Scheduler()
        fired = []

        def chain():
            fired.append("outer")
            scheduler.schedule(0.0, lambda: fired.append("inner"))

        scheduler.schedule(0.5, chain)
        scheduler.advance(1.0)

        assert fired == ["outer", "inner"]

    def test_clock_advances(self):
        """now tracks total simulated time."""
        scheduler = Scheduler()
        scheduler.advance(0.25)
        scheduler.advance(0.5)
        assert scheduler.now == pytest.approx(0.75)
