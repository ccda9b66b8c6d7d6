"""
Unit tests for the cooperative timer scheduler
"""

import pytest

from canvas_pong.core.scheduler import Scheduler


class TestScheduler:
    """Test one-shot and repeating timers on virtual time"""

    def test_call_later_fires_once_when_due(self):
        scheduler = Scheduler()
        calls = []
        scheduler.call_later(0.15, lambda: calls.append(scheduler.now))

        scheduler.advance(0.1)
        assert calls == []

        scheduler.advance(0.1)
        assert calls == [pytest.approx(0.15)]

        scheduler.advance(1.0)
        assert len(calls) == 1

    def test_clock_ends_at_target(self):
        scheduler = Scheduler()
        scheduler.call_later(0.05, lambda: None)
        scheduler.advance(0.2)
        assert scheduler.now == pytest.approx(0.2)

    def test_call_every_repeats(self):
        scheduler = Scheduler()
        ticks = []
        scheduler.call_every(0.1, lambda: ticks.append(1))

        fired = scheduler.advance(0.35)

        assert fired == 3
        assert len(ticks) == 3

    def test_repeating_timer_exact_steps(self):
        """Advancing by exactly one interval fires exactly one tick"""
        scheduler = Scheduler()
        ticks = []
        scheduler.call_every(1 / 60, lambda: ticks.append(1))

        for _ in range(120):
            scheduler.advance(1 / 60)

        assert len(ticks) == 120

    def test_cancel_prevents_runs(self):
        scheduler = Scheduler()
        calls = []
        handle = scheduler.call_every(0.1, lambda: calls.append(1))
        scheduler.advance(0.1)
        handle.cancel()
        scheduler.advance(1.0)
        assert calls == [1]
        assert scheduler.pending == 0

    def test_callback_can_cancel_its_own_timer(self):
        scheduler = Scheduler()
        calls = []
        handle = None

        def once() -> None:
            calls.append(1)
            handle.cancel()

        handle = scheduler.call_every(0.1, once)
        scheduler.advance(1.0)
        assert calls == [1]

    def test_due_order_then_creation_order(self):
        scheduler = Scheduler()
        order = []
        scheduler.call_later(0.2, lambda: order.append("late"))
        scheduler.call_later(0.1, lambda: order.append("first"))
        scheduler.call_later(0.1, lambda: order.append("second"))

        scheduler.advance(0.5)

        assert order == ["first", "second", "late"]

    def test_timer_scheduled_from_callback_runs_in_same_advance(self):
        scheduler = Scheduler()
        order = []
        scheduler.call_later(0.1, lambda: scheduler.call_later(0.1, lambda: order.append("nested")))
        scheduler.advance(0.5)
        assert order == ["nested"]

    def test_pending_counts_active_timers(self):
        scheduler = Scheduler()
        scheduler.call_later(1.0, lambda: None)
        handle = scheduler.call_every(0.5, lambda: None)
        assert scheduler.pending == 2
        handle.cancel()
        assert scheduler.pending == 1

    @pytest.mark.parametrize("interval", [0.0, -1.0])
    def test_invalid_interval(self, interval: float):
        with pytest.raises(ValueError):
            Scheduler().call_every(interval, lambda: None)

    def test_negative_delay(self):
        with pytest.raises(ValueError):
            Scheduler().call_later(-0.1, lambda: None)

    def test_negative_advance(self):
        with pytest.raises(ValueError):
            Scheduler().advance(-1.0)
