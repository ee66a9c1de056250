"""
Scheduler Tests

Tests for simulated-time periodic timers and their handles.
"""

import pytest

from bullseye.scheduler import Scheduler


class TestEvery:
    """Test registering periodic callbacks."""

    def test_first_run_after_one_interval(self, scheduler):
        calls = []
        scheduler.every(1.0, lambda: calls.append(scheduler.now))
        scheduler.advance(0.999)
        assert calls == []
        scheduler.advance(0.001)
        assert calls == [1.0]

    def test_runs_once_per_interval(self, scheduler):
        calls = []
        scheduler.every(0.5, lambda: calls.append(scheduler.now))
        executed = scheduler.advance(2.0)
        assert executed == 4
        assert calls == [0.5, 1.0, 1.5, 2.0]
        assert scheduler.now == 2.0

    @pytest.mark.parametrize('interval', [0.0, -1.0])
    def test_rejects_non_positive_interval(self, scheduler, interval):
        with pytest.raises(ValueError):
            scheduler.every(interval, lambda: None)

    def test_small_steps_do_not_drift(self, scheduler):
        calls = []
        scheduler.every(1.0, lambda: calls.append(1))
        for _ in range(60):
            scheduler.advance(1 / 60)
        assert len(calls) == 1

    def test_due_order_then_registration_order(self, scheduler):
        order = []
        scheduler.every(1.0, lambda: order.append('slow'))
        scheduler.every(0.25, lambda: order.append('fast'))
        scheduler.every(1.0, lambda: order.append('slow2'))
        scheduler.advance(1.0)
        # At t=1.0 all three are due; ties go by registration
        assert order == ['fast', 'fast', 'fast', 'slow', 'fast', 'slow2']

    def test_negative_advance_rejected(self, scheduler):
        with pytest.raises(ValueError):
            scheduler.advance(-0.1)


class TestCancel:
    """Test cancelling handles."""

    def test_cancelled_handle_never_runs_again(self, scheduler):
        calls = []
        handle = scheduler.every(1.0, lambda: calls.append(1))
        scheduler.advance(1.0)
        handle.cancel()
        scheduler.advance(10.0)
        assert calls == [1]
        assert not handle.active
        assert scheduler.active_handles == []

    def test_cancel_is_idempotent(self, scheduler):
        handle = scheduler.every(1.0, lambda: None)
        scheduler.cancel(handle)
        scheduler.cancel(handle)
        handle.cancel()
        scheduler.cancel(None)
        assert scheduler.active_handles == []

    def test_callback_can_cancel_itself(self, scheduler):
        calls = []

        def once():
            calls.append(scheduler.now)
            handle.cancel()

        handle = scheduler.every(0.1, once)
        scheduler.advance(1.0)
        assert calls == [pytest.approx(0.1)]

    def test_callback_can_cancel_another(self, scheduler):
        calls = []
        victim = scheduler.every(1.0, lambda: calls.append('victim'))
        scheduler.every(0.5, lambda: victim.cancel())
        scheduler.advance(2.0)
        assert calls == []

    def test_cancel_all(self, scheduler):
        scheduler.every(1.0, lambda: None)
        scheduler.every(2.0, lambda: None)
        assert scheduler.cancel_all() == 2
        assert scheduler.advance(5.0) == 0


class TestHandles:

    def test_handle_counts_runs(self, scheduler):
        handle = scheduler.every(0.25, lambda: None, name='arrow')
        scheduler.advance(1.0)
        assert handle.runs == 4
        assert handle.name == 'arrow'

    def test_handle_started_inside_callback_runs_in_same_window(self, scheduler):
        calls = []

        def spawn():
            scheduler.every(0.25, lambda: calls.append(scheduler.now))
            starter.cancel()

        starter = scheduler.every(0.5, spawn)
        scheduler.advance(1.0)
        assert calls == [pytest.approx(0.75), pytest.approx(1.0)]

    def test_start_time(self):
        scheduler = Scheduler(start_time=10.0)
        calls = []
        scheduler.every(1.0, lambda: calls.append(scheduler.now))
        scheduler.advance(1.0)
        assert calls == [11.0]
