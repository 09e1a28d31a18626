"""Tests for the virtual-time scheduler and the round countdown."""

import pytest

from whiz_app.core.services.round_timer import RoundTimer
from whiz_app.core.services.scheduler import VirtualScheduler


def test_callbacks_fire_in_due_order():
    scheduler = VirtualScheduler()
    fired = []
    scheduler.call_later(2.0, lambda: fired.append("late"))
    scheduler.call_later(1.0, lambda: fired.append("early"))
    scheduler.call_later(1.0, lambda: fired.append("early-second"))

    scheduler.advance(0.5)
    assert fired == []
    scheduler.advance(2.0)
    assert fired == ["early", "early-second", "late"]
    assert scheduler.now == pytest.approx(2.5)


def test_cancelled_call_never_fires():
    scheduler = VirtualScheduler()
    fired = []
    call = scheduler.call_later(1.0, lambda: fired.append(True))
    call.cancel()
    scheduler.advance(5.0)
    assert fired == []
    assert not call.is_active()
    assert scheduler.pending_count() == 0


def test_calls_scheduled_while_advancing_run_in_same_window():
    scheduler = VirtualScheduler()
    fired = []

    def first():
        fired.append(scheduler.now)
        scheduler.call_later(1.0, lambda: fired.append(scheduler.now))

    scheduler.call_later(1.0, first)
    scheduler.advance(3.0)
    assert fired == [1.0, 2.0]


def test_negative_delays_are_rejected():
    scheduler = VirtualScheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-1.0, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-0.1)


def test_round_timer_counts_down_and_expires_once():
    scheduler = VirtualScheduler()
    ticks = []
    expirations = []
    timer = RoundTimer(scheduler, on_expire=lambda: expirations.append(scheduler.now), on_tick=ticks.append)

    timer.start()
    assert timer.remaining_seconds == 15
    assert timer.is_running()

    scheduler.advance(5.0)
    assert timer.remaining_seconds == 10
    assert expirations == []

    scheduler.advance(30.0)
    assert ticks == list(range(14, -1, -1))
    assert expirations == [15.0]
    assert timer.remaining_seconds == 0
    assert not timer.is_running()


def test_cancelled_round_timer_does_not_expire():
    scheduler = VirtualScheduler()
    expirations = []
    timer = RoundTimer(scheduler, on_expire=lambda: expirations.append(True))
    timer.start()
    scheduler.advance(14.5)
    timer.cancel()
    scheduler.advance(10.0)
    assert expirations == []
    assert timer.remaining_seconds == 1


def test_restart_resets_remaining_time():
    scheduler = VirtualScheduler()
    expirations = []
    timer = RoundTimer(scheduler, on_expire=lambda: expirations.append(scheduler.now), duration_seconds=3)
    timer.start()
    scheduler.advance(2.0)
    timer.start()
    assert timer.remaining_seconds == 3
    scheduler.advance(3.0)
    assert expirations == [5.0]
