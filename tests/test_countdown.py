"""Tests for the single-phase CountdownTimer.

Covers: creation, tick arithmetic, terminal tick ordering, stop/restart,
remaining-time decomposition, progress, duration validation, and a
real-scheduler run through the Qt event loop.
"""

import pytest
from PyQt6.QtTest import QTest

from talktimer.timer.countdown import (
    CountdownTimer, Remaining, TimerSnapshot, TICK_INTERVAL_MS,
)
from talktimer.timer.errors import InvalidDurationError

from helpers import SignalCollector, run_ticks, expire


pytestmark = pytest.mark.usefixtures("qapp")


# ═══════════════════════════════════════════════════════════════════════════
#  CREATION
# ═══════════════════════════════════════════════════════════════════════════


class TestCreation:

    @pytest.mark.parametrize("seconds, expected", [
        (1, Remaining(0, 1, 0)),
        (59, Remaining(0, 59, 0)),
        (60, Remaining(1, 0, 0)),
        (90, Remaining(1, 30, 0)),
        (3599, Remaining(59, 59, 0)),
    ])
    def test_fresh_timer_decomposes_limit(self, seconds, expected):
        timer = CountdownTimer(seconds)
        assert timer.get_remaining() == expected
        assert timer.get_progress() == 1.0

    def test_limit_in_millis(self):
        timer = CountdownTimer(3)
        assert timer.limit_ms == 3000
        assert timer.remaining_ms == 3000

    def test_fractional_limit(self):
        timer = CountdownTimer(1.5)
        assert timer.limit_ms == 1500
        assert timer.get_remaining() == Remaining(0, 1, 500)

    def test_not_running_after_creation(self):
        timer = CountdownTimer(10)
        assert timer.is_stopped()
        assert not timer.is_started()

    def test_zero_limit_is_already_expired(self):
        timer = CountdownTimer(0)
        assert timer.is_expired
        assert timer.get_progress() == 0.0

    @pytest.mark.parametrize("bad", [-1, -0.5, "60", None, True])
    def test_invalid_limit_rejected(self, bad):
        with pytest.raises(InvalidDurationError):
            CountdownTimer(bad)

    def test_invalid_duration_is_value_error(self):
        with pytest.raises(ValueError):
            CountdownTimer(-5)


# ═══════════════════════════════════════════════════════════════════════════
#  TICKING
# ═══════════════════════════════════════════════════════════════════════════


class TestTicking:

    def test_start_runs(self):
        timer = CountdownTimer(5)
        timer.start()
        assert timer.is_started()
        assert not timer.is_stopped()
        timer.stop()

    def test_tick_decrements_by_step(self):
        timer = CountdownTimer(5)
        timer.start()
        run_ticks(timer, 1)
        assert timer.remaining_ms == 5000 - TICK_INTERVAL_MS
        timer.stop()

    def test_callback_receives_timer_each_tick(self):
        seen = []
        timer = CountdownTimer(5)
        timer.start(seen.append)
        run_ticks(timer, 3)
        assert seen == [timer, timer, timer]
        timer.stop()

    def test_ticked_signal_fires_once_per_tick(self):
        c = SignalCollector()
        timer = CountdownTimer(5)
        timer.ticked.connect(c)
        timer.start()
        run_ticks(timer, 4)
        assert len(c) == 4
        assert c.last is timer
        timer.stop()

    def test_remaining_strictly_decreases_to_zero(self):
        values = []
        timer = CountdownTimer(1)
        timer.start(lambda t: values.append(t.remaining_ms))
        run_ticks(timer, 1000 // TICK_INTERVAL_MS)

        assert values[-1] == 0
        assert all(a > b for a, b in zip(values, values[1:]))
        assert len(values) == 20
        assert timer.is_stopped()

    def test_terminal_tick_sees_zero_and_not_running(self):
        seen = []
        timer = CountdownTimer(1)
        timer.start(lambda t: seen.append((t.remaining_ms, t.is_started())))
        expire(timer)
        assert seen[-1] == (0, False)

    def test_remaining_clamped_at_zero(self):
        timer = CountdownTimer(0.03)  # less than one step
        timer.start()
        run_ticks(timer, 1)
        assert timer.remaining_ms == 0
        assert timer.get_progress() == 0.0

    def test_expired_signal_after_terminal_tick(self):
        order = []
        timer = CountdownTimer(1)
        timer.ticked.connect(lambda t: order.append("tick"))
        timer.expired.connect(lambda: order.append("expired"))
        timer.start()
        expire(timer)
        assert order == ["tick", "expired"]

    def test_no_ticks_after_expiry(self):
        c = SignalCollector()
        timer = CountdownTimer(1)
        timer.ticked.connect(c)
        timer.start()
        expire(timer)
        count = len(c)
        run_ticks(timer, 3)
        assert len(c) == count
        assert timer.remaining_ms == 0

    def test_start_after_expiry_is_noop(self):
        timer = CountdownTimer(1)
        timer.start()
        expire(timer)
        timer.start()
        assert timer.is_stopped()

    def test_double_start_is_noop(self):
        seen = []
        timer = CountdownTimer(5)
        timer.start(seen.append)
        timer.start(lambda t: pytest.fail("second callback installed"))
        run_ticks(timer, 1)
        assert len(seen) == 1
        timer.stop()


# ═══════════════════════════════════════════════════════════════════════════
#  STOP
# ═══════════════════════════════════════════════════════════════════════════


class TestStop:

    def test_stop_freezes_remaining(self):
        timer = CountdownTimer(5)
        timer.start()
        run_ticks(timer, 7)
        timer.stop()
        frozen = timer.remaining_ms
        run_ticks(timer, 5)  # ignored while stopped
        assert timer.remaining_ms == frozen
        assert not timer.is_started()

    def test_stop_is_idempotent(self):
        timer = CountdownTimer(5)
        timer.stop()
        timer.start()
        timer.stop()
        timer.stop()
        assert timer.is_stopped()

    def test_restart_after_stop_continues(self):
        timer = CountdownTimer(5)
        timer.start()
        run_ticks(timer, 2)
        timer.stop()
        timer.start()
        run_ticks(timer, 2)
        assert timer.remaining_ms == 5000 - 4 * TICK_INTERVAL_MS
        timer.stop()


# ═══════════════════════════════════════════════════════════════════════════
#  QUERIES
# ═══════════════════════════════════════════════════════════════════════════


class TestQueries:

    def test_remaining_truncates(self):
        timer = CountdownTimer(61)
        timer.start()
        run_ticks(timer, 3)  # 60 850 ms left
        assert timer.get_remaining() == Remaining(1, 0, 850)
        timer.stop()

    def test_progress_halfway(self):
        timer = CountdownTimer(1)
        timer.start()
        run_ticks(timer, 10)
        assert timer.get_progress() == pytest.approx(0.5)
        timer.stop()

    def test_snapshot(self):
        timer = CountdownTimer(2)
        timer.start()
        run_ticks(timer, 1)
        snap = timer.snapshot()
        assert snap == TimerSnapshot(
            minutes=0, seconds=1, milliseconds=950,
            progress=pytest.approx(0.975), running=True,
        )
        timer.stop()
        assert timer.snapshot().running is False


# ═══════════════════════════════════════════════════════════════════════════
#  REAL SCHEDULER
# ═══════════════════════════════════════════════════════════════════════════


class TestEventLoop:

    def test_runs_to_completion_on_qtimer(self):
        c = SignalCollector()
        timer = CountdownTimer(0.2)
        timer.ticked.connect(c)
        timer.start()
        QTest.qWait(600)

        assert timer.remaining_ms == 0
        assert timer.is_stopped()
        assert len(c) == 4
        assert c.last.remaining_ms == 0

    def test_stop_cancels_pending_ticks(self):
        c = SignalCollector()
        timer = CountdownTimer(5)
        timer.ticked.connect(c)
        timer.start()
        timer.stop()
        QTest.qWait(200)
        assert len(c) == 0
        assert timer.remaining_ms == 5000
