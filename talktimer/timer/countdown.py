"""Single countdown driven by a repeating QTimer.

A ``CountdownTimer`` knows nothing about speech or discussion phases.
It counts ``remaining_ms`` down from ``limit_ms`` in fixed 50 ms steps
and stops itself for good when it reaches zero.

Lifecycle
---------
created  → running   (start)
running  → stopped   (stop; may be started again while time is left)
running  → expired   (remaining reaches 0; terminal for this instance)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple

from PyQt6.QtCore import QObject, Qt, QTimer, pyqtSignal

from .errors import InvalidDurationError


logger = logging.getLogger(__name__)

TICK_INTERVAL_MS = 50


# ── value types ───────────────────────────────────────────────────────────


class Remaining(NamedTuple):
    minutes: int
    seconds: int
    milliseconds: int


@dataclass(frozen=True)
class TimerSnapshot:
    """Everything a view needs to draw one frame."""

    minutes: int
    seconds: int
    milliseconds: int
    progress: float
    running: bool


def _to_millis(limit_seconds: float) -> int:
    if isinstance(limit_seconds, bool) or not isinstance(limit_seconds, (int, float)):
        raise InvalidDurationError(
            f"duration must be a number of seconds, got {limit_seconds!r}"
        )
    if limit_seconds < 0:
        raise InvalidDurationError(
            f"duration must not be negative, got {limit_seconds!r}"
        )
    return int(round(limit_seconds * 1000))


# ── timer ─────────────────────────────────────────────────────────────────


class CountdownTimer(QObject):
    """Millisecond countdown ticking every ``TICK_INTERVAL_MS``.

    Signals
    -------
    ticked(timer: CountdownTimer)
        Emitted once per tick, after ``remaining_ms`` is updated.  On the
        terminal tick the timer is already stopped.
    expired()
        Emitted right after the terminal tick.
    """

    ticked = pyqtSignal(object)
    expired = pyqtSignal()

    def __init__(self, limit_seconds: float, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._limit_ms: int = _to_millis(limit_seconds)
        self._remaining_ms: int = self._limit_ms
        self._on_tick_cb: Callable[[CountdownTimer], None] | None = None

        self._qt_timer = QTimer(self)
        self._qt_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._qt_timer.setInterval(TICK_INTERVAL_MS)
        self._qt_timer.timeout.connect(self._on_tick)

    def __repr__(self) -> str:
        return (
            f"<CountdownTimer remaining={self._remaining_ms}/{self._limit_ms}ms "
            f"running={self.is_started()}>"
        )

    # ── properties ────────────────────────────────────────────────────────

    @property
    def limit_ms(self) -> int:
        return self._limit_ms

    @property
    def remaining_ms(self) -> int:
        return self._remaining_ms

    @property
    def is_expired(self) -> bool:
        return self._remaining_ms <= 0

    # ── controls ──────────────────────────────────────────────────────────

    def start(self, on_tick: Callable[[CountdownTimer], None] | None = None) -> None:
        """Begin ticking.  Ignored if already running or already expired."""
        if self.is_started():
            logger.debug("start ignored, %r already running", self)
            return
        if self.is_expired:
            logger.debug("start ignored, %r already expired", self)
            return
        if on_tick is not None:
            self._on_tick_cb = on_tick
        self._qt_timer.start()

    def stop(self) -> None:
        """Halt ticking.  Safe to call when already stopped."""
        self._qt_timer.stop()

    def is_started(self) -> bool:
        return self._qt_timer.isActive()

    def is_stopped(self) -> bool:
        return not self.is_started()

    # ── queries ───────────────────────────────────────────────────────────

    def get_remaining(self) -> Remaining:
        total_seconds = self._remaining_ms // 1000
        return Remaining(
            minutes=total_seconds // 60,
            seconds=total_seconds % 60,
            milliseconds=self._remaining_ms % 1000,
        )

    def get_progress(self) -> float:
        """Fraction of time left: 1.0 when fresh, 0.0 when expired."""
        if self._limit_ms <= 0:
            return 0.0
        return self._remaining_ms / self._limit_ms

    def snapshot(self) -> TimerSnapshot:
        minutes, seconds, milliseconds = self.get_remaining()
        return TimerSnapshot(
            minutes=minutes,
            seconds=seconds,
            milliseconds=milliseconds,
            progress=self.get_progress(),
            running=self.is_started(),
        )

    # ── internal ──────────────────────────────────────────────────────────

    def _on_tick(self) -> None:
        if self.is_stopped():
            # only reachable by invoking the slot directly after stop()
            logger.warning("tick ignored, %r is not running", self)
            return

        self._remaining_ms -= TICK_INTERVAL_MS
        if self._remaining_ms <= 0:
            self._remaining_ms = 0
            self._qt_timer.stop()

        if self._on_tick_cb is not None:
            self._on_tick_cb(self)
        self.ticked.emit(self)

        if self._remaining_ms == 0:
            self.expired.emit()
