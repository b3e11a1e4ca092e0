"""Speech / discussion phase state machine.

States
------
STOPPED      Ready speech timer built but not ticking.
SPEECH       Speech timer counting down.
DISCUSSION   Discussion timer counting down.

Transitions
-----------
STOPPED → STOPPED              (initialize / settings changed)
STOPPED → SPEECH               (start, toggle)
SPEECH → DISCUSSION            (speech timer expires)
DISCUSSION → STOPPED           (discussion timer expires; re-armed)
SPEECH | DISCUSSION → STOPPED  (stop, toggle, settings changed)

Speech expiry hands straight over to a running discussion timer, while
discussion expiry re-arms a fresh speech timer and waits for the next
speaker.
"""

from __future__ import annotations

import logging
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from .countdown import CountdownTimer, TimerSnapshot
from .errors import InvalidDurationError, StaleTickError


logger = logging.getLogger(__name__)


# ── enums / constants ─────────────────────────────────────────────────────


class Phase(Enum):
    STOPPED = "stopped"
    SPEECH = "speech"
    DISCUSSION = "discussion"


DEFAULT_SPEECH_SECONDS = 5 * 60
DEFAULT_DISCUSSION_SECONDS = 2 * 60
MIN_DURATION_SECONDS = 1


def validate_duration(seconds: int, name: str = "duration") -> int:
    """Return *seconds* if it is a whole number of seconds >= 1."""
    if isinstance(seconds, bool) or not isinstance(seconds, int):
        raise InvalidDurationError(
            f"{name} must be a whole number of seconds, got {seconds!r}"
        )
    if seconds < MIN_DURATION_SECONDS:
        raise InvalidDurationError(
            f"{name} must be at least {MIN_DURATION_SECONDS}s, got {seconds}"
        )
    return seconds


# ── controller ────────────────────────────────────────────────────────────


class SessionController(QObject):
    """Owns the phase and the one live ``CountdownTimer``.

    Signals
    -------
    phase_changed(phase: Phase, snapshot: TimerSnapshot)
        Emitted on every transition, including re-initialization while
        already STOPPED so views can pick up new durations.
    tick(snapshot: TimerSnapshot)
        Emitted for every tick of the current timer.
    """

    phase_changed = pyqtSignal(object, object)
    tick = pyqtSignal(object)

    def __init__(
        self,
        speech_seconds: int = DEFAULT_SPEECH_SECONDS,
        discussion_seconds: int = DEFAULT_DISCUSSION_SECONDS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._speech_seconds = validate_duration(speech_seconds, "speech duration")
        self._discussion_seconds = validate_duration(
            discussion_seconds, "discussion duration"
        )
        self._phase: Phase = Phase.STOPPED
        self._timer: CountdownTimer | None = None
        self.initialize()

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def phase(self) -> Phase:
        return self._phase

    @property
    def timer(self) -> CountdownTimer:
        """The current timer: ready speech timer when STOPPED."""
        return self._timer

    @property
    def speech_duration(self) -> int:
        return self._speech_seconds

    @property
    def discussion_duration(self) -> int:
        return self._discussion_seconds

    @property
    def is_running(self) -> bool:
        return self._timer is not None and self._timer.is_started()

    def snapshot(self) -> TimerSnapshot:
        return self._timer.snapshot()

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def initialize(
        self,
        speech_seconds: int | None = None,
        discussion_seconds: int | None = None,
    ) -> None:
        """Tear down any running phase and arm a fresh speech timer."""
        if speech_seconds is not None:
            self._speech_seconds = validate_duration(speech_seconds, "speech duration")
        if discussion_seconds is not None:
            self._discussion_seconds = validate_duration(
                discussion_seconds, "discussion duration"
            )
        self._install_timer(CountdownTimer(self._speech_seconds, self))
        self._set_phase(Phase.STOPPED)

    def start(self) -> None:
        """Start the speech phase.  Only valid from STOPPED."""
        if self._phase != Phase.STOPPED:
            return
        self._timer.start()
        self._set_phase(Phase.SPEECH)

    def stop(self) -> None:
        """Abandon the running phase and re-arm; there is no resume."""
        self.initialize()

    def toggle(self) -> None:
        """Single start/stop control, multiplexed on the running state."""
        if self._timer.is_started():
            self.stop()
        else:
            self.start()

    def set_speech_duration(self, seconds: int) -> None:
        self._speech_seconds = validate_duration(seconds, "speech duration")
        self.initialize()

    def set_discussion_duration(self, seconds: int) -> None:
        self._discussion_seconds = validate_duration(seconds, "discussion duration")
        self.initialize()

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL
    # ══════════════════════════════════════════════════════════════════

    def _install_timer(self, timer: CountdownTimer) -> None:
        """Swap in *timer*; the old one is stopped and unhooked first."""
        old = self._timer
        if old is not None:
            try:
                old.stop()
                old.ticked.disconnect(self._on_timer_tick)
            finally:
                old.deleteLater()
        timer.ticked.connect(self._on_timer_tick)
        self._timer = timer

    def _on_timer_tick(self, timer: CountdownTimer) -> None:
        if timer is not self._timer:
            raise StaleTickError(f"tick from released timer {timer!r}")

        self.tick.emit(timer.snapshot())
        if timer is not self._timer:
            # an observer already moved the session on
            return
        if timer.is_expired:
            self._on_expired()

    def _on_expired(self) -> None:
        if self._phase == Phase.SPEECH:
            self._install_timer(CountdownTimer(self._discussion_seconds, self))
            self._timer.start()
            self._set_phase(Phase.DISCUSSION)
        else:
            self.initialize()

    def _set_phase(self, phase: Phase) -> None:
        logger.debug("phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase
        self.phase_changed.emit(phase, self._timer.snapshot())
