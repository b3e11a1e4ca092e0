"""Main timer card.

Layout (top → bottom):
    - Phase indicator (STOPPED / SPEECH / DISCUSSION, one visible)
    - MM:SS clock
    - Phase progress bar
    - Speech / discussion duration inputs (seconds)
    - Start / Stop toggle
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QSignalBlocker
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QFormLayout,
    QLabel, QPushButton, QSpinBox, QFrame,
)

from ..timer.countdown import TimerSnapshot
from ..timer.session import SessionController, Phase, MIN_DURATION_SECONDS
from .progress_bar import PhaseProgressBar
from .styles import (
    PHASE_LABELS, WARNING_PERCENT, bar_color, elapsed_percent, format_clock,
)

MAX_DURATION_SECONDS = 99 * 60 + 59


class PhaseIndicator(QWidget):
    """One label per phase; only the current one is shown."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        row = QHBoxLayout(self)
        row.setContentsMargins(0, 0, 0, 0)
        row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._labels: dict[Phase, QLabel] = {}
        for phase in Phase:
            lbl = QLabel(PHASE_LABELS[phase], self)
            lbl.setObjectName("phaseLabel")
            lbl.setAlignment(Qt.AlignmentFlag.AlignCenter)
            self._labels[phase] = lbl
            row.addWidget(lbl)
        self.set_phase(Phase.STOPPED)

    def set_phase(self, phase: Phase) -> None:
        for p, lbl in self._labels.items():
            lbl.setVisible(p == phase)

    def visible_phase(self) -> Phase | None:
        for p, lbl in self._labels.items():
            if not lbl.isHidden():
                return p
        return None


class TimerWidget(QWidget):
    """Clock, progress bar, duration inputs and the start/stop toggle."""

    def __init__(
        self,
        controller: SessionController,
        parent: QWidget | None = None,
        *,
        warning_percent: float = WARNING_PERCENT,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._warning_percent = warning_percent
        self._build_ui()
        self._connect_signals()
        self._on_phase_changed(controller.phase, controller.snapshot())

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)

        card = QFrame(self)
        card.setObjectName("card")
        root.addWidget(card)

        layout = QVBoxLayout(card)
        layout.setContentsMargins(24, 20, 24, 24)
        layout.setSpacing(12)

        self._indicator = PhaseIndicator(card)
        layout.addWidget(self._indicator)

        self._clock = QLabel("00:00", card)
        self._clock.setObjectName("clockLabel")
        self._clock.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._clock)

        self._bar = PhaseProgressBar(card)
        layout.addWidget(self._bar)

        # ── duration inputs ──────────────────────────────────────────
        form = QFormLayout()
        self._speech_input = self._make_duration_input(
            card, self._controller.speech_duration,
        )
        self._discussion_input = self._make_duration_input(
            card, self._controller.discussion_duration,
        )
        form.addRow("Speech", self._speech_input)
        form.addRow("Discussion", self._discussion_input)
        layout.addLayout(form)

        # ── toggle ───────────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._toggle_btn = QPushButton("Start", card)
        self._toggle_btn.setObjectName("toggleButton")
        btn_row.addWidget(self._toggle_btn)
        layout.addLayout(btn_row)

    @staticmethod
    def _make_duration_input(parent: QWidget, value: int) -> QSpinBox:
        box = QSpinBox(parent)
        box.setRange(MIN_DURATION_SECONDS, MAX_DURATION_SECONDS)
        box.setSuffix(" s")
        box.setValue(value)
        # only commit on Enter / focus-out / arrow clicks
        box.setKeyboardTracking(False)
        return box

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._toggle_btn.clicked.connect(self._controller.toggle)
        self._speech_input.valueChanged.connect(
            self._controller.set_speech_duration
        )
        self._discussion_input.valueChanged.connect(
            self._controller.set_discussion_duration
        )

        self._controller.tick.connect(self._on_tick)
        self._controller.phase_changed.connect(self._on_phase_changed)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_phase_changed(self, phase: Phase, snapshot: TimerSnapshot) -> None:
        self._indicator.set_phase(phase)
        self._sync_inputs()
        self._refresh_button(snapshot.running)
        self._refresh_display(snapshot)

    def _sync_inputs(self) -> None:
        """Show the controller's durations without re-triggering a reset."""
        blockers = [
            QSignalBlocker(self._speech_input),
            QSignalBlocker(self._discussion_input),
        ]
        try:
            self._speech_input.setValue(self._controller.speech_duration)
            self._discussion_input.setValue(self._controller.discussion_duration)
        finally:
            for blocker in blockers:
                blocker.unblock()

    def _on_tick(self, snapshot: TimerSnapshot) -> None:
        self._refresh_display(snapshot)

    def _refresh_button(self, running: bool) -> None:
        self._toggle_btn.setText("Stop" if running else "Start")
        self._toggle_btn.setProperty("running", running)
        # re-polish so the [running="true"] selector applies
        self._toggle_btn.style().unpolish(self._toggle_btn)
        self._toggle_btn.style().polish(self._toggle_btn)

    def _refresh_display(self, snapshot: TimerSnapshot) -> None:
        self._clock.setText(format_clock(snapshot))
        elapsed = elapsed_percent(snapshot)
        self._bar.set_fill(
            elapsed,
            bar_color(self._controller.phase, elapsed, self._warning_percent),
        )

    # ── read-only accessors (shortcuts, tests) ────────────────────────────

    @property
    def clock_text(self) -> str:
        return self._clock.text()

    @property
    def button_text(self) -> str:
        return self._toggle_btn.text()

    @property
    def progress_bar(self) -> PhaseProgressBar:
        return self._bar

    @property
    def indicator(self) -> PhaseIndicator:
        return self._indicator

    @property
    def speech_input(self) -> QSpinBox:
        return self._speech_input

    @property
    def discussion_input(self) -> QSpinBox:
        return self._discussion_input

    def inputs_have_focus(self) -> bool:
        return self._speech_input.hasFocus() or self._discussion_input.hasFocus()
