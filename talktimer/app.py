"""Main application window for TalkTimer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QKeySequence
from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from .settings import Settings, load_settings
from .timer.countdown import TimerSnapshot
from .timer.session import SessionController, Phase
from .ui.styles import PHASE_LABELS, build_stylesheet
from .ui.timer_widget import TimerWidget


logger = logging.getLogger(__name__)


class TalkTimerApp(QMainWindow):
    """Main application window."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self._settings: Settings = settings or load_settings()
        self.setWindowTitle("TalkTimer")
        self.resize(self._settings.window_width, self._settings.window_height)
        self.setStyleSheet(build_stylesheet())

        # ── controller ────────────────────────────────────────────────
        self._controller = SessionController(
            self._settings.speech_duration,
            self._settings.discussion_duration,
            parent=self,
        )
        self._controller.phase_changed.connect(self._on_phase_changed)

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 12, 16, 12)

        self._timer_widget = TimerWidget(
            self._controller, central,
            warning_percent=self._settings.warning_percent,
        )
        layout.addWidget(self._timer_widget)

        self._setup_shortcuts()
        self._apply_always_on_top(self._settings.always_on_top)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC
    # ══════════════════════════════════════════════════════════════════

    @property
    def controller(self) -> SessionController:
        return self._controller

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLLER SLOTS
    # ══════════════════════════════════════════════════════════════════

    def _on_phase_changed(self, phase: Phase, snapshot: TimerSnapshot) -> None:
        if phase == Phase.STOPPED:
            self.setWindowTitle("TalkTimer")
        else:
            self.setWindowTitle(f"TalkTimer: {PHASE_LABELS[phase].title()}")
        logger.info(
            "%s (%02d:%02d left)", phase.value, snapshot.minutes, snapshot.seconds,
        )

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW OPTIONS
    # ══════════════════════════════════════════════════════════════════

    def _toggle_always_on_top(self) -> None:
        self._settings.always_on_top = not self._settings.always_on_top
        self._apply_always_on_top(self._settings.always_on_top)

    def _apply_always_on_top(self, on_top: bool) -> None:
        was_visible = self.isVisible()
        self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, on_top)
        # setWindowFlag hides the window
        if was_visible:
            self.show()

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _setup_shortcuts(self) -> None:
        """Register Ctrl+Shift+T for always-on-top (Space/Esc via keyPressEvent)."""
        on_top = QAction("Always on Top", self)
        on_top.setShortcut(QKeySequence("Ctrl+Shift+T"))
        on_top.triggered.connect(self._toggle_always_on_top)
        self.addAction(on_top)

    def _on_space(self) -> None:
        """Start the speech phase, or stop whatever is running."""
        # No-op while the user is editing a duration
        if self._timer_widget.inputs_have_focus():
            return
        self._controller.toggle()

    def _on_escape(self) -> None:
        """Stop and re-arm (no-op when stopped)."""
        if self._controller.phase != Phase.STOPPED:
            self._controller.stop()

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/stop) and Escape (stop) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)
