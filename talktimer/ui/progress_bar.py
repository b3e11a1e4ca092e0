"""Horizontal phase progress bar rendered with QPainter.

- Fills left → right as the phase uses up its time.
- Blue during speech, green during discussion, red near the end.
- Empty whenever no timer is ticking.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QRectF
from PyQt6.QtGui import QPainter, QColor
from PyQt6.QtWidgets import QWidget, QSizePolicy

from .styles import PALETTE, PHASE_COLORS
from ..timer.session import Phase


class PhaseProgressBar(QWidget):
    """Custom-painted bar; ``percent`` is 0..100 elapsed."""

    BAR_HEIGHT = 14
    CORNER_RADIUS = 7

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumHeight(self.BAR_HEIGHT)
        self.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed,
        )

        self._percent: float = 0.0
        self._fill_color = QColor(PHASE_COLORS[Phase.STOPPED])
        self._track_color = QColor(PALETTE["surface"])

    # ── public API ────────────────────────────────────────────────────────

    @property
    def percent(self) -> float:
        return self._percent

    @property
    def fill_color(self) -> str:
        return self._fill_color.name()

    def set_fill(self, percent: float, color: str) -> None:
        """Set the filled share (clamped to 0..100) and its colour."""
        self._percent = max(0.0, min(100.0, percent))
        self._fill_color = QColor(color)
        self.update()

    def sizeHint(self):  # noqa: N802
        size = super().sizeHint()
        size.setHeight(self.BAR_HEIGHT)
        return size

    # ── painting ──────────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing)
        p.setPen(Qt.PenStyle.NoPen)

        track = QRectF(0, 0, self.width(), self.BAR_HEIGHT)
        p.setBrush(self._track_color)
        p.drawRoundedRect(track, self.CORNER_RADIUS, self.CORNER_RADIUS)

        if self._percent > 0:
            fill = QRectF(0, 0, self.width() * self._percent / 100.0, self.BAR_HEIGHT)
            p.setBrush(self._fill_color)
            p.drawRoundedRect(fill, self.CORNER_RADIUS, self.CORNER_RADIUS)

        p.end()
