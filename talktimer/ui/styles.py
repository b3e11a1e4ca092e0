"""QSS stylesheet, phase colours and display helpers for TalkTimer."""

from __future__ import annotations

from ..timer.countdown import TimerSnapshot
from ..timer.session import Phase

# ── phase colours (progress bar fill) ──────────────────────────────────

PHASE_COLORS: dict[Phase, str] = {
    Phase.SPEECH:     "#3B6FE0",   # blue
    Phase.DISCUSSION: "#2FA65A",   # green
    Phase.STOPPED:    "#4A4A5E",   # neutral dim
}

WARNING_COLOR = "#E04848"          # red, last stretch of any phase
WARNING_PERCENT = 90.0

PHASE_LABELS: dict[Phase, str] = {
    Phase.STOPPED:    "STOPPED",
    Phase.SPEECH:     "SPEECH",
    Phase.DISCUSSION: "DISCUSSION",
}

# ── palette ─────────────────────────────────────────────────────────────

PALETTE: dict[str, str] = {
    "bg":           "#1A1A2E",
    "bg_secondary": "#232340",
    "surface":      "#2A2A4A",
    "accent":       "#89B4FA",
    "text":         "#E2E2F0",
    "text_muted":   "#7A7A9A",
    "danger":       "#F38BA8",
    "border":       "#313154",
}


# ── helpers ─────────────────────────────────────────────────────────────


def elapsed_percent(snapshot: TimerSnapshot) -> float:
    """Bar width in percent: share of the phase already used.

    A timer that isn't ticking draws an empty bar.
    """
    if not snapshot.running:
        return 0.0
    return round((1.0 - snapshot.progress) * 100, 2)


def bar_color(
    phase: Phase, elapsed: float, warning_percent: float = WARNING_PERCENT,
) -> str:
    if elapsed >= warning_percent:
        return WARNING_COLOR
    return PHASE_COLORS.get(phase, PHASE_COLORS[Phase.STOPPED])


def format_clock(snapshot: TimerSnapshot) -> str:
    return f"{snapshot.minutes:02d}:{snapshot.seconds:02d}"


def build_stylesheet(palette: dict[str, str] | None = None) -> str:
    p = palette or PALETTE
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['bg']};
        color: {p['text']};
        font-family: "Helvetica Neue", Arial;
        font-size: 14px;
    }}

    QMainWindow {{
        background-color: {p['bg']};
    }}

    /* ── clock ──────────────────────────────────── */
    QLabel#clockLabel {{
        font-size: 64px;
        font-weight: 700;
    }}

    QLabel#phaseLabel {{
        color: {p['text_muted']};
        font-size: 13px;
        font-weight: 600;
        letter-spacing: 2px;
    }}

    /* ── duration inputs ─────────────────────────── */
    QSpinBox {{
        background-color: {p['bg_secondary']};
        border: 1px solid {p['border']};
        border-radius: 6px;
        padding: 4px 8px;
    }}

    /* ── toggle button ───────────────────────────── */
    QPushButton#toggleButton {{
        background-color: {p['accent']};
        color: {p['bg']};
        border: none;
        border-radius: 10px;
        padding: 10px 32px;
        font-size: 15px;
        font-weight: 700;
    }}

    QPushButton#toggleButton[running="true"] {{
        background-color: {p['danger']};
    }}
    """
