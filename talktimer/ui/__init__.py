"""UI package."""

from .timer_widget import TimerWidget, PhaseIndicator
from .progress_bar import PhaseProgressBar

__all__ = [
    "TimerWidget",
    "PhaseIndicator",
    "PhaseProgressBar",
]
