"""Timer package."""

from .countdown import (
    CountdownTimer,
    Remaining,
    TimerSnapshot,
    TICK_INTERVAL_MS,
)
from .errors import InvalidDurationError, StaleTickError, TalkTimerError
from .session import (
    SessionController,
    Phase,
    DEFAULT_SPEECH_SECONDS,
    DEFAULT_DISCUSSION_SECONDS,
    MIN_DURATION_SECONDS,
    validate_duration,
)

__all__ = [
    "CountdownTimer",
    "Remaining",
    "TimerSnapshot",
    "TICK_INTERVAL_MS",
    "InvalidDurationError",
    "StaleTickError",
    "TalkTimerError",
    "SessionController",
    "Phase",
    "DEFAULT_SPEECH_SECONDS",
    "DEFAULT_DISCUSSION_SECONDS",
    "MIN_DURATION_SECONDS",
    "validate_duration",
]
