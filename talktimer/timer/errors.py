"""Exceptions raised by the timer core."""


class TalkTimerError(Exception):
    """Base class for every error raised by TalkTimer."""


class InvalidDurationError(TalkTimerError, ValueError):
    """A configured duration is not a positive number of seconds."""


class StaleTickError(TalkTimerError, RuntimeError):
    """A tick arrived from a timer the controller no longer owns."""
