"""TalkTimer: speech and discussion countdown timer."""

__version__ = "0.1.0"
