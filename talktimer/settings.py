"""Application settings.

Settings live in memory for the lifetime of the window; nothing is
written to disk.  Defaults can be overridden from the environment::

    TALKTIMER_SPEECH_SECONDS=420 TALKTIMER_DISCUSSION_SECONDS=180 python -m talktimer

Usage::

    settings = load_settings()
    controller = SessionController(
        settings.speech_duration, settings.discussion_duration,
    )
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Mapping

from .timer.session import (
    DEFAULT_SPEECH_SECONDS,
    DEFAULT_DISCUSSION_SECONDS,
    validate_duration,
)


logger = logging.getLogger(__name__)

_ENV_KEYS: dict[str, str] = {
    "speech_duration": "TALKTIMER_SPEECH_SECONDS",
    "discussion_duration": "TALKTIMER_DISCUSSION_SECONDS",
    "warning_percent": "TALKTIMER_WARNING_PERCENT",
}


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    speech_duration: int = DEFAULT_SPEECH_SECONDS          # seconds
    discussion_duration: int = DEFAULT_DISCUSSION_SECONDS

    # ── progress bar ──────────────────────────────────────────────────
    warning_percent: float = 90.0          # bar turns red at this % elapsed

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False
    window_width: int = 420
    window_height: int = 360

    def __post_init__(self) -> None:
        validate_duration(self.speech_duration, "speech_duration")
        validate_duration(self.discussion_duration, "discussion_duration")
        if not 0 < self.warning_percent <= 100:
            raise ValueError(
                f"warning_percent must be in (0, 100], got {self.warning_percent}"
            )
        for name in ("window_width", "window_height"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build settings from defaults plus any ``TALKTIMER_*`` overrides.

    Values that don't parse are logged and skipped, the default stays.
    """
    env = os.environ if environ is None else environ
    types = {f.name: f.type for f in fields(Settings)}
    overrides: dict[str, object] = {}

    for name, key in _ENV_KEYS.items():
        raw = env.get(key)
        if raw is None or raw.strip() == "":
            continue
        cast = float if types[name] in (float, "float") else int
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning("ignoring %s=%r: not a number", key, raw)
            continue
        if cast is int:
            try:
                validate_duration(value, name)
            except ValueError as exc:
                logger.warning("ignoring %s=%r: %s", key, raw, exc)
                continue
        elif not 0 < value <= 100:
            logger.warning("ignoring %s=%r: out of range", key, raw)
            continue
        overrides[name] = value

    return Settings(**overrides)
