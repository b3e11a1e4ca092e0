"""Shared pytest fixtures for TalkTimer tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from talktimer.timer.session import SessionController  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def controller(qapp):
    """Controller with 60 s speech, 30 s discussion."""
    ctl = SessionController(60, 30)
    yield ctl
    ctl.stop()


@pytest.fixture
def short_controller(qapp):
    """Controller with 1 s speech, 1 s discussion (20 ticks per phase)."""
    ctl = SessionController(1, 1)
    yield ctl
    ctl.stop()
