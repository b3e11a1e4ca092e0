"""Shared test helpers for TalkTimer."""

from talktimer.timer.countdown import CountdownTimer, TICK_INTERVAL_MS


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


def run_ticks(timer: CountdownTimer, count: int) -> None:
    """Deliver *count* ticks by hand (the QTimer never fires in tests)."""
    for _ in range(count):
        timer._on_tick()


def expire(timer: CountdownTimer) -> None:
    """Fast-expire a running timer by jumping to its last tick."""
    timer._remaining_ms = TICK_INTERVAL_MS
    timer._on_tick()
